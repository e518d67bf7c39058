# SPDX-License-Identifier: MIT
"""Source file discovery.

Lists the files in a single directory whose names end with a source
suffix. Subdirectories are not descended into.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from makegen.core.errors import DirectoryUnavailable

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".c"


def list_sources(
    directory: str | None = None, suffix: str = SOURCE_SUFFIX
) -> Iterator[str]:
    """List source files in a directory.

    The directory is read when this function is called, so a missing or
    unreadable directory fails immediately rather than on first iteration.
    Matching names are then yielded lazily, in directory order.

    Args:
        directory: Directory to scan. None or "" means the current
            directory, in which case names are yielded unqualified.
        suffix: Exact filename suffix to match (e.g. ".c").

    Returns:
        Iterator of "directory/name" paths, or bare names for the
        current directory.

    Raises:
        DirectoryUnavailable: If the directory cannot be opened.
    """
    try:
        entries = os.listdir(directory or ".")
    except OSError as e:
        raise DirectoryUnavailable(directory or ".", e.strerror) from e

    logger.debug("Scanning %s: %d entries", directory or ".", len(entries))
    return _matching(entries, directory, suffix)


def _matching(entries: list[str], directory: str | None, suffix: str) -> Iterator[str]:
    for name in entries:
        if not name.endswith(suffix):
            continue
        if directory:
            yield f"{directory}/{name}"
        else:
            yield name
