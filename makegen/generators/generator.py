# SPDX-License-Identifier: MIT
"""Generator protocol for build file generation.

Generators take a Project and produce the text of a build file. Rendering
is pure; writing the result to disk is a separate step.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

from makegen.core.errors import FileUnwritable

if TYPE_CHECKING:
    from makegen.core.project import Project

logger = logging.getLogger(__name__)


@runtime_checkable
class Generator(Protocol):
    """Protocol for build file generators."""

    @property
    def name(self) -> str:
        """Generator name (e.g., 'make')."""
        ...

    def render(self, project: Project) -> str:
        """Return the build file text for a project."""
        ...

    def generate(self, project: Project, path: Path | str) -> None:
        """Render a project and write it to path."""
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def render(self, project: Project) -> str:
        """Render build file text. Subclasses must implement."""
        raise NotImplementedError

    def open(self, path: Path | str) -> TextIO:
        """Create or truncate the output file.

        Raises:
            FileUnwritable: If the file cannot be opened for writing.
        """
        try:
            return open(path, "w")
        except OSError as e:
            raise FileUnwritable(str(path), e.strerror) from e

    def generate(self, project: Project, path: Path | str) -> None:
        """Render a project and write it to path.

        Raises:
            FileUnwritable: If the file cannot be opened or written.
        """
        text = self.render(project)
        with self.open(path) as f:
            self.write(f, text, path)

    def write(self, f: TextIO, text: str, path: Path | str) -> None:
        """Write rendered text to an already opened output file."""
        try:
            f.write(text)
        except OSError as e:
            raise FileUnwritable(str(path), e.strerror) from e
        logger.info("Wrote %s (%d bytes)", path, len(text))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
