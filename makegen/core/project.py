# SPDX-License-Identifier: MIT
"""Project: the ordered collection of targets for one Makefile.

A Project is created once per session, receives targets through
add_from_directory() (or scan() then add_scanned()) and add_from_sources(),
and is then handed to a generator for rendering. Targets are never edited
or removed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from makegen.core.errors import EmptySourceSet
from makegen.core.settings import ProjectSettings
from makegen.core.sources import SOURCE_SUFFIX, list_sources
from makegen.core.target import Target, TargetKind

logger = logging.getLogger(__name__)


class Project:
    """Settings plus the targets of a generated Makefile.

    Example:
        project = Project(ProjectSettings(compiler="gcc"))
        project.add_from_directory("src", library=True, output_name="libfoo.a")
        project.add_from_sources("main.c", library=False, output_name="foo")

        text = MakefileGenerator().render(project)

    Attributes:
        settings: Global compiler/flag settings.
        suffix: Source suffix used for directory scans.
    """

    def __init__(
        self,
        settings: ProjectSettings | None = None,
        *,
        suffix: str = SOURCE_SUFFIX,
    ) -> None:
        self.settings = settings or ProjectSettings()
        self.suffix = suffix
        self._targets: list[Target] = []

    @property
    def targets(self) -> tuple[Target, ...]:
        """Targets in append order."""
        return tuple(self._targets)

    def add_from_directory(
        self,
        directory: str | None,
        *,
        library: bool,
        output_name: str,
    ) -> Target:
        """Add a target built from every source file in a directory.

        Args:
            directory: Directory to scan; None or "" for the current one.
            library: True for a library, False for an executable.
            output_name: Library or executable name.

        Returns:
            The appended target.

        Raises:
            DirectoryUnavailable: If the directory cannot be opened.
            EmptySourceSet: If no source file was found.
        """
        return self.add_scanned(
            self.scan(directory), library=library, output_name=output_name
        )

    def scan(self, directory: str | None) -> tuple[str, ...]:
        """List the source files of a directory with the project suffix.

        Raises:
            DirectoryUnavailable: If the directory cannot be opened.
        """
        return tuple(list_sources(directory, self.suffix))

    def add_scanned(
        self,
        sources: Sequence[str],
        *,
        library: bool,
        output_name: str,
    ) -> Target:
        """Add a target from the result of scan().

        Raises:
            EmptySourceSet: If the scan found no source file.
        """
        if not sources:
            raise EmptySourceSet(output_name)
        return self._append(TargetKind.from_flag(library), tuple(sources), output_name)

    def add_from_sources(
        self,
        raw_sources: str,
        *,
        library: bool,
        output_name: str,
    ) -> Target:
        """Add a target from a source list typed by the operator.

        The string is written after "SRC<i> = " exactly as given; it is
        not split or checked.

        Raises:
            EmptySourceSet: If the string is empty or whitespace only.
        """
        if not raw_sources.strip():
            raise EmptySourceSet(output_name)
        return self._append(TargetKind.from_flag(library), (raw_sources,), output_name)

    def _append(
        self, kind: TargetKind, sources: tuple[str, ...], output_name: str
    ) -> Target:
        target = Target(len(self._targets), kind, sources, output_name)
        self._targets.append(target)
        logger.info("Added %s with %d source entries", target, len(sources))
        return target

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self._targets)

    def __repr__(self) -> str:
        return f"Project({self.settings!r}, targets={len(self._targets)})"
