# SPDX-License-Identifier: MIT
"""Target abstraction for generated Makefiles.

A Target is one library or executable. Its zero-based index keys every
Makefile variable generated for it (SRC<i>, OBJ<i>, LIB<i> or EXE<i>),
so targets are only ever created by Project in append order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from makegen.core.errors import MakegenError


class TargetKind(Enum):
    """What a target produces."""

    LIBRARY = "library"
    EXECUTABLE = "executable"

    @property
    def prefix(self) -> str:
        """Makefile variable prefix for the target's output."""
        return "LIB" if self is TargetKind.LIBRARY else "EXE"

    @classmethod
    def from_flag(cls, library: bool) -> TargetKind:
        return cls.LIBRARY if library else cls.EXECUTABLE


@dataclass(frozen=True)
class Target:
    """A buildable unit in the generated Makefile.

    Example:
        target = Target(0, TargetKind.EXECUTABLE, ("main.c",), "hello")
        target.src_var  # "SRC0"
        target.out_var  # "EXE0"

    Attributes:
        index: Position in the project's target sequence.
        kind: Library or executable.
        sources: Source paths. A manually typed list is kept as one
            opaque element holding the raw string.
        output_name: Name of the library or executable produced.
    """

    index: int
    kind: TargetKind
    sources: tuple[str, ...]
    output_name: str

    def __post_init__(self) -> None:
        if self.index < 0:
            raise MakegenError(f"invalid target index: {self.index}")
        if not self.output_name:
            raise MakegenError("target output name must not be empty")

    @property
    def is_library(self) -> bool:
        return self.kind is TargetKind.LIBRARY

    @property
    def is_executable(self) -> bool:
        return self.kind is TargetKind.EXECUTABLE

    @property
    def src_var(self) -> str:
        return f"SRC{self.index}"

    @property
    def obj_var(self) -> str:
        return f"OBJ{self.index}"

    @property
    def out_var(self) -> str:
        return f"{self.kind.prefix}{self.index}"

    def __str__(self) -> str:
        return f"{self.out_var} ({self.kind.value} '{self.output_name}')"
