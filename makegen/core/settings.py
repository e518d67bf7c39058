# SPDX-License-Identifier: MIT
"""Global settings shared by every target of a generated Makefile."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OUTPUT_FILENAME = "Makefile"


@dataclass(frozen=True)
class ProjectSettings:
    """Settings written to the Makefile header.

    The compiler and flag strings are inserted verbatim; nothing is
    validated or quoted.

    Attributes:
        compiler: Value of CC.
        compile_flags: Value of CFLAGS.
        link_flags: Value of LDFLAGS.
        output_filename: Where the rendered Makefile is written.
    """

    compiler: str = "cc"
    compile_flags: str = ""
    link_flags: str = ""
    output_filename: str = DEFAULT_OUTPUT_FILENAME
