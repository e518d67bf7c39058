# SPDX-License-Identifier: MIT
"""Build file generators for makegen."""

from makegen.generators.generator import BaseGenerator, Generator
from makegen.generators.makefile import MakefileGenerator

__all__ = [
    "BaseGenerator",
    "Generator",
    "MakefileGenerator",
]
