# SPDX-License-Identifier: MIT
"""
Makegen: an interactive GNU Makefile generator.

Makegen asks a few questions about a C project (compiler, flags, and the
libraries and executables to build) and writes a Makefile with build,
clean, install, uninstall and dist targets.
"""

from __future__ import annotations

from makegen.core.errors import (
    DirectoryUnavailable,
    EmptySourceSet,
    FileUnwritable,
    MakegenError,
)
from makegen.core.project import Project
from makegen.core.settings import ProjectSettings
from makegen.core.sources import list_sources
from makegen.core.target import Target, TargetKind
from makegen.generators.makefile import MakefileGenerator

__version__ = "0.1.0"

# Public API exports
__all__ = [
    "__version__",
    # Core classes
    "Project",
    "ProjectSettings",
    "Target",
    "TargetKind",
    "list_sources",
    # Generators
    "MakefileGenerator",
    # Errors
    "MakegenError",
    "DirectoryUnavailable",
    "EmptySourceSet",
    "FileUnwritable",
]
