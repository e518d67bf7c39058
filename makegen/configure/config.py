# SPDX-License-Identifier: MIT
"""Configure context for makegen.

The Configure class holds the defaults offered at each prompt of an
interactive session and looks up programs on PATH.

Defaults come from an optional TOML file:

    [defaults]
    output = "Makefile"
    compiler = "gcc"
    cflags = "-Wall -O2"
    ldflags = "-lm"
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

from makegen.core.errors import ConfigureError
from makegen.core.settings import DEFAULT_OUTPUT_FILENAME

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "makegen.toml"

# Keys accepted under [defaults]
DEFAULT_KEYS = ("output", "compiler", "cflags", "ldflags")


@dataclass
class ProgramInfo:
    """Information about a found program.

    Attributes:
        name: Name that was searched for.
        path: Path to the program executable.
    """

    name: str
    path: Path


class Configure:
    """Prompt defaults and program lookup.

    Example:
        config = Configure(config_file=Path("makegen.toml"))
        config.get("compiler")          # "gcc", or None
        config.find_program("gcc")      # ProgramInfo or None

    Attributes:
        config_file: The file defaults were loaded from, if any.
    """

    def __init__(
        self,
        *,
        config_file: Path | str | None = None,
        search_dir: Path | None = None,
    ) -> None:
        """Create a configure context.

        Args:
            config_file: Explicit TOML file to load. It must exist.
            search_dir: Directory searched for makegen.toml when no
                config_file is given (default: current directory).
        """
        self._defaults: dict[str, str] = {"output": DEFAULT_OUTPUT_FILENAME}
        self._programs: dict[str, ProgramInfo | None] = {}
        self.config_file: Path | None = None

        if config_file is not None:
            path = Path(config_file)
            if not path.is_file():
                raise ConfigureError(f"config file not found: {path}")
            self._load(path)
        else:
            candidate = (search_dir or Path.cwd()) / CONFIG_FILENAME
            if candidate.is_file():
                self._load(candidate)

    def _load(self, path: Path) -> None:
        """Load [defaults] from a TOML file."""
        try:
            with open(path, "rb") as f:
                data: dict[str, Any] = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            raise ConfigureError(f"cannot read config file {path}: {e}") from e

        defaults = data.get("defaults", {})
        if not isinstance(defaults, dict):
            raise ConfigureError(f"{path}: [defaults] must be a table")

        for key, value in defaults.items():
            if key not in DEFAULT_KEYS:
                logger.debug("Ignoring unknown config key %r in %s", key, path)
                continue
            if not isinstance(value, str):
                raise ConfigureError(f"{path}: '{key}' must be a string")
            self._defaults[key] = value

        self.config_file = path
        logger.info("Loaded defaults from %s", path)

    def set(self, key: str, value: str) -> None:
        """Set a default value."""
        self._defaults[key] = value

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a default value.

        Args:
            key: One of output, compiler, cflags, ldflags.
            default: Returned when the key has no default.
        """
        return self._defaults.get(key, default)

    def find_program(self, name: str) -> ProgramInfo | None:
        """Find a program on PATH.

        Results are cached per name, including misses.

        Args:
            name: Program name or path (e.g., 'gcc', '/usr/bin/clang').

        Returns:
            ProgramInfo if found, None otherwise.
        """
        if name in self._programs:
            return self._programs[name]

        found = shutil.which(name)
        info = ProgramInfo(name=name, path=Path(found)) if found else None
        if info:
            logger.debug("Found %s at %s", name, info.path)
        else:
            logger.debug("Program not found: %s", name)
        self._programs[name] = info
        return info
