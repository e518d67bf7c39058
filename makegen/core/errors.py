# SPDX-License-Identifier: MIT
"""Custom exceptions for makegen.

All makegen exceptions inherit from MakegenError. Every one of them is
recoverable by the operator: the interactive session reports it and asks
again, except for FileUnwritable on the initial output open.
"""

from __future__ import annotations


class MakegenError(Exception):
    """Base class for all makegen exceptions.

    Attributes:
        message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigureError(MakegenError):
    """Error while loading configuration defaults."""


class DirectoryUnavailable(MakegenError):
    """A directory to scan for sources cannot be opened.

    Attributes:
        directory: The directory that could not be opened.
    """

    def __init__(self, directory: str, reason: str | None = None) -> None:
        self.directory = directory
        message = f"cannot open directory '{directory}' for reading"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptySourceSet(MakegenError):
    """A target would have no source files.

    Attributes:
        output_name: Name of the target being added, if known.
    """

    def __init__(self, output_name: str | None = None) -> None:
        self.output_name = output_name
        if output_name:
            super().__init__(f"no source files for target '{output_name}'")
        else:
            super().__init__("no source files given")


class FileUnwritable(MakegenError):
    """The output file cannot be created.

    Attributes:
        path: The destination path.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        message = f"cannot open '{path}' for writing"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
