# SPDX-License-Identifier: MIT
"""Command-line interface for makegen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from makegen.configure.config import Configure
from makegen.core.errors import ConfigureError, FileUnwritable
from makegen.session import ConsolePrompter, Session

# Set up logging
logger = logging.getLogger("makegen")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def cmd_generate(args: argparse.Namespace) -> int:
    """Run the interactive session and write the Makefile.

    Returns:
        0 on success, 1 if configuration or the output file failed or
        input ended early, 130 if interrupted.
    """
    setup_logging(args.verbose, args.debug)

    try:
        config = Configure(config_file=Path(args.config) if args.config else None)
    except ConfigureError as e:
        logger.error("%s", e)
        return 1

    session = Session(ConsolePrompter(), config)
    try:
        project = session.run(output=args.output)
    except FileUnwritable as e:
        logger.error("%s", e)
        return 1
    except EOFError:
        print(file=sys.stderr)
        logger.error("Input ended before the Makefile was complete")
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        logger.error("Interrupted")
        return 130

    print(f"Total targets processed: {len(project)}", file=sys.stderr)
    if len(project) > 0:
        print("Makefile generation done.", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the makegen CLI."""
    parser = argparse.ArgumentParser(
        prog="makegen",
        description="Interactively generate a GNU Makefile for a C project.",
    )
    from makegen import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Makefile to write (skips the filename question)",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="TOML file with prompt defaults (default: ./makegen.toml if present)",
    )

    args = parser.parse_args(argv)
    return cmd_generate(args)


if __name__ == "__main__":
    sys.exit(main())
