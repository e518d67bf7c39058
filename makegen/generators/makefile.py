# SPDX-License-Identifier: MIT
"""GNU Makefile generator.

Renders a Project as a self-contained Makefile: compiler settings, one
SRC/OBJ/LIB-or-EXE variable block per target, link rules, a pattern rule
for compiling sources, and clean/install/uninstall/dist targets.
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TextIO

from makegen.core.sources import SOURCE_SUFFIX
from makegen.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from makegen.core.project import Project
    from makegen.core.settings import ProjectSettings
    from makegen.core.target import Target

ARCHIVE_RECIPE = "$(AR) rcs $@ $^"
LINK_RECIPE = "$(CC) $(CFLAGS) -o $@ $^ $(LDFLAGS)"
COMPILE_RECIPE = "$(CC) $(CFLAGS) -c -o $@ $<"
DIST_RECIPE = "cd .. && tar cvzf $(SRCDIR).tgz ./$(SRCDIR)"
BIN_DIR = "$(DESTDIR)$(PREFIX)/bin"


class MakefileGenerator(BaseGenerator):
    """Generator that produces a GNU Makefile.

    Example output for one executable built from main.c:
        CC = gcc
        CFLAGS = -O2
        LDFLAGS = -lm

        SRCDIR = $(shell basename $(shell pwd))
        DESTDIR ?=
        PREFIX ?= /usr

        SRC0 = main.c
        OBJ0 = $(SRC0:%.c=%.c.o)
        EXE0 = hello

        all: $(EXE0)

        $(EXE0): $(OBJ0)
        	$(CC) $(CFLAGS) -o $@ $^ $(LDFLAGS)
        ...

    Usage:
        generator = MakefileGenerator()
        text = generator.render(project)
        generator.generate(project, "Makefile")
    """

    def __init__(self) -> None:
        super().__init__("make")

    def render(self, project: Project) -> str:
        """Render the Makefile text for a project.

        The output depends only on the project settings and targets, so
        rendering the same project twice gives identical text.
        """
        return self.render_targets(project.settings, project.targets, project.suffix)

    def render_targets(
        self,
        settings: ProjectSettings,
        targets: Sequence[Target],
        suffix: str = SOURCE_SUFFIX,
    ) -> str:
        """Render the Makefile text for settings and an indexed target list.

        Targets are written in the order given; their indices are expected
        to run 0..N-1 in that order, as Project guarantees.
        """
        f = io.StringIO()
        # Libraries are never installed.
        executables = [t for t in targets if t.is_executable]

        self._write_header(f, settings)
        for target in targets:
            self._write_variables(f, target, suffix)
        self._write_all(f, targets)
        for target in targets:
            self._write_link_rule(f, target)
        self._write_rule(f, f"%{suffix}.o", f"%{suffix}", COMPILE_RECIPE)
        f.write("\n")
        self._write_clean(f, targets)
        self._write_install(f, executables)
        self._write_uninstall(f, executables)
        self._write_rule(f, "dist", "", DIST_RECIPE)
        return f.getvalue()

    def _write_header(self, f: TextIO, settings: ProjectSettings) -> None:
        f.write(f"CC = {settings.compiler}\n")
        f.write(f"CFLAGS = {settings.compile_flags}\n")
        f.write(f"LDFLAGS = {settings.link_flags}\n")
        f.write("\n")
        f.write("SRCDIR = $(shell basename $(shell pwd))\n")
        f.write("DESTDIR ?=\n")
        f.write("PREFIX ?= /usr\n")
        f.write("\n")

    def _write_variables(self, f: TextIO, target: Target, suffix: str) -> None:
        src = target.src_var
        f.write(f"{src} = {' '.join(target.sources)}\n")
        f.write(f"{target.obj_var} = $({src}:%{suffix}=%{suffix}.o)\n")
        f.write(f"{target.out_var} = {target.output_name}\n")
        f.write("\n")

    def _write_all(self, f: TextIO, targets: Sequence[Target]) -> None:
        self._write_rule(f, "all", _refs(t.out_var for t in targets))
        f.write("\n")

    def _write_link_rule(self, f: TextIO, target: Target) -> None:
        recipe = ARCHIVE_RECIPE if target.is_library else LINK_RECIPE
        self._write_rule(f, f"$({target.out_var})", f"$({target.obj_var})", recipe)
        f.write("\n")

    def _write_clean(self, f: TextIO, targets: Sequence[Target]) -> None:
        files = " ".join(f"$({t.obj_var}) $({t.out_var})" for t in targets)
        self._write_rule(f, "clean", "", f"rm -f {files}".rstrip())
        f.write("\n")

    def _write_install(self, f: TextIO, executables: Sequence[Target]) -> None:
        recipe = None
        if executables:
            recipe = f"cp {_refs(t.out_var for t in executables)} {BIN_DIR}"
        self._write_rule(f, "install", "", recipe)
        f.write("\n")

    def _write_uninstall(self, f: TextIO, executables: Sequence[Target]) -> None:
        recipe = None
        if executables:
            recipe = "rm -f " + " ".join(
                f"{BIN_DIR}/$({t.out_var})" for t in executables
            )
        self._write_rule(f, "uninstall", "", recipe)
        f.write("\n")

    def _write_rule(
        self, f: TextIO, name: str, prereqs: str, recipe: str | None = None
    ) -> None:
        f.write(f"{name}: {prereqs}\n" if prereqs else f"{name}:\n")
        if recipe:
            f.write(f"\t{recipe}\n")


def _refs(names: Iterable[str]) -> str:
    return " ".join(f"$({name})" for name in names)
