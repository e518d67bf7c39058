# SPDX-License-Identifier: MIT
"""Interactive session that builds a Makefile from operator answers.

The session asks for the output file and compiler settings, then collects
targets until the operator is done, then renders the Makefile once. All
terminal I/O goes through a Prompter so the session can be scripted.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from makegen.configure.config import Configure
from makegen.core.errors import DirectoryUnavailable, EmptySourceSet, MakegenError
from makegen.core.project import Project
from makegen.core.settings import ProjectSettings
from makegen.generators.makefile import MakefileGenerator

logger = logging.getLogger(__name__)

# Answer that clears a configured flags default
CLEAR_ANSWER = "-"


@runtime_checkable
class Prompter(Protocol):
    """Source of operator answers."""

    def ask_yes_no(self, prompt: str) -> bool:
        """Ask a yes/no question."""
        ...

    def ask_line(self, prompt: str) -> str:
        """Ask for one line of text, without the trailing newline."""
        ...


class ConsolePrompter:
    """Prompter reading from standard input.

    EOFError from input() is propagated to the caller.
    """

    def ask_line(self, prompt: str) -> str:
        return input(prompt)

    def ask_yes_no(self, prompt: str) -> bool:
        # Only the first character counts; anything else asks again.
        while True:
            answer = input(prompt).strip()
            if answer[:1] in ("y", "Y"):
                return True
            if answer[:1] in ("n", "N"):
                return False


class SessionState(Enum):
    COLLECTING_SETTINGS = "collecting_settings"
    COLLECTING_TARGETS = "collecting_targets"
    RENDERED = "rendered"


class Session:
    """One run of the Makefile questionnaire.

    Example:
        session = Session(ConsolePrompter())
        project = session.run()

    Attributes:
        state: Current phase. RENDERED is final.
        project: The project being built, once settings are known.
    """

    def __init__(
        self,
        prompter: Prompter,
        config: Configure | None = None,
        generator: MakefileGenerator | None = None,
    ) -> None:
        self.prompter = prompter
        self.config = config or Configure()
        self.generator = generator or MakefileGenerator()
        self.state = SessionState.COLLECTING_SETTINGS
        self.project: Project | None = None

    def run(self, output: str | None = None) -> Project:
        """Run the whole session and write the Makefile.

        Args:
            output: Output filename; asked for when None.

        Returns:
            The finished project.

        Raises:
            FileUnwritable: If the output file cannot be opened. This is
                checked before any other question is asked.
            MakegenError: If the session has already rendered.
        """
        if self.state is SessionState.RENDERED:
            raise MakegenError("session already rendered")

        filename = output or self._ask_default("Enter filename", "output")
        with self.generator.open(filename) as f:
            settings = self._collect_settings(filename)
            self.project = Project(settings)

            self.state = SessionState.COLLECTING_TARGETS
            self._collect_targets(self.project)

            self.generator.write(f, self.generator.render(self.project), filename)
            self.state = SessionState.RENDERED

        return self.project

    def _collect_settings(self, filename: str) -> ProjectSettings:
        compiler = self._ask_default("Enter executable name (compiler)", "compiler")
        compile_flags = self._ask_default("Enter compiler flags", "cflags", True)
        link_flags = self._ask_default("Enter linker flags", "ldflags", True)

        if compiler and self.config.find_program(compiler) is None:
            logger.warning("Compiler '%s' not found in PATH", compiler)

        return ProjectSettings(
            compiler=compiler,
            compile_flags=compile_flags,
            link_flags=link_flags,
            output_filename=filename,
        )

    def _collect_targets(self, project: Project) -> None:
        while True:
            if self.prompter.ask_yes_no(
                "Do you want to enter a source directory (Y/N)? "
            ):
                self._add_directory_target(project)
            else:
                self._add_manual_target(project)

            if not self.prompter.ask_yes_no("Do you want to generate another (Y/N)? "):
                break

    def _add_directory_target(self, project: Project) -> None:
        directory = self.prompter.ask_line(
            "Enter source directory (blank for current): "
        )
        try:
            sources = project.scan(directory or None)
        except DirectoryUnavailable as e:
            logger.error("%s", e)
            return

        library = self.prompter.ask_yes_no("Are you making a library (Y/N)? ")
        name = self._ask_required("Enter program name: ")
        try:
            project.add_scanned(sources, library=library, output_name=name)
        except EmptySourceSet as e:
            logger.error("%s", e)

    def _add_manual_target(self, project: Project) -> None:
        sources = self._ask_required("Enter source files: ")
        library = self.prompter.ask_yes_no("Are you making a library (Y/N)? ")
        name = self._ask_required("Enter program name: ")
        project.add_from_sources(sources, library=library, output_name=name)

    def _ask_default(self, label: str, key: str, clearable: bool = False) -> str:
        # A blank answer keeps the default; "-" clears a clearable one.
        default = self.config.get(key)
        prompt = f"{label} [{default}]: " if default else f"{label}: "
        answer = self.prompter.ask_line(prompt)
        if clearable and answer.strip() == CLEAR_ANSWER:
            return ""
        return answer or default or ""

    def _ask_required(self, prompt: str) -> str:
        answer = self.prompter.ask_line(prompt)
        while not answer.strip():
            answer = self.prompter.ask_line(prompt)
        return answer
