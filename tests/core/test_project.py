# SPDX-License-Identifier: MIT
"""Tests for makegen.core.project."""

import pytest

from makegen.core.errors import DirectoryUnavailable, EmptySourceSet
from makegen.core.project import Project
from makegen.core.settings import ProjectSettings
from makegen.core.target import TargetKind


class TestProjectCreation:
    def test_defaults(self):
        project = Project()

        assert project.settings == ProjectSettings()
        assert project.settings.output_filename == "Makefile"
        assert project.suffix == ".c"
        assert len(project) == 0
        assert project.targets == ()

    def test_settings(self):
        settings = ProjectSettings(compiler="gcc", compile_flags="-O2")
        project = Project(settings)

        assert project.settings.compiler == "gcc"
        assert project.settings.compile_flags == "-O2"


class TestAddFromSources:
    def test_first_target(self):
        project = Project()

        target = project.add_from_sources(
            "foo.c bar.c", library=False, output_name="foo"
        )

        assert target.index == 0
        assert target.kind is TargetKind.EXECUTABLE
        assert target.sources == ("foo.c bar.c",)
        assert target.output_name == "foo"
        assert project.targets == (target,)

    def test_raw_string_kept_verbatim(self):
        project = Project()

        target = project.add_from_sources(
            "src/*.c $(EXTRA_SRC)", library=True, output_name="libx.a"
        )

        assert target.sources == ("src/*.c $(EXTRA_SRC)",)

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty_rejected(self, raw):
        project = Project()
        project.add_from_sources("a.c", library=False, output_name="a")

        with pytest.raises(EmptySourceSet) as exc_info:
            project.add_from_sources(raw, library=False, output_name="b")

        assert exc_info.value.output_name == "b"
        assert len(project) == 1


class TestAddFromDirectory:
    def test_scans_directory(self, tmp_path):
        for name in ("a.c", "b.c", "readme.txt"):
            (tmp_path / name).write_text("")
        project = Project()

        target = project.add_from_directory(
            str(tmp_path), library=True, output_name="liba.a"
        )

        assert target.index == 0
        assert target.is_library
        assert sorted(target.sources) == [f"{tmp_path}/a.c", f"{tmp_path}/b.c"]

    def test_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / "main.c").write_text("")
        monkeypatch.chdir(tmp_path)
        project = Project()

        target = project.add_from_directory(None, library=False, output_name="app")

        assert target.sources == ("main.c",)

    def test_missing_directory(self, tmp_path):
        project = Project()

        with pytest.raises(DirectoryUnavailable):
            project.add_from_directory(
                str(tmp_path / "missing"), library=False, output_name="app"
            )

        assert len(project) == 0

    def test_no_sources_found(self, tmp_path):
        (tmp_path / "readme.txt").write_text("")
        project = Project()

        with pytest.raises(EmptySourceSet):
            project.add_from_directory(str(tmp_path), library=False, output_name="app")

        assert len(project) == 0

    def test_custom_suffix(self, tmp_path):
        (tmp_path / "main.cc").write_text("")
        (tmp_path / "old.c").write_text("")
        project = Project(suffix=".cc")

        target = project.add_from_directory(
            str(tmp_path), library=False, output_name="app"
        )

        assert target.sources == (f"{tmp_path}/main.cc",)


class TestScan:
    def test_scan_then_add(self, tmp_path):
        (tmp_path / "a.c").write_text("")
        project = Project()

        sources = project.scan(str(tmp_path))
        target = project.add_scanned(sources, library=True, output_name="liba.a")

        assert sources == (f"{tmp_path}/a.c",)
        assert target.index == 0
        assert target.is_library
        assert target.sources == sources

    def test_scan_missing_directory_appends_nothing(self, tmp_path):
        project = Project()

        with pytest.raises(DirectoryUnavailable):
            project.scan(str(tmp_path / "missing"))

        assert len(project) == 0

    def test_add_empty_scan(self):
        project = Project()

        with pytest.raises(EmptySourceSet) as exc_info:
            project.add_scanned((), library=False, output_name="app")

        assert exc_info.value.output_name == "app"
        assert len(project) == 0


class TestTargetOrdering:
    def test_indices_contiguous(self, tmp_path):
        (tmp_path / "x.c").write_text("")
        project = Project()

        project.add_from_sources("a.c", library=True, output_name="liba.a")
        project.add_from_directory(str(tmp_path), library=False, output_name="x")
        project.add_from_sources("b.c", library=False, output_name="b")

        assert [t.index for t in project] == [0, 1, 2]

    def test_failed_append_does_not_consume_index(self, tmp_path):
        project = Project()
        project.add_from_sources("a.c", library=False, output_name="a")

        with pytest.raises(DirectoryUnavailable):
            project.add_from_directory(
                str(tmp_path / "missing"), library=False, output_name="m"
            )
        target = project.add_from_sources("b.c", library=False, output_name="b")

        assert target.index == 1

    def test_targets_is_snapshot(self):
        project = Project()
        project.add_from_sources("a.c", library=False, output_name="a")

        snapshot = project.targets
        project.add_from_sources("b.c", library=False, output_name="b")

        assert len(snapshot) == 1
        assert len(project.targets) == 2
