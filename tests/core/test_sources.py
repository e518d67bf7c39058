# SPDX-License-Identifier: MIT
"""Tests for makegen.core.sources."""

from pathlib import Path

import pytest

from makegen.core.errors import DirectoryUnavailable
from makegen.core.sources import list_sources


def make_files(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("")


class TestListSources:
    def test_matches_c_files_only(self, tmp_path):
        make_files(tmp_path, "a.c", "b.c", "readme.txt")

        result = list(list_sources(str(tmp_path)))

        assert sorted(result) == [f"{tmp_path}/a.c", f"{tmp_path}/b.c"]

    def test_exact_suffix_match(self, tmp_path):
        """Names that merely contain the suffix are not sources."""
        make_files(tmp_path, "main.c", "foo.cache", "bar.c.bak", "baz.cpp", "x.h")

        result = list(list_sources(str(tmp_path)))

        assert result == [f"{tmp_path}/main.c"]

    def test_directory_qualified(self, tmp_path):
        src = tmp_path / "src"
        src.mkdir()
        make_files(src, "util.c")

        assert list(list_sources(str(src))) == [f"{src}/util.c"]

    def test_current_directory_unqualified(self, tmp_path, monkeypatch):
        make_files(tmp_path, "main.c", "notes.md")
        monkeypatch.chdir(tmp_path)

        assert list(list_sources()) == ["main.c"]
        assert list(list_sources("")) == ["main.c"]

    def test_relative_directory(self, tmp_path, monkeypatch):
        (tmp_path / "lib").mkdir()
        make_files(tmp_path / "lib", "lib.c")
        monkeypatch.chdir(tmp_path)

        assert list(list_sources("lib")) == ["lib/lib.c"]

    def test_custom_suffix(self, tmp_path):
        make_files(tmp_path, "a.c", "b.cc")

        assert list(list_sources(str(tmp_path), ".cc")) == [f"{tmp_path}/b.cc"]

    def test_empty_directory(self, tmp_path):
        assert list(list_sources(str(tmp_path))) == []

    def test_does_not_recurse(self, tmp_path):
        (tmp_path / "sub").mkdir()
        make_files(tmp_path / "sub", "deep.c")

        assert list(list_sources(str(tmp_path))) == []


class TestListSourcesErrors:
    def test_missing_directory(self, tmp_path):
        missing = tmp_path / "nope"

        with pytest.raises(DirectoryUnavailable) as exc_info:
            list_sources(str(missing))

        assert exc_info.value.directory == str(missing)
        assert "nope" in str(exc_info.value)

    def test_fails_before_iteration(self, tmp_path):
        """The error is raised by the call itself, not on first next()."""
        with pytest.raises(DirectoryUnavailable):
            list_sources(str(tmp_path / "nope"))

    def test_file_is_not_a_directory(self, tmp_path):
        make_files(tmp_path, "main.c")

        with pytest.raises(DirectoryUnavailable):
            list_sources(str(tmp_path / "main.c"))
