"""Tests for file discovery under a scan root."""

from pathlib import Path

import pytest

from hardcoded_detector.config.schema import DEFAULT_EXCLUDE
from hardcoded_detector.scanner.discovery import ScanRootError, discover_files, is_excluded


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x = 1\n")


class TestDiscoverFiles:
    def test_sorted_and_recursive(self, tmp_path: Path):
        _touch(tmp_path, "b.py", "a.py", "pkg/c.py")
        found = [p.relative_to(tmp_path).as_posix() for p in discover_files(tmp_path)]
        assert found == ["a.py", "b.py", "pkg/c.py"]

    def test_default_excludes(self, tmp_path: Path):
        _touch(tmp_path, "app.py", "node_modules/dep/index.js", ".git/config", "build/out.js")
        found = [p.name for p in discover_files(tmp_path, exclude=DEFAULT_EXCLUDE)]
        assert found == ["app.py"]

    def test_nested_excluded_directory(self, tmp_path: Path):
        _touch(tmp_path, "web/node_modules/dep.js", "web/app.js")
        found = [p.name for p in discover_files(tmp_path, exclude=DEFAULT_EXCLUDE)]
        assert found == ["app.js"]

    def test_include_globs(self, tmp_path: Path):
        _touch(tmp_path, "a.py", "b.js", "pkg/c.py")
        found = [p.name for p in discover_files(tmp_path, include=["*.py"])]
        assert found == ["a.py", "c.py"]

    def test_double_star_include_matches_root_files(self, tmp_path: Path):
        _touch(tmp_path, "app.py", "pkg/mod.py", "pkg/deep/x.py", "README.md")
        found = [p.relative_to(tmp_path).as_posix() for p in discover_files(tmp_path, include=["**/*.py"])]
        assert found == ["app.py", "pkg/deep/x.py", "pkg/mod.py"]

    def test_returns_absolute_paths(self, tmp_path: Path, monkeypatch):
        _touch(tmp_path, "pkg/a.py")
        monkeypatch.chdir(tmp_path)
        found = discover_files(Path("pkg") / ".." / "pkg")
        assert found == [tmp_path / "pkg" / "a.py"]
        assert all(p.is_absolute() for p in found)

    def test_file_exclude(self, tmp_path: Path):
        _touch(tmp_path, "a.py", "a.min.js")
        found = [p.name for p in discover_files(tmp_path, exclude=["*.min.js"])]
        assert found == ["a.py"]


class TestRootValidation:
    def test_missing(self, tmp_path: Path):
        with pytest.raises(ScanRootError, match="does not exist"):
            discover_files(tmp_path / "nope")

    def test_not_a_directory(self, tmp_path: Path):
        _touch(tmp_path, "a.py")
        with pytest.raises(ScanRootError, match="not a directory"):
            discover_files(tmp_path / "a.py")


class TestIsExcluded:
    def test_anchored_and_nested(self):
        assert is_excluded("dist/app.js", ["dist/**"])
        assert is_excluded("packages/x/dist/app.js", ["dist/**"])
        assert not is_excluded("src/distance.py", ["dist/**"])

    def test_double_star_prefix(self):
        assert is_excluded("a.min.js", ["**/*.min.js"])
        assert is_excluded("web/a.min.js", ["**/*.min.js"])
        assert not is_excluded("web/a.js", ["**/*.min.js"])
