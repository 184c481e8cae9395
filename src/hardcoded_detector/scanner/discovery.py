"""Walk a scan root and pick the files to analyse."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List, Sequence


class ScanRootError(Exception):
    """Raised when the scan root is missing, not a directory, or unreadable."""


def validate_root(root: Path) -> Path:
    """Return *root* as an absolute, symlink-free path. Raises ScanRootError."""
    if not root.exists():
        raise ScanRootError(f"Scan root does not exist: {root}")
    if not root.is_dir():
        raise ScanRootError(f"Scan root is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise ScanRootError(f"Scan root is not readable: {root}")
    return root.resolve()


def matches_glob(rel_path: str, pattern: str) -> bool:
    """Match *rel_path* against *pattern* anchored at the root or at any depth.

    A leading ``**/`` also matches zero directories, so ``**/*.py`` covers
    files at the root.
    """
    if pattern.startswith("**/"):
        pattern = pattern[3:]
    return fnmatch(rel_path, pattern) or fnmatch(rel_path, f"*/{pattern}")


def is_excluded(rel_path: str, patterns: Iterable[str]) -> bool:
    return any(matches_glob(rel_path, p) for p in patterns)


def discover_files(
    root: Path,
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> List[Path]:
    """Return sorted absolute paths of the files under *root*.

    Globs are matched against root-relative POSIX paths. An empty *include*
    keeps every file; excluded directories are pruned without descending.
    """
    root = validate_root(Path(root))
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else f"{rel_dir}/"
        dirnames[:] = [d for d in dirnames if not is_excluded(f"{prefix}{d}/", exclude)]
        for name in filenames:
            rel = f"{prefix}{name}"
            if is_excluded(rel, exclude):
                continue
            if include and not any(matches_glob(rel, p) for p in include):
                continue
            found.append(Path(dirpath) / name)
    return sorted(found)
