"""Git subprocess wrapper: repository root and staged files."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

GIT_TIMEOUT = 30


class GitError(Exception):
    """Raised when git is missing, times out, or exits non-zero."""


def _git(*args: str, cwd: Optional[Path] = None) -> str:
    """Run ``git <args>`` in *cwd* and return its stdout."""
    cmd = ["git", *args]
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=GIT_TIMEOUT,
        )
    except FileNotFoundError as exc:
        raise GitError("git executable not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise GitError(f"{' '.join(cmd)} timed out after {GIT_TIMEOUT}s") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise GitError(f"{' '.join(cmd[:2])} failed: {detail}") from exc
    return proc.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Top-level directory of the work tree containing *cwd* (default: cwd)."""
    return Path(_git("rev-parse", "--show-toplevel", cwd=cwd or Path.cwd()).strip())


def get_staged_files(repo_root: Path) -> List[Path]:
    """Absolute paths of files added, copied, modified or renamed in the index.

    Deleted files are left out since there is nothing to read.
    """
    out = _git("diff", "--cached", "--name-only", "--diff-filter=ACMR", "-z", cwd=repo_root)
    return [repo_root / name for name in out.split("\0") if name]
