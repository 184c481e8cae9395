"""Pre-commit hook installer for ``hardcoded-detector install`` / ``uninstall``."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Tuple

HOOK_MARKER = "# hardcoded-detector-hook"
HOOK_SCRIPT = f"""\
#!/bin/sh
{HOOK_MARKER}
# Scans staged files for hardcoded credentials before each commit.
# To uninstall: hardcoded-detector uninstall

exec hardcoded-detector scan --staged
"""


def hook_path(repo_root: Path) -> Path:
    return repo_root / ".git" / "hooks" / "pre-commit"


def install_hook(repo_root: Path, *, force: bool = False) -> Tuple[bool, str]:
    """Write the pre-commit hook. Returns (success, message)."""
    if not (repo_root / ".git").is_dir():
        return False, f"Not a git repository: {repo_root}"

    path = hook_path(repo_root)
    if path.exists():
        existing = path.read_text(encoding="utf-8", errors="replace")
        if HOOK_MARKER in existing:
            return True, "hardcoded-detector hook is already installed."
        if not force:
            return (
                False,
                f"A pre-commit hook already exists at {path}. "
                "Use --force to overwrite, or add 'hardcoded-detector scan --staged' to it.",
            )

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(HOOK_SCRIPT, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return True, f"Installed pre-commit hook at {path}"


def uninstall_hook(repo_root: Path) -> Tuple[bool, str]:
    """Remove the hook if this tool installed it. Returns (success, message)."""
    path = hook_path(repo_root)
    if not path.exists():
        return True, "No pre-commit hook found, nothing to remove."

    if HOOK_MARKER not in path.read_text(encoding="utf-8", errors="replace"):
        return False, "Pre-commit hook exists but was not installed by hardcoded-detector."

    path.unlink()
    return True, f"Removed pre-commit hook from {path}"
