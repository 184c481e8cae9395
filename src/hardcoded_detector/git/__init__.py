"""Git integration for staged-file scans."""

from hardcoded_detector.git.adapter import GitError, get_repo_root, get_staged_files

__all__ = ["GitError", "get_repo_root", "get_staged_files"]
