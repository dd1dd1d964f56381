"""Git interface layer — candidate file lists."""

from gitdeny.git.adapter import (
    GitError,
    get_hooks_dir,
    get_repo_root,
    list_staged_files,
    list_tracked_files,
)

__all__ = [
    "GitError",
    "get_hooks_dir",
    "get_repo_root",
    "list_staged_files",
    "list_tracked_files",
]
