"""Git subprocess wrapper — repo root, tracked files, staged files."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class GitError(Exception):
    """Raised when git is unavailable or returns an error."""


def _run_git(args: list[str], cwd: PathLike, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    cmd = f"git {' '.join(args)}"
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise GitError(f"cannot run {cmd} in {cwd}: {exc}") from exc
    except NotADirectoryError as exc:
        raise GitError(f"cannot run {cmd}: {cwd} is not a directory") from exc
    except subprocess.TimeoutExpired as exc:
        raise GitError(f"git command timed out after {timeout}s: {cmd}") from exc

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise GitError(f"error running {cmd} in {cwd}: {stderr}")
    return result.stdout


def _split_paths(output: str) -> List[str]:
    """Split NUL-terminated ``-z`` output. Paths are not C-quoted in this mode."""
    return [part for part in output.split("\0") if part]


def get_repo_root(cwd: Optional[PathLike] = None) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def get_hooks_dir(repo_root: PathLike) -> Path:
    """Return the hooks directory, honouring ``core.hooksPath``."""
    out = _run_git(["rev-parse", "--git-path", "hooks"], cwd=repo_root).strip()
    hooks = Path(out)
    return hooks if hooks.is_absolute() else Path(repo_root) / hooks


def list_tracked_files(repo_root: PathLike) -> List[str]:
    """Return every tracked file, relative to *repo_root*."""
    files = _split_paths(_run_git(["ls-files", "-z"], cwd=repo_root))
    logger.debug("git ls-files: %d files", len(files))
    return files


def list_staged_files(repo_root: PathLike) -> List[str]:
    """Return added, copied, and modified staged files, relative to *repo_root*."""
    files = _split_paths(
        _run_git(
            ["diff", "--cached", "--name-only", "--diff-filter=ACM", "--no-color", "-z"],
            cwd=repo_root,
        )
    )
    logger.debug("staged files: %d", len(files))
    return files
