"""Pre-commit hook installer — gitdeny install / uninstall."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from gitdeny.git.adapter import GitError, get_hooks_dir

_HOOK_MARKER = "# gitdeny-hook"
_HOOK_SCRIPT = f"""\
#!/bin/sh
{_HOOK_MARKER}
# Installed by gitdeny. To uninstall: gitdeny uninstall

exec gitdeny scan
"""


def _hook_path(repo_root: Path) -> Path:
    return get_hooks_dir(repo_root) / "pre-commit"


def install_hook(repo_root: Path, *, force: bool = False) -> Tuple[bool, str]:
    """Install gitdeny as a pre-commit hook.

    Returns (success, message).
    """
    try:
        hook_path = _hook_path(repo_root)
    except GitError as exc:
        return False, f"Not a git repository: {repo_root} ({exc})"

    hook_path.parent.mkdir(parents=True, exist_ok=True)

    if hook_path.exists():
        content = hook_path.read_text(encoding="utf-8", errors="replace")
        if _HOOK_MARKER in content:
            return True, "gitdeny hook is already installed."
        if not force:
            return (
                False,
                f"A pre-commit hook already exists at {hook_path}. "
                "Use --force to overwrite, or add 'gitdeny scan' to it manually.",
            )

    hook_path.write_text(_HOOK_SCRIPT, encoding="utf-8")
    try:
        hook_path.chmod(0o755)
    except OSError:
        pass  # chmod is a no-op on Windows

    return True, f"Installed gitdeny pre-commit hook at {hook_path}"


def uninstall_hook(repo_root: Path) -> Tuple[bool, str]:
    """Remove the gitdeny pre-commit hook.

    Returns (success, message).
    """
    try:
        hook_path = _hook_path(repo_root)
    except GitError as exc:
        return False, f"Not a git repository: {repo_root} ({exc})"

    if not hook_path.exists():
        return True, "No pre-commit hook found — nothing to remove."

    content = hook_path.read_text(encoding="utf-8", errors="replace")
    if _HOOK_MARKER not in content:
        return False, "Pre-commit hook exists but was not installed by gitdeny."

    hook_path.unlink()
    return True, f"Removed gitdeny pre-commit hook from {hook_path}"
