"""Git helpers for cloning templates and starting fresh repositories."""

from __future__ import annotations

import shutil
from pathlib import Path

from . import exec as exec_util
from . import log

GIT_DIRNAME = ".git"
INITIAL_COMMIT_MESSAGE = "Initial Commit"


def git_command(args: list[str], *, git_path: str | None = None) -> list[str]:
    """Build a git command using an optional executable path.

    Example:
        >>> git_command(["init"])
        ['git', 'init']
        >>> git_command(["init"], git_path=" /opt/bin/git ")
        ['/opt/bin/git', 'init']
    """
    resolved = git_path.strip() if isinstance(git_path, str) else ""
    return [resolved or "git", *args]


def clone_template(
    url: str,
    target: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Clone ``url`` into ``target``, which must not exist yet."""
    exec_util.run_command(git_command(["clone", url, str(target)], git_path=git_path), runner=runner)


def strip_git_metadata(project_dir: Path) -> bool:
    """Delete the cloned ``.git`` directory so the project has no history.

    Returns:
        ``True`` if metadata was removed, ``False`` if there was none.
    """
    git_dir = project_dir / GIT_DIRNAME
    if git_dir.is_symlink() or git_dir.is_file():
        git_dir.unlink()
        return True
    if not git_dir.exists():
        return False
    shutil.rmtree(git_dir)
    log.debug(f"Removed {git_dir}")
    return True


def init_repository(
    project_dir: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
    message: str = INITIAL_COMMIT_MESSAGE,
) -> None:
    """Create a new repository in ``project_dir`` holding one commit of every file."""
    for args in (["init"], ["add", "."], ["commit", "-m", message]):
        exec_util.run_command(git_command(args, git_path=git_path), cwd=project_dir, runner=runner)
