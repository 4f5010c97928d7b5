"""Dispatch to the package manager chosen for the new project."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from . import exec as exec_util
from . import log

PackageManager = Literal["pnpm", "npm", "yarn", "bun", "none"]
PACKAGE_MANAGER_VALUES: tuple[str, ...] = ("pnpm", "npm", "yarn", "bun", "none")
NO_PACKAGE_MANAGER = "none"
FALLBACK_DEV_COMMAND = "npm run dev"


def install_command(package_manager: str) -> list[str] | None:
    """Return the install argv, or ``None`` when nothing should be installed.

    Example:
        >>> install_command("pnpm")
        ['pnpm', 'install']
        >>> install_command("none") is None
        True
    """
    if package_manager == NO_PACKAGE_MANAGER:
        return None
    if package_manager not in PACKAGE_MANAGER_VALUES:
        raise ValueError(f"unsupported package manager: {package_manager}")
    return [package_manager, "install"]


def dev_command(package_manager: str) -> str:
    """Return the shell command that starts the dev server.

    Example:
        >>> dev_command("bun")
        'bun run dev'
        >>> dev_command("none")
        'npm run dev'
    """
    if package_manager == NO_PACKAGE_MANAGER:
        return FALLBACK_DEV_COMMAND
    return f"{package_manager} run dev"


def install_dependencies(
    project_dir: Path,
    package_manager: str,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> bool:
    """Run the manager's install command inside ``project_dir``.

    Returns:
        ``True`` when an install ran, ``False`` for ``none``.
    """
    cmd = install_command(package_manager)
    if cmd is None:
        log.debug("Skipping dependency installation")
        return False
    log.info(f"\nInstalling dependencies with {package_manager}...")
    exec_util.run_command(cmd, cwd=project_dir, runner=runner)
    return True
