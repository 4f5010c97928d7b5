"""Materialize a new project from a template.

The run is strictly linear: resolve the template, clone it, drop its history,
optionally start a new repository, optionally install dependencies. The first
failure ends the run; a partially cloned directory is left in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .. import exec as exec_util
from .. import git, log, package_managers, templates
from ..models import ScaffoldRequest
from ..templates import TemplateSpec
from .base import BaseService
from .errors import ExternalCommandFailedError, IoFailedError, TargetExistsError


@dataclass(frozen=True)
class ScaffoldOutcome:
    project_name: str
    project_dir: Path
    template: TemplateSpec
    git_initialized: bool
    package_manager: str
    dependencies_installed: bool


class ScaffoldProjectService(BaseService[ScaffoldRequest, ScaffoldOutcome]):
    def __init__(
        self,
        *,
        cwd: Path,
        git_path: str | None = None,
        runner: exec_util.CommandRunner | None = None,
    ) -> None:
        self._cwd = cwd
        self._git_path = git_path
        self._runner = runner

    def _run(self, request: ScaffoldRequest) -> ScaffoldOutcome:
        template = templates.resolve_template(request.template)
        project_dir = self._cwd / request.project_name
        if project_dir.exists() or project_dir.is_symlink():
            raise TargetExistsError(
                f"directory already exists: {project_dir}",
                recovery_hint="choose another project name or remove the directory",
            )

        log.info("\nCloning template...")
        try:
            git.clone_template(
                template.url, project_dir, git_path=self._git_path, runner=self._runner
            )
            try:
                git.strip_git_metadata(project_dir)
            except OSError as exc:
                raise IoFailedError(f"failed to remove template history: {exc}") from exc

            if request.init_git:
                log.info("\nInitializing new git repository...")
                git.init_repository(project_dir, git_path=self._git_path, runner=self._runner)

            installed = package_managers.install_dependencies(
                project_dir, request.package_manager, runner=self._runner
            )
        except exec_util.CommandExecutionError as exc:
            raise ExternalCommandFailedError(str(exc)) from exc

        return ScaffoldOutcome(
            project_name=request.project_name,
            project_dir=project_dir,
            template=template,
            git_initialized=request.init_git,
            package_manager=request.package_manager,
            dependencies_installed=installed,
        )
