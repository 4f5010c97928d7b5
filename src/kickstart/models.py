"""Pydantic models for scaffold requests and user configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .package_managers import PackageManager
from .project import DEFAULT_PROJECT_NAME, PROJECT_NAME_ERROR, PROJECT_NAME_PATTERN


class ScaffoldRequest(BaseModel):
    """The answers that drive one scaffolding run.

    Attributes:
        project_name: Directory name for the new project.
        template: Key into the template table. Resolved (and rejected when
            unknown) by the scaffold service, not here.
        init_git: Whether to create a fresh repository with one commit.
        package_manager: Installer to run, or ``none``.

    Example:
        >>> ScaffoldRequest(project_name="my-app", template="heroui", init_git=True,
        ...                 package_manager="pnpm").project_name
        'my-app'
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    template: str
    init_git: bool
    package_manager: PackageManager

    @field_validator("project_name")
    @classmethod
    def check_project_name(cls, value: str) -> str:
        if not PROJECT_NAME_PATTERN.fullmatch(value):
            raise ValueError(PROJECT_NAME_ERROR)
        return value


class GitSection(BaseModel):
    """Git settings.

    Attributes:
        path: Git executable (default ``git``).
    """

    model_config = ConfigDict(extra="allow")

    path: str = "git"

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, value: object) -> object:
        if value is None:
            return "git"
        if isinstance(value, str):
            return value.strip() or "git"
        return value


class DefaultsSection(BaseModel):
    """Answers preselected in the prompts."""

    model_config = ConfigDict(extra="allow")

    project_name: str = DEFAULT_PROJECT_NAME
    package_manager: PackageManager = "pnpm"
    init_git: bool = True

    @field_validator("package_manager", mode="before")
    @classmethod
    def normalize_package_manager(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class KickstartConfig(BaseModel):
    """Optional user configuration loaded from ``config.json``.

    Example:
        >>> KickstartConfig().git.path
        'git'
    """

    model_config = ConfigDict(extra="allow")

    git: GitSection = GitSection()
    defaults: DefaultsSection = DefaultsSection()
