"""The four questions that build a ``ScaffoldRequest``."""

from __future__ import annotations

from . import io, templates
from .models import KickstartConfig, ScaffoldRequest
from .package_managers import PACKAGE_MANAGER_VALUES
from .project import normalize_project_name, validate_project_name

NAME_QUESTION = "Enter your project name"
TEMPLATE_QUESTION = "Which template do you want to use?"
GIT_QUESTION = "Do you want to initialize git?"
PACKAGE_MANAGER_QUESTION = "Select package manager (pnpm is recommended)"

GIT_CHOICES: list[tuple[str, bool]] = [("Yes", True), ("No", False)]


def ask_project_name(default: str) -> str:
    return io.prompt_text(
        NAME_QUESTION,
        default,
        normalize=normalize_project_name,
        validate=validate_project_name,
    )


def collect_scaffold_request(config: KickstartConfig | None = None) -> ScaffoldRequest:
    """Ask the user for every scaffold choice, in order.

    Raises:
        io.PromptCancelled: If any question is aborted or the name is empty.
    """
    defaults = (config or KickstartConfig()).defaults
    project_name = ask_project_name(defaults.project_name)
    template = io.select(TEMPLATE_QUESTION, templates.template_choices())
    init_git = io.select(GIT_QUESTION, GIT_CHOICES, default=defaults.init_git)
    package_manager = io.select(
        PACKAGE_MANAGER_QUESTION,
        [(value, value) for value in PACKAGE_MANAGER_VALUES],
        default=defaults.package_manager,
    )
    return ScaffoldRequest(
        project_name=project_name,
        template=template,
        init_git=init_git,
        package_manager=package_manager,
    )
