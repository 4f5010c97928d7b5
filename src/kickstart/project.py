"""Project name rules shared by the prompt and the request model."""

from __future__ import annotations

import re

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]+$")
PROJECT_NAME_ERROR = "Project name should not contain special characters except hyphen (-)"
DEFAULT_PROJECT_NAME = "my-project"


def normalize_project_name(value: str) -> str:
    """Lowercase a name and turn its spaces into hyphens.

    Example:
        >>> normalize_project_name("  My Project ")
        'my-project'
        >>> normalize_project_name("my-project")
        'my-project'
    """
    return value.strip().lower().replace(" ", "-")


def validate_project_name(value: str) -> bool | str:
    """Return ``True`` for a valid name, otherwise the user-facing error.

    Example:
        >>> validate_project_name("app-2")
        True
        >>> validate_project_name("app_2")
        'Project name should not contain special characters except hyphen (-)'
    """
    if PROJECT_NAME_PATTERN.fullmatch(value):
        return True
    return PROJECT_NAME_ERROR
