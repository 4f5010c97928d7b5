"""Success message and next steps printed after a run."""

from __future__ import annotations

from typing import Mapping

from . import io
from .package_managers import dev_command
from .services.scaffold import ScaffoldOutcome

REPORT_TEMPLATE = """
✨ Project {{ project_name }} created successfully!

Next steps:
  cd {{ project_name }}
  {{ dev_command }}"""


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Render a template using a simple {{ key }} substitution.

    Example:
        >>> render_template("cd {{ name }}", {"name": "demo"})
        'cd demo'
    """
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace(f"{{{{ {key} }}}}", value)
    return rendered


def render_report(outcome: ScaffoldOutcome) -> str:
    return render_template(
        REPORT_TEMPLATE,
        {
            "project_name": outcome.project_name,
            "dev_command": dev_command(outcome.package_manager),
        },
    )


def print_report(outcome: ScaffoldOutcome) -> None:
    io.say(render_report(outcome))
