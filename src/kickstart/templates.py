"""The closed table of project templates Kickstart can clone.

Example:
    >>> resolve_template("heroui").url
    'https://github.com/lordimmaculate/heroui-template.git'
    >>> [key for _title, key in template_choices()]
    ['heroui', 'heroui-authjs']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .services.errors import TemplateNotFoundError

TemplateKey = Literal["heroui", "heroui-authjs"]


@dataclass(frozen=True)
class TemplateSpec:
    """A starter repository offered in the template prompt."""

    key: TemplateKey
    title: str
    url: str


TEMPLATES: tuple[TemplateSpec, ...] = (
    TemplateSpec(
        key="heroui",
        title="HeroUI",
        url="https://github.com/lordimmaculate/heroui-template.git",
    ),
    TemplateSpec(
        key="heroui-authjs",
        title="HeroUI + Auth.js",
        url="https://github.com/lordimmaculate/heroui-template-authjs.git",
    ),
)
TEMPLATE_KEYS: tuple[str, ...] = tuple(spec.key for spec in TEMPLATES)


def template_choices() -> list[tuple[str, TemplateKey]]:
    """Return ``(title, key)`` pairs in table order."""
    return [(spec.title, spec.key) for spec in TEMPLATES]


def resolve_template(key: object) -> TemplateSpec:
    """Look up a template by key.

    Raises:
        TemplateNotFoundError: If ``key`` is not in the table.
    """
    for spec in TEMPLATES:
        if spec.key == key:
            return spec
    raise TemplateNotFoundError("Template not found.")
