"""Service failure contracts.

Services return typed outcomes on success and raise ServiceFailure on expected
failures. The CLI turns any ServiceFailure into ``Error: <message>`` and exit
status 1. Programmer bugs raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "template_not_found",
    "external_command_failed",
    "io_failed",
]


class ServiceFailure(Exception):
    """Expected failure that ends the run.

    Use ``raise ServiceFailure(...) from exc`` to chain a causing exception.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Invalid input or a target that cannot be used."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class TargetExistsError(ValidationFailedError):
    """The project directory is already present."""


class TemplateNotFoundError(ServiceFailure):
    """Template key is not in the template table."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("template_not_found", message, recovery_hint=recovery_hint)


class ExternalCommandFailedError(ServiceFailure):
    """External command (git, a package manager) failed or is missing."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("external_command_failed", message, recovery_hint=recovery_hint)


class IoFailedError(ServiceFailure):
    """Filesystem or config I/O failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("io_failed", message, recovery_hint=recovery_hint)
