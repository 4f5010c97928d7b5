from .base import BaseService
from .errors import (
    ExternalCommandFailedError,
    IoFailedError,
    ServiceFailure,
    TargetExistsError,
    TemplateNotFoundError,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "ExternalCommandFailedError",
    "IoFailedError",
    "ServiceFailure",
    "TargetExistsError",
    "TemplateNotFoundError",
    "ValidationFailedError",
]
