"""Base service ABC.

Services extend BaseService and implement _run(request) -> T, raising
ServiceFailure on expected errors. Calling a service runs _run and routes any
ServiceFailure through _handle_failure, which re-raises by default.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import ServiceFailure

R = TypeVar("R")
T = TypeVar("T")


class BaseService(ABC, Generic[R, T]):
    def __call__(self, request: R) -> T:
        try:
            return self._run(request)
        except ServiceFailure as exc:
            return self._handle_failure(exc)

    @abstractmethod
    def _run(self, request: R) -> T:
        """Execute the service logic. Raise ServiceFailure on expected errors."""
        ...

    def _handle_failure(self, error: ServiceFailure) -> T:
        raise error
