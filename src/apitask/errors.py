from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FailureReason


class ApiTaskError(Exception):
    pass


class UnsupportedMethod(ApiTaskError, ValueError):
    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported HTTP method: {method!r}")
        self.method = method


class OutcomeFailed(ApiTaskError):
    """Raised by ``Failure.unwrap()``."""

    def __init__(self, error: FailureReason) -> None:
        super().__init__(str(error))
        self.error = error
