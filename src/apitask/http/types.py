from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from apitask.types import Method


@dataclass(frozen=True)
class Request:
    method: Method
    url: str
    headers: dict[str, str] | None
    body: bytes | None


@dataclass(frozen=True)
class Response:
    status: int
    reason: str
    body: bytes


@dataclass
class RequestFailed(Exception):
    """No response was received for a request."""

    inner: Exception


HttpImplementation = Callable[[Request], Awaitable[Response]]
