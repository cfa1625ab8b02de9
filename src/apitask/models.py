from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

from .errors import OutcomeFailed
from .http.types import Request, Response
from .types import JSON, Method

JSON_CONTENT_TYPE = "application/json"
NETWORK_ERROR_MESSAGE = "Network error"


@dataclass(frozen=True)
class RequestDescriptor:
    method: Method
    url: str
    body: JSON = None

    def to_http_request(self) -> Request:
        if self.body is None:
            return Request(method=self.method, url=self.url, headers=None, body=None)
        return Request(
            method=self.method,
            url=self.url,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            body=json.dumps(self.body).encode("utf-8"),
        )


@dataclass(frozen=True)
class StatusError:
    """A response arrived with a status outside 200-299."""

    status_code: int
    status_text: str
    body: JSON

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.status_text}"


@dataclass(frozen=True)
class NetworkError:
    """No response arrived at all."""

    message: str = NETWORK_ERROR_MESSAGE

    def __str__(self) -> str:
        return self.message


FailureReason = StatusError | NetworkError


@dataclass(frozen=True)
class Success:
    value: JSON

    @property
    def is_success(self) -> Literal[True]:
        return True

    def unwrap(self) -> JSON:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: FailureReason

    @property
    def is_success(self) -> Literal[False]:
        return False

    def unwrap(self) -> JSON:
        raise OutcomeFailed(self.error)


Outcome = Success | Failure


def decode_payload(body: bytes) -> JSON:
    """
    Parse a response body as JSON, falling back to its raw text.

    An empty body decodes to ``None``. Bodies that are not valid JSON
    (including non-standard constants and nesting too deep to decode) are
    returned as text rather than treated as errors.
    """
    if not body:
        return None
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return body.decode("utf-8", errors="replace")


def _reject_constant(name: str) -> JSON:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def is_success_status(status: int) -> bool:
    return 200 <= status <= 299


def outcome_from_response(response: Response) -> Outcome:
    payload = decode_payload(response.body)
    if is_success_status(response.status):
        return Success(payload)
    return Failure(
        StatusError(
            status_code=response.status,
            status_text=response.reason,
            body=payload,
        )
    )
