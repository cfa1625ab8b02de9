import json
from typing import Any

import pytest

from apitask.http.types import Request, RequestFailed, Response


def json_response(status: int, reason: str, payload: Any) -> Response:
    return Response(status=status, reason=reason, body=json.dumps(payload).encode())


class MockHttp:
    """Answers every request with the same response, or fails every request."""

    def __init__(self, response: Response | None = None) -> None:
        self.response = response
        self.requests: list[Request] = []

    async def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        if self.response is None:
            raise RequestFailed(ConnectionRefusedError("connection refused"))
        return self.response


class RoutingHttp:
    """Answers by (method, url), 404 for anything unrouted."""

    def __init__(self, routes: dict[tuple[str, str], Response]) -> None:
        self.routes = routes
        self.requests: list[Request] = []

    async def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        return self.routes.get(
            (request.method, request.url),
            Response(status=404, reason="Not Found", body=b"Not Found"),
        )


@pytest.fixture
def offline_http() -> MockHttp:
    return MockHttp()


@pytest.fixture
def ok_http() -> MockHttp:
    return MockHttp(json_response(200, "OK", {"ok": True}))
