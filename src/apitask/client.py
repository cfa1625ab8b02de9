from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, replace

import structlog

from .errors import UnsupportedMethod
from .http.types import HttpImplementation, RequestFailed
from .models import (
    Failure,
    NetworkError,
    Outcome,
    RequestDescriptor,
    outcome_from_response,
)
from .types import JSON, METHODS, Method

logger = structlog.get_logger(__name__)

OutcomeCallback = Callable[[Outcome], None]


def normalize_method(method: str) -> Method:
    upper = method.upper()
    if upper not in METHODS:
        raise UnsupportedMethod(method)
    return upper  # type: ignore[return-value]


@dataclass(frozen=True)
class Executor:
    """
    Performs one HTTP request per call and classifies the result.

    Every call resolves to exactly one ``Success`` or ``Failure``. Transport
    errors become ``Failure(NetworkError())``, non-2xx responses become
    ``Failure(StatusError(...))``. Nothing is retried or cached.
    """

    http: HttpImplementation
    base_url: str = ""

    async def execute(self, method: str, url: str, body: JSON = None) -> Outcome:
        descriptor = RequestDescriptor(
            method=normalize_method(method), url=f"{self.base_url}{url}", body=body
        )
        return await self._send(descriptor)

    async def send(self, descriptor: RequestDescriptor) -> Outcome:
        """Send a descriptor whose url is already complete."""
        return await self._send(
            replace(descriptor, method=normalize_method(descriptor.method))
        )

    async def get(self, url: str) -> Outcome:
        return await self.execute("GET", url)

    async def post(self, url: str, body: JSON) -> Outcome:
        return await self.execute("POST", url, body)

    async def put(self, url: str, body: JSON) -> Outcome:
        return await self.execute("PUT", url, body)

    async def delete(self, url: str) -> Outcome:
        return await self.execute("DELETE", url)

    def submit(
        self,
        method: str,
        url: str,
        body: JSON,
        callback: OutcomeCallback,
    ) -> asyncio.Task[None]:
        """
        Start a request on the running loop and return immediately.

        ``callback`` is invoked exactly once with the outcome. The returned
        task can be awaited to wait for the callback to have run.
        """
        normalize_method(method)

        async def run() -> None:
            callback(await self.execute(method, url, body))

        return asyncio.get_running_loop().create_task(run())

    async def _send(self, descriptor: RequestDescriptor) -> Outcome:
        request = descriptor.to_http_request()
        logger.debug("request.sent", method=request.method, url=request.url)
        try:
            response = await self.http(request)
        except RequestFailed as exc:
            logger.warning(
                "request.network_error",
                method=request.method,
                url=request.url,
                error=repr(exc.inner),
            )
            return Failure(NetworkError())
        logger.debug(
            "request.completed",
            method=request.method,
            url=request.url,
            status=response.status,
        )
        return outcome_from_response(response)
