from dataclasses import dataclass

import httpx

from .types import Request, RequestFailed, Response


@dataclass(frozen=True)
class HTTPX:
    client: httpx.AsyncClient

    async def __call__(self, request: Request) -> Response:
        try:
            response = await self.client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.HTTPError as exc:
            raise RequestFailed(exc) from exc
        return Response(
            status=response.status_code,
            reason=response.reason_phrase,
            body=response.content,
        )
