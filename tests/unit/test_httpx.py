import json

import httpx
import pytest

from apitask.client import Executor
from apitask.http.httpx import HTTPX
from apitask.http.types import Request, RequestFailed
from apitask.models import Failure, NetworkError, StatusError, Success
from apitask.services import ProductService, UserService


@pytest.mark.asyncio
async def test_request_is_forwarded() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": 11})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        response = await HTTPX(client)(
            Request(
                method="POST",
                url="https://h/users",
                headers={"Content-Type": "application/json"},
                body=b'{"name": "X"}',
            )
        )

    assert response.status == 201
    assert response.reason == "Created"
    assert json.loads(response.body) == {"id": 11}
    (request,) = seen
    assert request.method == "POST"
    assert str(request.url) == "https://h/users"
    assert request.headers["content-type"] == "application/json"
    assert request.content == b'{"name": "X"}'


@pytest.mark.asyncio
async def test_transport_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(RequestFailed) as excinfo:
            await HTTPX(client)(Request("GET", "https://h/", None, None))

    assert isinstance(excinfo.value.inner, httpx.ConnectError)


@pytest.mark.asyncio
async def test_get_user_end_to_end() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert "content-type" not in request.headers
        assert request.content == b""
        return httpx.Response(200, json={"id": 1, "name": "Leanne Graham"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        users = UserService(Executor(HTTPX(client)))
        outcome = await users.get_user(1)

    assert outcome == Success({"id": 1, "name": "Leanne Graham"})


@pytest.mark.asyncio
async def test_not_found_end_to_end() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Not Found")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        products = ProductService(Executor(HTTPX(client)))
        outcome = await products.delete_product(1)

    assert outcome == Failure(StatusError(404, "Not Found", "Not Found"))


@pytest.mark.asyncio
async def test_network_error_end_to_end() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        outcome = await Executor(HTTPX(client)).get("https://h/users")

    assert outcome == Failure(NetworkError())


@pytest.mark.asyncio
async def test_category_with_spaces_is_encoded() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        products = ProductService(Executor(HTTPX(client)))
        outcome = await products.get_products_by_category("men's clothing")

    assert outcome == Success([])
    assert seen[0].url.path == "/products/category/men's clothing"
