from __future__ import annotations

from .client import Executor
from .models import Outcome
from .operations import Create, Operation, Read, Remove, Replace
from .types import JSON, PathParam

DEFAULT_USER_API_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_PRODUCT_API_URL = "https://fakestoreapi.com"


class ResourceService:
    """An executor bound to one remote API's base URL."""

    def __init__(self, executor: Executor, base_url: str) -> None:
        self.executor = executor
        self.base_url = base_url.rstrip("/")

    async def _call(self, operation: Operation) -> Outcome:
        return await self.executor.send(operation.to_descriptor(self.base_url))


class UserService(ResourceService):
    def __init__(
        self, executor: Executor, base_url: str = DEFAULT_USER_API_URL
    ) -> None:
        super().__init__(executor, base_url)

    async def get_all_users(self) -> Outcome:
        return await self._call(Read("/users"))

    async def get_user(self, user_id: PathParam) -> Outcome:
        return await self._call(Read(f"/users/{user_id}"))

    async def create_user(self, user: JSON) -> Outcome:
        return await self._call(Create("/users", user))

    async def update_user(self, user_id: PathParam, user: JSON) -> Outcome:
        return await self._call(Replace(f"/users/{user_id}", user))

    async def delete_user(self, user_id: PathParam) -> Outcome:
        return await self._call(Remove(f"/users/{user_id}"))

    async def get_user_posts(self, user_id: PathParam) -> Outcome:
        return await self._call(Read(f"/users/{user_id}/posts"))


class ProductService(ResourceService):
    def __init__(
        self, executor: Executor, base_url: str = DEFAULT_PRODUCT_API_URL
    ) -> None:
        super().__init__(executor, base_url)

    async def get_all_products(self) -> Outcome:
        return await self._call(Read("/products"))

    async def get_product(self, product_id: PathParam) -> Outcome:
        return await self._call(Read(f"/products/{product_id}"))

    async def get_categories(self) -> Outcome:
        return await self._call(Read("/products/categories"))

    async def get_products_by_category(self, category: str) -> Outcome:
        return await self._call(Read(f"/products/category/{category}"))

    async def create_product(self, product: JSON) -> Outcome:
        return await self._call(Create("/products", product))

    async def update_product(self, product_id: PathParam, product: JSON) -> Outcome:
        return await self._call(Replace(f"/products/{product_id}", product))

    async def delete_product(self, product_id: PathParam) -> Outcome:
        return await self._call(Remove(f"/products/{product_id}"))
