"""
Text presentation of the user and product services.

Each ``Driver`` action calls one service operation and renders its outcome
the way the original demo page showed it in its output panels.
"""
from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from .client import Executor
from .config import Settings
from .http.types import HttpImplementation
from .models import Failure, Outcome
from .services import ProductService, UserService
from .types import JSON

logger = structlog.get_logger(__name__)

PRODUCT_PREVIEW_COUNT = 5
DESCRIPTION_PREVIEW_LENGTH = 100
UNEXPECTED_RESPONSE_TITLE = "Unexpected response"

SAMPLE_USER: dict[str, Any] = {
    "name": "Trash Test User",
    "email": "trash@test.com",
    "phone": "123-456-7890",
    "website": "trashtest.com",
}
SAMPLE_USER_UPDATE: dict[str, Any] = {
    "name": "Trash Updated User",
    "email": "updated@trash.com",
}
SAMPLE_PRODUCT: dict[str, Any] = {
    "title": "Trash Gadget",
    "price": 9.99,
    "description": "A small trash gadget",
    "category": "electronics",
    "image": "https://placehold.it/150x150",
}
SAMPLE_PRODUCT_UPDATE: dict[str, Any] = {
    "title": "Updated Trash Gadget",
    "price": 12.99,
}


def render_failure(failure: Failure) -> str:
    return f"Error: {failure.error}"


def render(outcome: Outcome, on_success: Callable[[JSON], str]) -> str:
    if isinstance(outcome, Failure):
        return render_failure(outcome)
    try:
        return on_success(outcome.value)
    except (LookupError, TypeError, AttributeError) as exc:
        logger.warning("render.unexpected_payload", error=repr(exc))
        return render_unexpected(outcome.value)


def render_unexpected(value: JSON) -> str:
    return _panel(UNEXPECTED_RESPONSE_TITLE, [json.dumps(value)])


def _panel(title: str, lines: list[str]) -> str:
    return "\n".join([title, "", *lines])


def _field_lines(value: JSON, fields: list[tuple[str, str]]) -> list[str]:
    if not isinstance(value, dict):
        return []
    return [
        f"{label}: {_format_field(key, value[key])}"
        for key, label in fields
        if key in value
    ]


def _format_field(key: str, value: JSON) -> str:
    return f"${value}" if key == "price" else f"{value}"


def _field(value: JSON, key: str) -> JSON:
    return value.get(key) if isinstance(value, dict) else value


def _returned(title: str, value: JSON, fields: list[tuple[str, str]]) -> str:
    # Only fields present in the response; the demo APIs do not persist writes.
    lines = _field_lines(value, fields) or [json.dumps(value)]
    return _panel(title, lines)


def render_users(users: JSON) -> str:
    return _panel(
        f"Loaded {len(users)} users!",
        [f"{user['name']} ({user['email']})" for user in users],
    )


def render_user(user: JSON) -> str:
    if not isinstance(user, dict):
        raise TypeError(f"expected a user object, got {type(user).__name__}")
    return _panel(
        "User loaded!",
        _field_lines(
            user,
            [
                ("name", "Name"),
                ("email", "Email"),
                ("phone", "Phone"),
                ("website", "Website"),
            ],
        ),
    )


def render_created_user(user: JSON) -> str:
    return _returned(
        "User created! (fake API - not really saved)",
        user,
        [("id", "ID"), ("name", "Name"), ("email", "Email")],
    )


def render_updated_user(user: JSON) -> str:
    return _returned(
        "User updated! (fake API)",
        user,
        [("id", "ID"), ("name", "Name"), ("email", "Email")],
    )


def render_deleted(title: str) -> Callable[[JSON], str]:
    def on_success(value: JSON) -> str:
        return _panel(title, [json.dumps(value)])

    return on_success


def render_posts(posts: JSON) -> str:
    return _panel(
        f"Loaded {len(posts)} posts!", [post["title"] for post in posts]
    )


def render_products(products: JSON) -> str:
    lines = [
        f"{product['title']} - ${product['price']}"
        for product in products[:PRODUCT_PREVIEW_COUNT]
    ]
    if len(products) > PRODUCT_PREVIEW_COUNT:
        lines.append(
            f"... and {len(products) - PRODUCT_PREVIEW_COUNT} more products"
        )
    return _panel(f"Loaded {len(products)} products!", lines)


def render_product(product: JSON) -> str:
    description = product["description"][:DESCRIPTION_PREVIEW_LENGTH]
    return _panel(
        "Product loaded!",
        [
            f"Title: {product['title']}",
            f"Price: ${product['price']}",
            f"Category: {product['category']}",
            f"Description: {description}...",
        ],
    )


def render_categories(categories: JSON) -> str:
    if not isinstance(categories, list):
        raise TypeError(f"expected a list, got {type(categories).__name__}")
    return _panel(f"Loaded {len(categories)} categories!", list(categories))


def render_category_products(category: str) -> Callable[[JSON], str]:
    def on_success(products: JSON) -> str:
        return _panel(
            f"Loaded {len(products)} {category}!",
            [f"{product['title']} - ${product['price']}" for product in products],
        )

    return on_success


def render_created_product(product: JSON) -> str:
    return _returned(
        "Product created! (fake API)",
        product,
        [("id", "ID"), ("title", "Title"), ("price", "Price")],
    )


def render_updated_product(product: JSON) -> str:
    return _returned(
        "Product updated! (fake API)",
        product,
        [("id", "ID"), ("title", "Title"), ("price", "Price")],
    )


class Driver:
    def __init__(self, users: UserService, products: ProductService) -> None:
        self.users = users
        self.products = products

    @classmethod
    def from_settings(cls, http: HttpImplementation, settings: Settings) -> Driver:
        executor = Executor(http)
        return cls(
            users=UserService(executor, settings.user_api_url),
            products=ProductService(executor, settings.product_api_url),
        )

    async def all_users(self) -> str:
        return render(await self.users.get_all_users(), render_users)

    async def user(self, user_id: int = 1) -> str:
        return render(await self.users.get_user(user_id), render_user)

    async def create_user(self) -> str:
        return render(await self.users.create_user(SAMPLE_USER), render_created_user)

    async def update_user(self, user_id: int = 1) -> str:
        return render(
            await self.users.update_user(user_id, SAMPLE_USER_UPDATE),
            render_updated_user,
        )

    async def delete_user(self, user_id: int = 1) -> str:
        return render(
            await self.users.delete_user(user_id),
            render_deleted("User deleted! (fake API)"),
        )

    async def user_posts(self, user_id: int = 1) -> str:
        return render(await self.users.get_user_posts(user_id), render_posts)

    async def all_products(self) -> str:
        return render(await self.products.get_all_products(), render_products)

    async def product(self, product_id: int = 1) -> str:
        return render(await self.products.get_product(product_id), render_product)

    async def categories(self) -> str:
        return render(await self.products.get_categories(), render_categories)

    async def products_in_category(self, category: str = "electronics") -> str:
        return render(
            await self.products.get_products_by_category(category),
            render_category_products(category),
        )

    async def create_product(self) -> str:
        return render(
            await self.products.create_product(SAMPLE_PRODUCT),
            render_created_product,
        )

    async def update_product(self, product_id: int = 1) -> str:
        return render(
            await self.products.update_product(product_id, SAMPLE_PRODUCT_UPDATE),
            render_updated_product,
        )

    async def delete_product(self, product_id: int = 1) -> str:
        return render(
            await self.products.delete_product(product_id),
            render_deleted("Product deleted! (fake API)"),
        )

    def actions(self) -> list[tuple[str, Callable[[], Awaitable[str]]]]:
        return [
            ("Get all users", self.all_users),
            ("Get user 1", self.user),
            ("Create user", self.create_user),
            ("Update user 1", self.update_user),
            ("Delete user 1", self.delete_user),
            ("User 1 posts", self.user_posts),
            ("Get all products", self.all_products),
            ("Get product 1", self.product),
            ("Get categories", self.categories),
            ("Get electronics", self.products_in_category),
            ("Create product", self.create_product),
            ("Update product 1", self.update_product),
            ("Delete product 1", self.delete_product),
        ]

    async def run_all(self) -> list[tuple[str, str]]:
        return [(title, await action()) for title, action in self.actions()]

    async def smoke_check(self) -> bool:
        """Fetch user 1 and product 1 and log whether each service works."""
        user, product = await asyncio.gather(
            self.users.get_user(1), self.products.get_product(1)
        )
        if isinstance(user, Failure):
            logger.error("smoke_check.user_failed", error=str(user.error))
        else:
            logger.info("smoke_check.user_ok", name=_field(user.value, "name"))
        if isinstance(product, Failure):
            logger.error("smoke_check.product_failed", error=str(product.error))
        else:
            logger.info("smoke_check.product_ok", title=_field(product.value, "title"))
        return user.is_success and product.is_success
