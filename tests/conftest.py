"""Pytest configuration and fixtures for Storefront tests.

Persistence is replaced by an in-memory store, so no MongoDB is needed.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.config.settings import reset_settings
from storefront.schemas.product import ProductInput
from storefront.services.errors import DuplicateProductError


class InMemoryProductStore:
    """Async persist callable enforcing unique product_id and sku."""

    def __init__(self) -> None:
        self.products: list[ProductInput] = []

    async def __call__(self, product: ProductInput) -> ProductInput:
        for existing in self.products:
            if existing.product_id == product.product_id or existing.sku == product.sku:
                raise DuplicateProductError(product.product_id, product.sku)
        self.products.append(product)
        return product

    @property
    def product_ids(self) -> list[str]:
        return [p.product_id for p in self.products]


def make_record(product_id: str = "PROD001", **overrides: object) -> dict[str, object]:
    """Build a raw JSON-style record that passes validation."""
    record: dict[str, object] = {
        "product_id": product_id,
        "name_en": f"Product {product_id}",
        "sku": f"SKU-{product_id}",
        "category": "Drinkware",
        "description_en": "A sturdy ceramic mug",
        "specs_json": {"capacity": "350ml"},
        "image_url": f"https://example.com/{product_id}.jpg",
    }
    record.update(overrides)
    return record


def create_test_app(store: InMemoryProductStore):
    """Create a FastAPI app for testing (no database lifespan)."""
    from fastapi import FastAPI

    from storefront import __version__
    from storefront.routers import import_router

    @asynccontextmanager
    async def test_lifespan(app: FastAPI):
        yield

    test_app = FastAPI(
        title="Storefront Test",
        version=__version__,
        lifespan=test_lifespan,
    )
    test_app.include_router(
        import_router.router,
        prefix="/api/admin/products/import",
        tags=["Product Import"],
    )
    test_app.dependency_overrides[import_router.get_persist] = lambda: store
    return test_app


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so env overrides do not leak."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def product_store() -> InMemoryProductStore:
    """Empty in-memory product store."""
    return InMemoryProductStore()


@pytest_asyncio.fixture(scope="function")
async def client(product_store: InMemoryProductStore) -> AsyncGenerator[AsyncClient, None]:
    """Async test client backed by the in-memory product store."""
    app = create_test_app(product_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def record_factory():
    """Factory for valid raw product records."""
    return make_record
