"""Tests for product persistence."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import DuplicateKeyError

from storefront.schemas.product import ProductInput
from storefront.services.errors import DuplicateProductError
from storefront.services.product_store import create_product


def _product() -> ProductInput:
    return ProductInput(
        product_id="P1",
        name="Mug",
        sku="SKU-1",
        category="Drinkware",
        description="A mug",
        specs={"capacity": "350ml"},
    )


@pytest.mark.asyncio
async def test_create_product_inserts_document() -> None:
    """Test the product is mapped onto a document and inserted."""
    document = MagicMock()
    document.insert = AsyncMock()

    with patch("storefront.services.product_store.Product", return_value=document) as product_cls:
        result = await create_product(_product())

    assert result is document
    document.insert.assert_awaited_once()
    kwargs = product_cls.call_args.kwargs
    assert kwargs["product_id"] == "P1"
    assert kwargs["specs"] == {"capacity": "350ml"}
    assert kwargs["images"] == []


@pytest.mark.asyncio
async def test_create_product_duplicate_key() -> None:
    """Test a unique index violation becomes DuplicateProductError."""
    document = MagicMock()
    document.insert = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key error"))

    with patch("storefront.services.product_store.Product", return_value=document):
        with pytest.raises(DuplicateProductError) as exc_info:
            await create_product(_product())

    assert exc_info.value.product_id == "P1"
    assert exc_info.value.sku == "SKU-1"
    assert str(exc_info.value) == "Product with ID 'P1' or SKU 'SKU-1' already exists"
