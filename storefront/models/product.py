"""Product document model for MongoDB."""

from datetime import datetime, timezone
from typing import Any, Optional

from beanie import Document, Indexed
from pydantic import Field


class Product(Document):
    """Catalog product.

    product_id and sku are unique; duplicate inserts surface as
    DuplicateKeyError from the driver.
    """

    product_id: Indexed(str, unique=True)
    name: str
    sku: Indexed(str, unique=True)
    category: Indexed(str)
    description: str
    description_html: Optional[str] = None
    specs: dict[str, Any] = Field(default_factory=dict)
    image_url: str = ""
    images: list[Any] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "products"
