"""Pydantic schemas for catalog products."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ProductInput(BaseModel):
    """Canonical product shape consumed by validation and persistence."""

    product_id: str = ""
    name: str = ""
    sku: str = ""
    category: str = ""
    description: str = ""
    description_html: Optional[str] = None
    specs: dict[str, Any] = Field(default_factory=dict)
    image_url: str = ""
    images: list[Any] = Field(default_factory=list)


class FieldError(BaseModel):
    """A single failed validation rule."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of validating one ProductInput."""

    valid: bool
    errors: list[FieldError] = Field(default_factory=list)
