"""Pydantic schemas for Storefront."""

from storefront.schemas.import_schemas import (
    FormatCheck,
    ImportResponse,
    ImportResult,
    ImportRowError,
)
from storefront.schemas.product import FieldError, ProductInput, ValidationResult

__all__ = [
    "FieldError",
    "FormatCheck",
    "ImportResponse",
    "ImportResult",
    "ImportRowError",
    "ProductInput",
    "ValidationResult",
]
