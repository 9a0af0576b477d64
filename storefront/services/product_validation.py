"""Validation rules for catalog products."""

import re

from storefront.schemas.product import FieldError, ProductInput, ValidationResult

VALID_CATEGORIES = (
    "Drinkware",
    "Kitchenware",
    "Office Supplies",
    "Electronics",
    "Furniture",
    "Home Decor",
    "Textiles",
    "Toys",
    "Sports",
    "Beauty",
    "Health",
    "Automotive",
    "Garden",
    "Pet Supplies",
    "Other",
)

MAX_PRODUCT_ID_LENGTH = 50
MAX_SKU_LENGTH = 50
MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000

_IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9\-_]+$")


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def validate_product_id(product_id: str) -> FieldError | None:
    if _is_blank(product_id):
        return FieldError(field="product_id", message="Product ID is required")
    if len(product_id) > MAX_PRODUCT_ID_LENGTH:
        return FieldError(
            field="product_id",
            message=f"Product ID must not exceed {MAX_PRODUCT_ID_LENGTH} characters",
        )
    if not _IDENTIFIER_RE.match(product_id):
        return FieldError(
            field="product_id",
            message="Product ID can only contain letters, numbers, hyphens, and underscores",
        )
    return None


def validate_name(name: str) -> FieldError | None:
    if _is_blank(name):
        return FieldError(field="name", message="Product name is required")
    if len(name) > MAX_NAME_LENGTH:
        return FieldError(
            field="name",
            message=f"Product name must not exceed {MAX_NAME_LENGTH} characters",
        )
    return None


def validate_sku(sku: str) -> FieldError | None:
    if _is_blank(sku):
        return FieldError(field="sku", message="SKU is required")
    if len(sku) > MAX_SKU_LENGTH:
        return FieldError(field="sku", message=f"SKU must not exceed {MAX_SKU_LENGTH} characters")
    if not _IDENTIFIER_RE.match(sku):
        return FieldError(
            field="sku",
            message="SKU can only contain letters, numbers, hyphens, and underscores",
        )
    return None


def validate_category(category: str) -> FieldError | None:
    if _is_blank(category):
        return FieldError(field="category", message="Category is required")
    if category not in VALID_CATEGORIES:
        return FieldError(
            field="category",
            message=f"Category must be one of: {', '.join(VALID_CATEGORIES)}",
        )
    return None


def validate_description(description: str) -> FieldError | None:
    if _is_blank(description):
        return FieldError(field="description", message="Description is required")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return FieldError(
            field="description",
            message=f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters",
        )
    return None


def validate_specs(specs: object) -> FieldError | None:
    if not isinstance(specs, dict):
        return FieldError(field="specs", message="Product specifications must be a valid object")
    if not specs:
        return FieldError(field="specs", message="Product specifications cannot be empty")
    return None


def validate_product(product: ProductInput) -> ValidationResult:
    """Run every field rule against a product.

    All rules are evaluated, so a single result can carry several errors.

    Args:
        product: Canonical product input.

    Returns:
        ValidationResult with valid=True when no rule failed.
    """
    checks = (
        validate_product_id(product.product_id),
        validate_name(product.name),
        validate_sku(product.sku),
        validate_category(product.category),
        validate_description(product.description),
        validate_specs(product.specs),
    )
    errors = [error for error in checks if error is not None]
    return ValidationResult(valid=not errors, errors=errors)


def format_validation_errors(errors: list[FieldError]) -> list[str]:
    """Render validation errors as "field: message" strings."""
    return [str(error) for error in errors]
