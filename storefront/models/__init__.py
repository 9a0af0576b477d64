"""MongoDB document models for Storefront."""

from storefront.models.product import Product

__all__ = [
    "Product",
]
