"""API routers for Storefront."""

from storefront.routers import import_router

__all__ = ["import_router"]
