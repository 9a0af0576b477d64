"""Domain exceptions raised by Storefront services."""


class StorefrontError(Exception):
    """Base class for Storefront service errors."""


class DuplicateProductError(StorefrontError):
    """A product with the same ID or SKU already exists."""

    def __init__(self, product_id: str, sku: str):
        self.product_id = product_id
        self.sku = sku
        super().__init__(f"Product with ID '{product_id}' or SKU '{sku}' already exists")
