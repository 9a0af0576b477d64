"""Persistence of catalog products in MongoDB."""

import logging

from pymongo.errors import DuplicateKeyError

from storefront.models.product import Product
from storefront.schemas.product import ProductInput
from storefront.services.errors import DuplicateProductError

logger = logging.getLogger(__name__)


async def create_product(product: ProductInput) -> Product:
    """Insert a new product document.

    Args:
        product: Validated canonical product input.

    Returns:
        The inserted Product document.

    Raises:
        DuplicateProductError: If the product ID or SKU is already taken.
    """
    document = Product(**product.model_dump())
    try:
        await document.insert()
    except DuplicateKeyError as e:
        logger.debug("Duplicate key on product insert: %s", e)
        raise DuplicateProductError(product.product_id, product.sku) from e
    return document
