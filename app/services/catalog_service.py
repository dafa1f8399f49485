import logging
from datetime import datetime
from typing import List, Optional

from app.exceptions import ProductNotFound
from app.models.product import Product
from app.repositories.base import ProductRepository
from app.schemas.product_schemas import ProductCreate

logger = logging.getLogger(__name__)


def list_products(
    products: ProductRepository,
    category: Optional[str] = None,
    search: Optional[str] = None,
    include_inactive: bool = False,
) -> List[Product]:
    return products.list(category=category, search=search, include_inactive=include_inactive)


def get_product(products: ProductRepository, product_id: int) -> Product:
    product = products.get(product_id)
    if not product:
        raise ProductNotFound()
    return product


def create_product(products: ProductRepository, data: ProductCreate) -> Product:
    product = Product(**data.model_dump())
    product = products.add(product)
    logger.info(f"Product created: {product.id} {product.name}")
    return product


def update_product(products: ProductRepository, product_id: int, data: ProductCreate) -> Product:
    """Replace every column of the product with ``data``.

    Stock and featured edits come through here too, so concurrent admin
    edits are last-write-wins.
    """
    product = get_product(products, product_id)

    for field, value in data.model_dump().items():
        setattr(product, field, value)
    product.updated_at = datetime.utcnow()

    product = products.save(product)
    logger.info(f"Product updated: {product.id} {product.name}")
    return product


def _set_active(products: ProductRepository, product_id: int, active: bool) -> Product:
    product = get_product(products, product_id)
    product.active = active
    product.updated_at = datetime.utcnow()
    return products.save(product)


def deactivate_product(products: ProductRepository, product_id: int) -> Product:
    product = _set_active(products, product_id, False)
    logger.info(f"Product deactivated: {product.id} {product.name}")
    return product


def restore_product(products: ProductRepository, product_id: int) -> Product:
    product = _set_active(products, product_id, True)
    logger.info(f"Product restored: {product.id} {product.name}")
    return product


def delete_product(products: ProductRepository, product_id: int) -> None:
    product = get_product(products, product_id)
    products.delete(product)
    logger.info(f"Product permanently deleted: {product_id}")
