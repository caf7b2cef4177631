"""Product handlers: lookup, existence check, mutation, commit.

Invariants:
    - Every id-based handler resolves the row through get_product_or_404 first
    - A missing row raises ProductNotFoundError before any mutation
    - Each mutating handler commits exactly once

Design Decisions:
    - Bodies arrive as plain dicts already checked by the rule chains, so the
      coercions here (as_number, as_bool) cannot fail on validated input
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.errors import ProductNotFoundError
from products_api.core.validation import as_bool, as_number, as_text
from products_api.models.product import Product

logger = logging.getLogger(__name__)

PRODUCT_DELETED_MESSAGE = "Producto Eliminado"


async def get_product_or_404(db: AsyncSession, product_id: int) -> Product:
    """Get product or raise ProductNotFoundError."""
    product = await db.get(Product, product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


async def list_products(db: AsyncSession) -> list[Product]:
    result = await db.execute(select(Product).order_by(Product.id.desc()))
    return list(result.scalars().all())


async def create_product(db: AsyncSession, payload: dict[str, Any]) -> Product:
    availability = as_bool(payload.get("availability"))
    product = Product(
        name=as_text(payload["name"]),
        price=as_number(payload["price"]),
        availability=True if availability is None else availability,
    )
    db.add(product)
    await db.commit()
    await db.refresh(product)
    logger.info("Product created", extra={"product_id": product.id})
    return product


async def update_product(
    db: AsyncSession, product_id: int, payload: dict[str, Any],
) -> Product:
    """Full replace of name, price and availability."""
    product = await get_product_or_404(db, product_id)
    product.name = as_text(payload["name"])
    product.price = as_number(payload["price"])
    product.availability = as_bool(payload["availability"])
    await db.commit()
    await db.refresh(product)
    logger.info("Product updated", extra={"product_id": product_id})
    return product


async def toggle_availability(db: AsyncSession, product_id: int) -> Product:
    """Flip availability. Any request body is ignored."""
    product = await get_product_or_404(db, product_id)
    product.availability = not product.availability
    await db.commit()
    await db.refresh(product)
    logger.info(
        f"Product availability set to {product.availability}",
        extra={"product_id": product_id},
    )
    return product


async def delete_product(db: AsyncSession, product_id: int) -> str:
    product = await get_product_or_404(db, product_id)
    await db.delete(product)
    await db.commit()
    logger.info("Product deleted", extra={"product_id": product_id})
    return PRODUCT_DELETED_MESSAGE
