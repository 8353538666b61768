"""Application service: Add To Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.cart_session import CartSession, cart_to_dto
from storefront.application.dto import ItemAddedNotice
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import UnitType
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, catalog_repo: CatalogRepository, session: CartSession) -> None:
        self._catalog_repo = catalog_repo
        self._session = session

    def handle(self, product_id: str, unit_type: UnitType) -> ItemAddedNotice:
        """Add one unit of a catalog product to the session cart.

        The line's unit price is taken from the product *now*; later
        catalog price changes do not touch it.
        """
        product = self._catalog_repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        cart = self._session.cart.add_item(product, unit_type)
        self._session.replace(cart)

        line = cart.line(product.id, unit_type)
        logger.info(
            "cart_item_added",
            product_id=product.id,
            unit_type=unit_type.value,
            quantity=line.quantity.value if line else None,
            item_count=cart.item_count,
        )

        return ItemAddedNotice(
            product_id=product.id,
            unit_type=unit_type.value,
            message=added_message(product, unit_type),
            cart=cart_to_dto(cart),
        )


def added_message(product: Product, unit_type: UnitType) -> str:
    if unit_type is UnitType.DOZEN:
        return f"{product.name} (1 Dozen) added to cart!"
    return f"{product.name} added to cart!"
