"""Application service: Adjust Cart Quantity use case."""

from __future__ import annotations

import structlog

from storefront.application.cart_session import CartSession, cart_to_dto
from storefront.application.dto import CartDTO
from storefront.domain.model.value_objects import UnitType

logger = structlog.get_logger(__name__)


class AdjustCartQuantityHandler:

    def __init__(self, session: CartSession) -> None:
        self._session = session

    def handle(self, product_id: str, unit_type: UnitType, delta: int) -> CartDTO:
        """Apply the +/- buttons to a cart line.

        Adjusting a line that is no longer in the cart is a no-op, since
        the UI may still send clicks for a line it just removed.
        """
        before = self._session.cart.line(product_id, unit_type)
        cart = self._session.cart.adjust_quantity(product_id, unit_type, delta)
        self._session.replace(cart)

        if before is None:
            logger.debug("cart_adjust_ignored", product_id=product_id, unit_type=unit_type.value)
        elif cart.line(product_id, unit_type) is None:
            logger.info("cart_line_removed", product_id=product_id, unit_type=unit_type.value)
        else:
            logger.info(
                "cart_quantity_adjusted",
                product_id=product_id,
                unit_type=unit_type.value,
                delta=delta,
            )

        return cart_to_dto(cart)
