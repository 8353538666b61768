"""Session-scoped holder for the shopper's current Cart snapshot.

Starts empty and lives as long as the shopping session. Not thread
safe: a session is driven by a single caller.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import Cart


class CartSession:

    def __init__(self, cart: Cart | None = None) -> None:
        self._cart = cart if cart is not None else Cart()

    @property
    def cart(self) -> Cart:
        return self._cart

    def replace(self, cart: Cart) -> None:
        self._cart = cart


def cart_to_dto(cart: Cart) -> CartDTO:
    totals = cart.totals()
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=line.product_id,
                unit_type=line.unit_type.value,
                display_name=line.display_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in cart.lines
        ],
        item_count=cart.item_count,
        subtotal=str(totals.subtotal),
        discount=str(totals.discount),
        total=str(totals.total),
        has_discount=totals.has_discount,
    )
