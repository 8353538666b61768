"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_session import CartSession, cart_to_dto
from storefront.application.dto import CartDTO


class ShowCartHandler:

    def __init__(self, session: CartSession) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        return cart_to_dto(self._session.cart)
