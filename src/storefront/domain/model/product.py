"""Catalog records: Product and Category.

Both are produced by the catalog data source and handed to the core
as-is. The core reads them but never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A sellable item in the catalog.

    ``discount`` is the advertised percentage off (0-100) shown as a
    badge. It is display data only; the cart prices lines from ``price``.
    """

    id: str
    name: str
    price: Money
    category: str
    description: str | None = None
    original_price: Money | None = None
    discount: int = 0
    in_stock: bool = True
    image_url: str | None = None
    created_at: datetime | None = None

    @property
    def is_marked_down(self) -> bool:
        """True when the original price should be shown struck through."""
        return self.original_price is not None and self.original_price > self.price

    @staticmethod
    def create(
        id: str,
        name: str,
        price: str | int | float | Decimal,
        category: str,
        description: str | None = None,
        original_price: str | int | float | Decimal | None = None,
        discount: int = 0,
        in_stock: bool = True,
        image_url: str | None = None,
        created_at: datetime | None = None,
    ) -> Product:
        """Build a product from raw values, enforcing record invariants."""
        if not id or not str(id).strip():
            raise ValidationError("Product id is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not 0 <= discount <= 100:
            raise ValidationError(
                f"Discount must be between 0 and 100, got {discount}"
            )

        return Product(
            id=str(id),
            name=name.strip(),
            price=Money.of(price),
            category=category,
            description=description,
            original_price=Money.of(original_price) if original_price is not None else None,
            discount=discount,
            in_stock=in_stock,
            image_url=image_url,
            created_at=created_at,
        )


@dataclass(frozen=True)
class Category:
    """A catalog category. ``display_order`` is passed through untouched."""

    id: str
    name: str
    display_order: int
