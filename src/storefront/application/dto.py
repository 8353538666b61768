"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted strings, e.g. "₹480.00".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str
    dozen_price: str
    original_price: str | None  # only set when marked down
    discount: int
    description: str | None


@dataclass(frozen=True)
class CatalogPageDTO:
    """Output: one filtered view of the catalog."""

    products: list[ProductDTO]
    lowest_price: str | None  # bounds of the whole catalog, for a price slider
    highest_price: str | None


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str
    display_order: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    unit_type: str
    display_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart, lines in the order they were added.

    This is also exactly what an order-message formatter needs.
    """

    lines: list[CartLineDTO]
    item_count: int
    subtotal: str
    discount: str
    total: str
    has_discount: bool


@dataclass(frozen=True)
class ItemAddedNotice:
    """Output: the "item added" notification for the presentation layer."""

    product_id: str
    unit_type: str
    message: str
    cart: CartDTO
