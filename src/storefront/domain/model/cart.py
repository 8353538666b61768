"""Cart aggregate: the session's line items and their pricing.

A Cart is an immutable snapshot. Every operation returns a new Cart and
leaves the receiver untouched, so the caller can keep or discard old
snapshots freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from types import MappingProxyType
from typing import Iterator, Mapping

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity, UnitType

# ---------------------------------------------------------------------------
# Pricing policy
# ---------------------------------------------------------------------------
DISCOUNT_THRESHOLD = Money(Decimal("500"))
DISCOUNT_RATE = Decimal("0.05")


@dataclass(frozen=True)
class CartLineKey:
    product_id: str
    unit_type: UnitType


@dataclass(frozen=True)
class CartLine:
    """One (product, unit type) entry in the cart.

    ``unit_price`` is captured when the line is first added and is never
    recomputed from the catalog afterwards (price lock).
    """

    product_id: str
    product_name: str
    unit_type: UnitType
    quantity: Quantity
    unit_price: Money  # locked at add time

    @property
    def key(self) -> CartLineKey:
        return CartLineKey(self.product_id, self.unit_type)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def display_name(self) -> str:
        return f"{self.product_name} ({self.unit_type.label})"


@dataclass(frozen=True)
class CartTotals:
    subtotal: Money
    discount: Money
    total: Money

    @property
    def has_discount(self) -> bool:
        return self.discount.amount > 0


@dataclass(frozen=True, eq=False)
class Cart:
    """Insertion-ordered map of cart lines keyed by (product id, unit type).

    Invariants:
    - at most one line per key (structural: the map is keyed)
    - every line present has quantity >= 1
    """

    _lines: Mapping[CartLineKey, CartLine] = field(
        default_factory=lambda: MappingProxyType({})
    )

    # --- Operations -----------------------------------------------------------

    def add_item(self, product: Product, unit_type: UnitType) -> Cart:
        """Add one unit of ``product`` at the given unit type.

        An existing line gets its quantity bumped and keeps its price
        snapshot. A new line is appended at the end with quantity 1.
        """
        key = CartLineKey(product.id, unit_type)
        lines = dict(self._lines)
        existing = lines.get(key)

        if existing is not None:
            lines[key] = replace(existing, quantity=Quantity(existing.quantity.value + 1))
        else:
            lines[key] = CartLine(
                product_id=product.id,
                product_name=product.name,
                unit_type=unit_type,
                quantity=Quantity(1),
                unit_price=product.price * unit_type.multiplier,
            )

        return Cart(MappingProxyType(lines))

    def adjust_quantity(self, product_id: str, unit_type: UnitType, delta: int) -> Cart:
        """Change a line's quantity by ``delta``.

        Unknown lines are ignored. A line that would reach zero (or
        below) is removed instead of being kept at zero.
        """
        key = CartLineKey(product_id, unit_type)
        existing = self._lines.get(key)
        if existing is None:
            return self

        new_quantity = max(0, existing.quantity.value + delta)
        lines = dict(self._lines)
        if new_quantity == 0:
            del lines[key]
        else:
            lines[key] = replace(existing, quantity=Quantity(new_quantity))

        return Cart(MappingProxyType(lines))

    def totals(self) -> CartTotals:
        subtotal = Money.zero()
        for line in self._lines.values():
            subtotal = subtotal + line.line_total

        if subtotal >= DISCOUNT_THRESHOLD:
            discount = subtotal.percentage(DISCOUNT_RATE)
        else:
            discount = Money.zero()

        return CartTotals(subtotal=subtotal, discount=discount, total=subtotal - discount)

    # --- Queries --------------------------------------------------------------

    def line(self, product_id: str, unit_type: UnitType) -> CartLine | None:
        return self._lines.get(CartLineKey(product_id, unit_type))

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    @property
    def item_count(self) -> int:
        """Total units across all lines (the cart badge number)."""
        return sum(line.quantity.value for line in self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._lines.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cart):
            return NotImplemented
        return list(self._lines.items()) == list(other._lines.items())
