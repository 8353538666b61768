"""FilterCriteria value object for catalog browsing."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

# Category value meaning "no category restriction".
ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class FilterCriteria:
    """What the shopper asked to see.

    Price bounds are inclusive. They are deliberately not cross-checked:
    ``min_price > max_price`` is a legal value that matches nothing.
    """

    category: str = ALL_CATEGORIES
    search: str = ""
    min_price: Decimal = Decimal("0")
    max_price: Decimal = Decimal("Infinity")

    @property
    def restricts_category(self) -> bool:
        return self.category != ALL_CATEGORIES

    @staticmethod
    def of(
        category: str | None = None,
        search: str | None = None,
        min_price: str | int | float | Decimal | None = None,
        max_price: str | int | float | Decimal | None = None,
    ) -> FilterCriteria:
        """Build criteria from loose input; ``None`` means unrestricted."""
        return FilterCriteria(
            category=category or ALL_CATEGORIES,
            search=search or "",
            min_price=_to_decimal(min_price, Decimal("0")),
            max_price=_to_decimal(max_price, Decimal("Infinity")),
        )


def _to_decimal(raw: str | int | float | Decimal | None, default: Decimal) -> Decimal:
    if raw is None:
        return default
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid price bound: {raw!r}") from exc
    if value.is_nan():
        raise ValidationError(f"Invalid price bound: {raw!r}")
    return value
