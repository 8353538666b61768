"""Domain service: Catalog Filter.

Narrows the catalog down to what the shopper asked for and then applies
the merchandising rule: products whose names contain one of the
configured priority fragments are pulled to the top, in fragment order.

Fragment matching is a case-insensitive substring test. A product is
ranked by the *first* fragment in the list that it contains; products
with the same rank keep their original relative order.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from storefront.domain.model.filter_criteria import FilterCriteria
from storefront.domain.model.product import Product

DEFAULT_PRIORITY_FRAGMENTS: tuple[str, ...] = (
    "Real Kundan Rakhi",
    "Full Diamond Rakhi",
    "Silver Rakhi",
    "Full Kundan Rakhi",
    "Pan Rakhi",
    "Rakhi with Kum Kum",
)


class CatalogFilter:

    def __init__(self, priority_fragments: Iterable[str] = DEFAULT_PRIORITY_FRAGMENTS) -> None:
        self._priority_fragments = tuple(priority_fragments)
        self._lowered_fragments = tuple(f.lower() for f in self._priority_fragments)

    @property
    def priority_fragments(self) -> tuple[str, ...]:
        return self._priority_fragments

    def filter(self, products: Sequence[Product], criteria: FilterCriteria) -> list[Product]:
        """Return the matching products, priority items first."""
        matching = [p for p in products if self.matches(p, criteria)]
        return self.prioritize(matching)

    def matches(self, product: Product, criteria: FilterCriteria) -> bool:
        if criteria.restricts_category and product.category != criteria.category:
            return False

        if criteria.search:
            needle = criteria.search.lower()
            in_name = needle in product.name.lower()
            in_description = (
                product.description is not None
                and needle in product.description.lower()
            )
            if not (in_name or in_description):
                return False

        # A NaN bound cannot be ordered against, so nothing satisfies it
        if criteria.min_price.is_nan() or criteria.max_price.is_nan():
            return False
        return criteria.min_price <= product.price.amount <= criteria.max_price

    def prioritize(self, products: Sequence[Product]) -> list[Product]:
        """Reorder without filtering: priority group, then everything else."""
        priority: list[tuple[int, Product]] = []
        regular: list[Product] = []

        for product in products:
            rank = self.priority_rank(product)
            if rank is None:
                regular.append(product)
            else:
                priority.append((rank, product))

        # list.sort is stable, so equal ranks keep their input order
        priority.sort(key=lambda pair: pair[0])
        return [p for _, p in priority] + regular

    def priority_rank(self, product: Product) -> int | None:
        """Index of the first fragment the product name contains, or None."""
        name = product.name.lower()
        for index, fragment in enumerate(self._lowered_fragments):
            if fragment in name:
                return index
        return None


def price_bounds(products: Iterable[Product]) -> tuple[Decimal, Decimal] | None:
    """Lowest and highest price in ``products``, or None when empty."""
    prices = [p.price.amount for p in products]
    if not prices:
        return None
    return min(prices), max(prices)
