"""In-memory fake catalog for testing.

Implements the same abstract interface as the JSON repository but
keeps everything in lists. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.model.product import Category, Product
from storefront.domain.repository.catalog_repository import CatalogRepository


class FakeCatalogRepository(CatalogRepository):

    def __init__(
        self,
        products: list[Product] | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        self._products: list[Product] = list(products or [])
        self._categories: list[Category] = list(categories or [])

    def list_products(self) -> list[Product]:
        return list(self._products)

    def list_categories(self) -> list[Category]:
        return list(self._categories)

    def replace_product(self, product: Product) -> None:
        """Swap in a new version of a product, as a catalog update would."""
        self._products = [product if p.id == product.id else p for p in self._products]


def make_product(
    name: str = "Plain Rakhi",
    price: str = "50",
    category: str = "Basic",
    id: str | None = None,
    description: str | None = None,
) -> Product:
    return Product.create(
        id=id or name.lower().replace(" ", "-"),
        name=name,
        price=price,
        category=category,
        description=description,
    )
