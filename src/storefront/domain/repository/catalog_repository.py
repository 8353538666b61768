"""Abstract catalog data source.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete source (a JSON file, a remote store)
owns availability filtering and ordering; the core takes what it
returns as-is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Category, Product


class CatalogRepository(ABC):

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return the sellable (in-stock) products, newest first."""

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return every category ordered by display order."""

    def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""
        for product in self.list_products():
            if product.id == product_id:
                return product
        return None
