"""Application service: List Categories use case (query)."""

from __future__ import annotations

from storefront.application.dto import CategoryDTO
from storefront.domain.repository.catalog_repository import CatalogRepository


class ListCategoriesHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> list[CategoryDTO]:
        return [
            CategoryDTO(id=c.id, name=c.name, display_order=c.display_order)
            for c in self._catalog_repo.list_categories()
        ]
