"""Application service: Browse Catalog use case (query).

Loads the catalog from the data source, runs it through the catalog
filter and maps the result to DTOs for display.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CatalogPageDTO, ProductDTO
from storefront.domain.model.filter_criteria import FilterCriteria
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, UnitType
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.service.catalog_filter import CatalogFilter, price_bounds

logger = structlog.get_logger(__name__)


class BrowseCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository, catalog_filter: CatalogFilter) -> None:
        self._catalog_repo = catalog_repo
        self._catalog_filter = catalog_filter

    def handle(self, criteria: FilterCriteria) -> CatalogPageDTO:
        products = self._catalog_repo.list_products()
        filtered = self._catalog_filter.filter(products, criteria)

        logger.info(
            "catalog_filtered",
            category=criteria.category,
            search=criteria.search,
            min_price=str(criteria.min_price),
            max_price=str(criteria.max_price),
            total=len(products),
            matched=len(filtered),
        )

        bounds = price_bounds(products)
        return CatalogPageDTO(
            products=[self._to_dto(p) for p in filtered],
            lowest_price=str(Money(bounds[0])) if bounds else None,
            highest_price=str(Money(bounds[1])) if bounds else None,
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),
            dozen_price=str(product.price * UnitType.DOZEN.multiplier),
            original_price=str(product.original_price) if product.is_marked_down else None,
            discount=product.discount,
            description=product.description,
        )
