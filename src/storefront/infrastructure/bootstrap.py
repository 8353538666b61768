"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.service.catalog_filter import CatalogFilter
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(get_settings().catalog_path)


def catalog_filter() -> CatalogFilter:
    return CatalogFilter(get_settings().priority_fragments)
