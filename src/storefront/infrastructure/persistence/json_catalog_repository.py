"""JSON-file-backed implementation of CatalogRepository.

Read-only. The file holds ``{"categories": [...], "products": [...]}``
in the same shape the storefront's backend returns. Only in-stock
products are returned, newest first; categories come back in display
order.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import structlog

from storefront.domain.exceptions import CatalogUnavailableError, DomainException
from storefront.domain.model.product import Category, Product
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogRepository interface ------------------------------------------

    def list_products(self) -> list[Product]:
        raw = self._load().get("products", [])
        try:
            products = [self._to_product(item) for item in raw]
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            logger.error("catalog_record_invalid", path=str(self._file_path), error=str(exc))
            raise CatalogUnavailableError(f"Malformed product record: {exc}") from exc

        in_stock = [p for p in products if p.in_stock]
        # Undated records sort after dated ones; sort is stable for ties.
        in_stock.sort(
            key=lambda p: (p.created_at is not None, p.created_at or _EARLIEST),
            reverse=True,
        )
        return in_stock

    def list_categories(self) -> list[Category]:
        raw = self._load().get("categories", [])
        try:
            categories = [
                Category(
                    id=str(item["id"]),
                    name=item["name"],
                    display_order=int(item.get("display_order", 0)),
                )
                for item in raw
            ]
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("catalog_record_invalid", path=str(self._file_path), error=str(exc))
            raise CatalogUnavailableError(f"Malformed category record: {exc}") from exc

        return sorted(categories, key=lambda c: c.display_order)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Any]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            logger.error("catalog_missing", path=str(self._file_path))
            raise CatalogUnavailableError(f"Catalog file not found: {self._file_path}") from exc
        except json.JSONDecodeError as exc:
            logger.error("catalog_unreadable", path=str(self._file_path), error=str(exc))
            raise CatalogUnavailableError(f"Catalog file is not valid JSON: {exc}") from exc

        if not isinstance(raw, dict):
            raise CatalogUnavailableError("Catalog file must contain a JSON object")
        return raw

    @staticmethod
    def _to_product(item: dict[str, Any]) -> Product:
        created_at = item.get("created_at")
        return Product.create(
            id=item["id"],
            name=item["name"],
            price=item["price"],
            category=item["category"],
            description=item.get("description"),
            original_price=item.get("original_price"),
            discount=int(item.get("discount") or 0),
            in_stock=_parse_in_stock(item.get("in_stock", True)),
            image_url=item.get("image_url"),
            created_at=_parse_timestamp(created_at) if created_at else None,
        )


def _parse_timestamp(raw: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    parsed = datetime.fromisoformat(raw)
    # Offset-less timestamps are taken as UTC so every record compares
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_in_stock(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"in_stock must be a JSON boolean, got {raw!r}")
    return raw
