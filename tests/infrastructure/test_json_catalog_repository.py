"""Tests for the JSON-file catalog data source."""

import json

import pytest

from storefront.domain.exceptions import CatalogUnavailableError
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)


def _write(tmp_path, payload) -> JsonCatalogRepository:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return JsonCatalogRepository(path)


def _product(id, name, created_at=None, in_stock=True, **extra):
    record = {"id": id, "name": name, "price": "100", "category": "Basic", "in_stock": in_stock}
    if created_at:
        record["created_at"] = created_at
    record.update(extra)
    return record


class TestListProducts:

    def test_only_in_stock_newest_first(self, tmp_path):
        repo = _write(tmp_path, {"products": [
            _product("1", "Old", "2025-07-01T00:00:00Z"),
            _product("2", "Gone", "2025-08-01T00:00:00Z", in_stock=False),
            _product("3", "New", "2025-07-20T00:00:00+00:00"),
            _product("4", "Undated"),
        ]})
        assert [p.name for p in repo.list_products()] == ["New", "Old", "Undated"]

    def test_maps_fields(self, tmp_path):
        repo = _write(tmp_path, {"products": [
            _product("1", "Silver Rakhi", description="Pure silver", original_price=120,
                     discount=15, image_url="https://example.com/s.png"),
        ]})
        p = repo.list_products()[0]
        assert p.price == Money.of("100")
        assert p.original_price == Money.of("120")
        assert p.discount == 15
        assert p.description == "Pure silver"
        assert p.is_marked_down

    def test_null_discount_means_zero(self, tmp_path):
        repo = _write(tmp_path, {"products": [_product("1", "A", discount=None)]})
        assert repo.list_products()[0].discount == 0

    def test_get_product(self, tmp_path):
        repo = _write(tmp_path, {"products": [_product("1", "A"), _product("2", "B")]})
        assert repo.get_product("2").name == "B"
        assert repo.get_product("9") is None

    def test_malformed_record(self, tmp_path):
        repo = _write(tmp_path, {"products": [{"id": "1", "name": "No price"}]})
        with pytest.raises(CatalogUnavailableError, match="Malformed product"):
            repo.list_products()

    def test_invalid_value_in_record(self, tmp_path):
        repo = _write(tmp_path, {"products": [_product("1", "A", discount=150)]})
        with pytest.raises(CatalogUnavailableError, match="Malformed product"):
            repo.list_products()


    def test_mixed_timestamp_offsets(self, tmp_path):
        repo = _write(tmp_path, {"products": [
            _product("1", "Aware", "2025-07-01T00:00:00Z"),
            _product("2", "Naive", "2025-07-02T00:00:00"),
            _product("3", "Undated"),
        ]})
        assert [p.name for p in repo.list_products()] == ["Naive", "Aware", "Undated"]

    def test_in_stock_must_be_boolean(self, tmp_path):
        repo = _write(tmp_path, {"products": [_product("1", "A", in_stock="false")]})
        with pytest.raises(CatalogUnavailableError, match="in_stock must be a JSON boolean"):
            repo.list_products()

    def test_missing_in_stock_means_available(self, tmp_path):
        record = _product("1", "A")
        del record["in_stock"]
        repo = _write(tmp_path, {"products": [record]})
        assert [p.name for p in repo.list_products()] == ["A"]


class TestListCategories:

    def test_sorted_by_display_order(self, tmp_path):
        repo = _write(tmp_path, {"categories": [
            {"id": "b", "name": "Basic", "display_order": 2},
            {"id": "a", "name": "All", "display_order": 0},
            {"id": "p", "name": "Premium", "display_order": 1},
        ]})
        assert [c.name for c in repo.list_categories()] == ["All", "Premium", "Basic"]


class TestUnavailable:

    def test_missing_file(self, tmp_path):
        repo = JsonCatalogRepository(tmp_path / "nope.json")
        with pytest.raises(CatalogUnavailableError, match="not found"):
            repo.list_products()

    def test_bad_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogUnavailableError, match="not valid JSON"):
            JsonCatalogRepository(path).list_categories()

    def test_top_level_must_be_object(self, tmp_path):
        repo = _write(tmp_path, [])
        with pytest.raises(CatalogUnavailableError, match="JSON object"):
            repo.list_products()
