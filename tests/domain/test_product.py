"""Unit tests for catalog records."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


class TestProductCreate:

    def test_coerces_prices(self):
        p = Product.create(id="1", name="Silver Rakhi", price="350", category="Premium")
        assert p.price == Money.of("350")
        assert p.original_price is None
        assert p.in_stock is True

    def test_strips_name(self):
        p = Product.create(id="1", name="  Pan Rakhi ", price=80, category="Basic")
        assert p.name == "Pan Rakhi"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create(id="1", name="  ", price=80, category="Basic")

    def test_discount_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Product.create(id="1", name="Pan Rakhi", price=80, category="Basic", discount=120)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create(id="1", name="Pan Rakhi", price=-1, category="Basic")


class TestMarkdown:

    def test_marked_down_when_original_higher(self):
        p = Product.create(id="1", name="A", price=200, category="X", original_price=250)
        assert p.is_marked_down

    def test_not_marked_down_when_original_equal(self):
        p = Product.create(id="1", name="A", price=200, category="X", original_price=200)
        assert not p.is_marked_down

    def test_not_marked_down_without_original(self):
        p = Product.create(id="1", name="A", price=200, category="X")
        assert not p.is_marked_down
