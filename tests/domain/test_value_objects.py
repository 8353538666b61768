"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, UnitType


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "INR"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("40") * 12 == Money.of("480")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("40") * 1.5

    def test_percentage_rounds_half_up_to_paisa(self):
        assert Money.of("500").percentage(Decimal("0.05")) == Money.of("25.00")
        assert Money.of("500.10").percentage(Decimal("0.05")) == Money.of("25.01")  # 25.005
        assert Money.of("500.30").percentage(Decimal("0.05")) == Money.of("25.02")  # 25.015

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "INR") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "₹15.00"
        assert str(Money.of("9.5")) == "₹9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") >= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)


# ── UnitType ─────────────────────────────────────────────────────────────────


class TestUnitType:

    def test_multipliers(self):
        assert UnitType.SINGLE.multiplier == 1
        assert UnitType.DOZEN.multiplier == 12

    def test_parse_is_case_insensitive(self):
        assert UnitType.parse(" Dozen ") is UnitType.DOZEN

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown unit type"):
            UnitType.parse("pair")
