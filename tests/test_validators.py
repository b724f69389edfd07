"""
==============================================================================
Validator and Money Helper Tests
==============================================================================
"""

from decimal import Decimal

import pytest

from farmstore.utils.money import format_money, round2, to_decimal
from farmstore.utils.validators import (
    ItemCodeValidator,
    PriceValidator,
    QuantityValidator,
)


class TestMoney:
    """Tests for Decimal conversion and rounding."""

    @pytest.mark.parametrize("value, expected", [
        (Decimal("1.005"), Decimal("1.01")),
        (Decimal("2.675"), Decimal("2.68")),
        (Decimal("0.125"), Decimal("0.13")),
        (Decimal("0.124"), Decimal("0.12")),
    ])
    def test_round2_half_up(self, value, expected):
        assert round2(value) == expected

    def test_float_goes_through_str(self):
        assert to_decimal(12.1) == Decimal("12.1")

    @pytest.mark.parametrize("value", ["abc", "", "Infinity", True, None, [1]])
    def test_to_decimal_rejects(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)

    def test_format_money(self):
        assert format_money(Decimal("38.5")) == "$38.50"


class TestItemCodeValidator:
    """Tests for ItemCodeValidator."""

    def test_strips(self):
        assert ItemCodeValidator().validate("  F100 ") == (True, "F100", None)

    @pytest.mark.parametrize("code", ["", "  ", None, 100])
    def test_required(self, code):
        is_valid, normalized, error = ItemCodeValidator().validate(code)
        assert not is_valid
        assert normalized is None
        assert error == "Item code is required"

    def test_key_ignores_case(self):
        assert ItemCodeValidator.key("AbC") == ItemCodeValidator.key(" abc ")


class TestPriceValidator:
    """Tests for PriceValidator."""

    @pytest.mark.parametrize("value", [Decimal("12.00"), 12, "12.00", 12.0])
    def test_valid(self, value):
        is_valid, price, error = PriceValidator().validate(value)
        assert is_valid
        assert price == Decimal("12")
        assert error is None

    def test_negative(self):
        assert PriceValidator().validate("-0.01") == (False, None, "Price cannot be negative")

    def test_too_large_for_cents(self):
        """Amounts that cannot be quantized to cents are rejected."""
        assert PriceValidator().validate(Decimal("1E+26")) == (False, None, "Price is out of range")

    def test_large_but_representable(self):
        assert PriceValidator().validate(Decimal("1E+20"))[0] is True


class TestQuantityValidator:
    """Tests for QuantityValidator."""

    def test_positive_required_by_default(self):
        assert QuantityValidator().validate(0) == (False, "Quantity must be greater than zero")

    def test_zero_allowed_for_stock(self):
        assert QuantityValidator().validate(0, allow_zero=True) == (True, None)

    def test_parse_string(self):
        assert QuantityValidator().parse(" 3 ") == (True, 3, None)

    @pytest.mark.parametrize("raw", ["", "x", "1.5", "-2", "0", "1_000", "３", "٣"])
    def test_parse_rejects(self, raw):
        is_valid, qty, error = QuantityValidator().parse(raw)
        assert not is_valid
        assert qty is None
        assert error
