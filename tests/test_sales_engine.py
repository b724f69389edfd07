"""
==============================================================================
Sales Engine Tests
==============================================================================

Tests for quote/commit figures, stock invariants and error tags.

==============================================================================
"""

from decimal import Decimal

import pytest

from farmstore.catalog import Catalog, Product
from farmstore.core import (
    InsufficientStockError,
    InvalidQuantityError,
    ValidationError,
)
from farmstore.sales import PaymentMethod, SalesEngine


class TestQuoteSale:
    """Tests for SalesEngine.quote_sale."""

    def test_feed_bag_scenario(self, engine: SalesEngine, feed_bag: Product):
        """3 x 12.00 at 7% -> 36.00 + 2.52 = 38.52."""
        quote = engine.quote_sale(feed_bag, 3)
        assert quote.subtotal == Decimal("36.00")
        assert quote.tax == Decimal("2.52")
        assert quote.total == Decimal("38.52")
        assert quote.item_code == "F100"
        assert quote.quantity == 3

    def test_quote_does_not_mutate_stock(self, engine: SalesEngine, feed_bag: Product):
        engine.quote_sale(feed_bag, 10)
        engine.quote_sale(feed_bag, 10)
        assert feed_bag.stock_quantity == 50

    def test_quote_is_idempotent(self, engine: SalesEngine, feed_bag: Product):
        assert engine.quote_sale(feed_bag, 7) == engine.quote_sale(feed_bag, 7)

    def test_untaxed_product_has_zero_tax(self, engine: SalesEngine, chew_toy: Product):
        quote = engine.quote_sale(chew_toy, 3)
        assert quote.subtotal == Decimal("10.47")
        assert quote.tax == Decimal("0")
        assert quote.total == Decimal("10.47")

    def test_tax_rounds_half_up(self, catalog: Catalog, engine: SalesEngine):
        """0.50 * 0.07 = 0.035 rounds to 0.04."""
        product = catalog.add_product("H1", "Hook", "", Decimal("0.50"), True, 10)
        quote = engine.quote_sale(product, 1)
        assert quote.tax == Decimal("0.04")
        assert quote.total == Decimal("0.54")

    def test_half_cent_tax_rounds_up_on_even_cent(self, catalog: Catalog, engine: SalesEngine):
        """1.50 * 0.07 = 0.105 -> 0.11 (half-even would give 0.10)."""
        product = catalog.add_product("H2", "Halter", "", Decimal("1.50"), True, 10)
        assert engine.quote_sale(product, 1).tax == Decimal("0.11")

    def test_no_float_drift(self, catalog: Catalog, engine: SalesEngine):
        """0.10 * 3 is exactly 0.30."""
        product = catalog.add_product("S1", "Seed Pack", "", Decimal("0.10"), False, 10)
        assert engine.quote_sale(product, 3).total == Decimal("0.30")

    def test_uses_catalog_tax_rate(self, catalog: Catalog, engine: SalesEngine, feed_bag: Product):
        catalog.tax_rate = Decimal("0.10")
        quote = engine.quote_sale(feed_bag, 1)
        assert quote.tax == Decimal("1.20")
        assert quote.tax_rate == Decimal("0.10")

    def test_quantity_equal_to_stock_allowed(self, engine: SalesEngine, feed_bag: Product):
        assert engine.quote_sale(feed_bag, 50).quantity == 50

    def test_insufficient_stock(self, engine: SalesEngine, feed_bag: Product):
        with pytest.raises(InsufficientStockError) as exc_info:
            engine.quote_sale(feed_bag, 51)
        assert exc_info.value.details["available"] == 50
        assert feed_bag.stock_quantity == 50

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "3", True, None])
    def test_invalid_quantity(self, engine: SalesEngine, feed_bag: Product, quantity):
        with pytest.raises(InvalidQuantityError):
            engine.quote_sale(feed_bag, quantity)
        assert feed_bag.stock_quantity == 50

    def test_amount_too_large_for_cents(self, catalog: Catalog, engine: SalesEngine):
        """Figures beyond Decimal precision are a tagged error, not a crash."""
        product = catalog.add_product("L1", "Land", "", Decimal("1E+20"), True, 10**9)
        with pytest.raises(InvalidQuantityError) as exc_info:
            engine.quote_sale(product, 10**9)
        assert exc_info.value.details["item_code"] == "L1"
        assert product.stock_quantity == 10**9


class TestCommitSale:
    """Tests for SalesEngine.commit_sale."""

    def test_feed_bag_commit(self, engine: SalesEngine, feed_bag: Product):
        quote = engine.quote_sale(feed_bag, 3)
        result = engine.commit_sale(feed_bag, 3, quote, PaymentMethod.CARD)
        assert feed_bag.stock_quantity == 47
        assert result.new_stock == 47
        assert result.total == Decimal("38.52")
        assert result.payment_method is PaymentMethod.CARD

    def test_default_payment_is_cash(self, engine: SalesEngine, feed_bag: Product):
        quote = engine.quote_sale(feed_bag, 1)
        assert engine.commit_sale(feed_bag, 1, quote).payment_method is PaymentMethod.CASH

    def test_sell_entire_stock(self, engine: SalesEngine, feed_bag: Product):
        quote = engine.quote_sale(feed_bag, 50)
        assert engine.commit_sale(feed_bag, 50, quote).new_stock == 0

    def test_stale_quote_rejected(self, engine: SalesEngine, feed_bag: Product):
        """Two quotes for 30; the second commit would go negative."""
        first = engine.quote_sale(feed_bag, 30)
        second = engine.quote_sale(feed_bag, 30)
        engine.commit_sale(feed_bag, 30, first)
        with pytest.raises(InsufficientStockError):
            engine.commit_sale(feed_bag, 30, second)
        assert feed_bag.stock_quantity == 20

    def test_quote_for_other_quantity_rejected(self, engine: SalesEngine, feed_bag: Product):
        quote = engine.quote_sale(feed_bag, 2)
        with pytest.raises(ValidationError):
            engine.commit_sale(feed_bag, 3, quote)
        assert feed_bag.stock_quantity == 50

    def test_quote_for_other_product_rejected(
        self, engine: SalesEngine, feed_bag: Product, chew_toy: Product
    ):
        quote = engine.quote_sale(chew_toy, 1)
        with pytest.raises(ValidationError):
            engine.commit_sale(feed_bag, 1, quote)
        assert feed_bag.stock_quantity == 50
        assert chew_toy.stock_quantity == 4

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_commit_invalid_quantity(self, engine: SalesEngine, feed_bag: Product, quantity):
        quote = engine.quote_sale(feed_bag, 1)
        with pytest.raises(InvalidQuantityError):
            engine.commit_sale(feed_bag, quantity, quote)
        assert feed_bag.stock_quantity == 50

    def test_stock_never_negative_over_sequence(self, engine: SalesEngine, chew_toy: Product):
        """Repeated sales stop at zero."""
        for quantity in [1, 2, 3, 1, 1, 5]:
            try:
                quote = engine.quote_sale(chew_toy, quantity)
                engine.commit_sale(chew_toy, quantity, quote)
            except InsufficientStockError:
                pass
            assert chew_toy.stock_quantity >= 0
        assert chew_toy.stock_quantity == 0
