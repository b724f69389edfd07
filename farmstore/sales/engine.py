"""
==============================================================================
Sales Engine Module
==============================================================================

Two-phase single-item sale processing.

Workflow:
---------
    quote_sale()  ──▶  (operator confirms, picks payment method)  ──▶  commit_sale()
         │                                                               │
         └── no mutation, repeatable                                     └── stock -= quantity

Figures:
--------
- subtotal = unit_price * quantity                 (exact Decimal)
- tax      = round2(subtotal * tax_rate) if taxable else 0.00
- total    = round2(subtotal + tax)

round2 is quantize to cents with ROUND_HALF_UP.

The engine never saves; ``StoreService`` persists after each commit.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import InvalidOperation
from typing import Any

from farmstore.catalog import Catalog, Product
from farmstore.core import exceptions
from farmstore.utils.money import ZERO, round2
from farmstore.utils.validators import ItemCodeValidator, QuantityValidator

from .models import PaymentMethod, SaleQuote, SaleResult


# Module logger
logger = logging.getLogger(__name__)


class SalesEngine:
    """
    Quotes and commits sales against a catalog's tax rate.

    The engine borrows products owned by the catalog and is the only code
    path that changes ``stock_quantity``.

    Example:
        >>> engine = SalesEngine(catalog)
        >>> quote = engine.quote_sale(product, 3)
        >>> result = engine.commit_sale(product, 3, quote, PaymentMethod.CARD)
        >>> result.new_stock
        47
    """

    def __init__(self, catalog: Catalog) -> None:
        """
        Initialize the sales engine.

        Args:
            catalog: Catalog whose tax rate applies to every sale
        """
        self._catalog = catalog
        self._quantity_validator = QuantityValidator()

    # =========================================================================
    # QUOTE
    # =========================================================================

    def quote_sale(self, product: Product, quantity: Any) -> SaleQuote:
        """
        Compute the figures for selling ``quantity`` units of ``product``.

        Args:
            product: Product to sell
            quantity: Units to sell, positive integer

        Returns:
            SaleQuote with subtotal, tax and total

        Raises:
            InvalidQuantityError: If quantity is not a positive integer
            InsufficientStockError: If quantity exceeds stock on hand
            InvalidQuantityError: If the figures cannot be expressed in cents
        """
        self._check_quantity(product, quantity)

        tax_rate = self._catalog.tax_rate
        subtotal = product.unit_price * quantity
        try:
            tax = round2(subtotal * tax_rate) if product.taxable else ZERO
            total = round2(subtotal + tax)
        except InvalidOperation:
            raise exceptions.amount_out_of_range(product.item_code, quantity) from None

        return SaleQuote(
            item_code=product.item_code,
            quantity=quantity,
            unit_price=product.unit_price,
            taxable=product.taxable,
            tax_rate=tax_rate,
            subtotal=subtotal,
            tax=tax,
            total=total,
        )

    # =========================================================================
    # COMMIT
    # =========================================================================

    def commit_sale(
        self,
        product: Product,
        quantity: Any,
        quote: SaleQuote,
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> SaleResult:
        """
        Decrement stock for a previously quoted sale.

        Stock is re-checked here, so a quote that went stale since it was
        produced is rejected instead of driving stock negative.

        Args:
            product: Product being sold
            quantity: Units sold, must equal the quoted quantity
            quote: Quote returned by ``quote_sale`` for this product
            payment_method: Payment method chosen by the operator

        Returns:
            SaleResult with the product's new stock level

        Raises:
            InvalidQuantityError: If quantity is not a positive integer
            ValidationError: If the quote is for another product or quantity
            InsufficientStockError: If stock no longer covers the quantity
        """
        self._check_quantity(product, quantity)

        if ItemCodeValidator.key(quote.item_code) != ItemCodeValidator.key(product.item_code):
            raise exceptions.quote_mismatch(product.item_code, f"quote is for '{quote.item_code}'")

        if quote.quantity != quantity:
            raise exceptions.quote_mismatch(
                product.item_code,
                f"quoted {quote.quantity}, committing {quantity}"
            )

        product.stock_quantity -= quantity

        logger.info(
            f"✅ Sale committed: {quantity} x {product.item_code} "
            f"total={quote.total} paid={PaymentMethod(payment_method).value} "
            f"stock={product.stock_quantity}"
        )

        return SaleResult(
            quote=quote,
            payment_method=payment_method,
            new_stock=product.stock_quantity,
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _check_quantity(self, product: Product, quantity: Any) -> None:
        is_valid, _ = self._quantity_validator.validate(quantity)
        if not is_valid:
            raise exceptions.invalid_quantity(quantity)

        if quantity > product.stock_quantity:
            raise exceptions.insufficient_stock(
                product.item_code, quantity, product.stock_quantity
            )
