"""
==============================================================================
Receipt Formatter Module
==============================================================================

Plain-text rendering for the shell: product listings, the checkout preview
shown before the operator confirms, and the sale confirmation.

Nothing is written to disk; the shell decides where the text goes.

Example Output:
--------------
    Subtotal: $36.00
    Tax: $2.52
    Total: $38.52

    Sale complete.
    3 x Feed Bag
    Paid: CARD
    Total: $38.52

==============================================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

from farmstore.catalog import Product
from farmstore.sales import SaleQuote, SaleResult
from farmstore.utils.money import format_money


class ReceiptFormatter:
    """
    Text formatter for listings, quotes and receipts.

    Attributes:
        currency_symbol: Prefix for amounts (default "$")
    """

    def __init__(self, currency_symbol: str = "$") -> None:
        self.currency_symbol = currency_symbol

    def money(self, amount) -> str:
        return format_money(amount, self.currency_symbol)

    def product_line(self, product: Product) -> str:
        """One-line product summary, e.g. ``[F100] Feed Bag - $12.00 (50 in stock)``."""
        return (
            f"[{product.item_code}] {product.name} - "
            f"{self.money(product.unit_price)} ({product.stock_quantity} in stock)"
        )

    def product_list(self, products: Iterable[Product]) -> str:
        products = list(products)
        if not products:
            return "No products yet."

        lines = ["Products:", ""]
        lines.extend(f"- {self.product_line(p)}" for p in products)
        return "\n".join(lines)

    def quote(self, quote: SaleQuote) -> str:
        """Checkout preview shown before the payment method is chosen."""
        return "\n".join([
            f"Subtotal: {self.money(quote.subtotal)}",
            f"Tax: {self.money(quote.tax)}",
            f"Total: {self.money(quote.total)}",
        ])

    def receipt(self, result: SaleResult, product_name: Optional[str] = None) -> str:
        """Sale confirmation shown after commit."""
        lines = [
            "Sale complete.",
            f"{result.quantity} x {product_name or result.item_code}",
            f"Paid: {result.payment_method.display_name}",
            f"Total: {self.money(result.total)}",
        ]
        if not result.saved:
            lines.append("Warning: sale not saved to disk yet.")
        return "\n".join(lines)
