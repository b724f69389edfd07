"""
==============================================================================
Sale Models Module
==============================================================================

Transient value objects produced by the sales engine. Nothing here is
persisted.

==============================================================================
"""

from __future__ import annotations

import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PaymentMethod(str, enum.Enum):
    """
    Payment method chosen at checkout.

    Informational only; it does not change any figure.
    """
    CASH = "cash"
    CARD = "card"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.upper()


class SaleQuote(BaseModel):
    """
    Non-committing preview of a single-item sale.

    Attributes:
        item_code: Item code of the quoted product
        quantity: Units being sold
        unit_price: Price per unit at quote time
        taxable: Whether tax was applied
        tax_rate: Tax fraction used
        subtotal: unit_price * quantity, exact
        tax: Subtotal times tax rate, rounded half up to cents (0 if untaxed)
        total: subtotal + tax, rounded half up to cents
    """

    model_config = ConfigDict(frozen=True)

    item_code: str
    quantity: int = Field(..., gt=0)
    unit_price: Decimal
    taxable: bool
    tax_rate: Decimal
    subtotal: Decimal
    tax: Decimal
    total: Decimal


class SaleResult(BaseModel):
    """
    Outcome of a committed sale.

    ``saved`` is False when the post-commit save failed; the stock change
    still stands in memory.
    """

    model_config = ConfigDict(frozen=True)

    quote: SaleQuote
    payment_method: PaymentMethod = PaymentMethod.CASH
    new_stock: int = Field(..., ge=0)
    saved: bool = True

    @property
    def item_code(self) -> str:
        return self.quote.item_code

    @property
    def quantity(self) -> int:
        return self.quote.quantity

    @property
    def subtotal(self) -> Decimal:
        return self.quote.subtotal

    @property
    def tax(self) -> Decimal:
        return self.quote.tax

    @property
    def total(self) -> Decimal:
        return self.quote.total
