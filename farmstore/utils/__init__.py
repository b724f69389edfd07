"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the store core.

Modules:
--------
- validators: Item code, price and quantity validation
- money: Decimal conversion, half-up cent rounding, formatting
- receipt: Text rendering of listings, checkout previews and receipts
  (import from ``farmstore.utils.receipt``)

==============================================================================
"""

from .validators import ItemCodeValidator, PriceValidator, QuantityValidator
from .money import format_money, round2, to_decimal

__all__ = [
    "ItemCodeValidator",
    "PriceValidator",
    "QuantityValidator",
    "format_money",
    "round2",
    "to_decimal",
]
