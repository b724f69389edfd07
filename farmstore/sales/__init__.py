"""
==============================================================================
Sales Package
==============================================================================

Single-item sale processing with a quote/commit split.

Classes:
--------
- SalesEngine: Quotes and commits sales, the only stock mutator
- SaleQuote: Non-committing preview of subtotal, tax and total
- SaleResult: Committed sale with the new stock level
- PaymentMethod: Cash, card or other

==============================================================================
"""

from .models import PaymentMethod, SaleQuote, SaleResult
from .engine import SalesEngine

__all__ = [
    "PaymentMethod",
    "SaleQuote",
    "SaleResult",
    "SalesEngine",
]
