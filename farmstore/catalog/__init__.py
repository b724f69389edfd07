"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Product catalog with case-insensitive item code lookup.

Classes:
--------
- Product: Pydantic model for products
- Catalog: Catalog owning products and the id counter

==============================================================================
"""

from .models import Product
from .catalog import Catalog, DEFAULT_TAX_RATE

__all__ = [
    "Product",
    "Catalog",
    "DEFAULT_TAX_RATE",
]
