"""
==============================================================================
Schemas Package
==============================================================================

Pydantic schemas for operator input at the shell boundary.

==============================================================================
"""

from .product import ProductCreate

__all__ = [
    "ProductCreate",
]
