"""
==============================================================================
Core Package
==============================================================================

Shared infrastructure for the store core.

Modules:
--------
- exceptions: AppException hierarchy and error factory functions

Usage:
------
    from farmstore.core import AppException, NotFoundError

    # Or use exception factory functions via module
    from farmstore.core import exceptions
    raise exceptions.product_not_found("F100")

==============================================================================
"""

from .exceptions import (
    AppException,
    ValidationError,
    NotFoundError,
    InvalidQuantityError,
    InsufficientStockError,
    PersistenceError,
)

__all__ = [
    "AppException",
    "ValidationError",
    "NotFoundError",
    "InvalidQuantityError",
    "InsufficientStockError",
    "PersistenceError",
]
