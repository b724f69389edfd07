"""
Application Exception Handling

AppException base class plus one tagged subclass per error category, and
factory functions for the common cases. The shell catches AppException and
renders ``message`` (or ``to_dict()``) to the operator.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Usage:
        raise AppException("Item code is required", "VALIDATION_ERROR")
        raise InsufficientStockError("Not enough stock", details={"available": 2})

    Error Codes:
        Catalog:
            - VALIDATION_ERROR (bad or missing field on create)
            - NOT_FOUND (unknown item code)

        Sales:
            - INVALID_QUANTITY (non-positive or unparsable quantity)
            - INSUFFICIENT_STOCK (requested more than available)

        Storage:
            - PERSISTENCE_ERROR (store unreadable or unwritable)
    """

    default_code = "APP_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (defaults to the class code)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for display or logging."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ValidationError(AppException):
    """Bad or missing field when creating a product."""
    default_code = "VALIDATION_ERROR"


class NotFoundError(AppException):
    """No product matches the given item code."""
    default_code = "NOT_FOUND"


class InvalidQuantityError(AppException):
    """Sale quantity is not a positive integer."""
    default_code = "INVALID_QUANTITY"


class InsufficientStockError(AppException):
    """Sale quantity exceeds the product's stock."""
    default_code = "INSUFFICIENT_STOCK"


class PersistenceError(AppException):
    """Catalog store could not be read or written."""
    default_code = "PERSISTENCE_ERROR"


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def field_required(field: str) -> ValidationError:
    """Create missing field exception."""
    return ValidationError(f"{field} is required", details={"field": field})


def invalid_field(field: str, reason: str, value: Any = None) -> ValidationError:
    """Create invalid field value exception."""
    details = {"field": field, "reason": reason}
    if value is not None:
        details["value"] = str(value)
    return ValidationError(f"Invalid {field}: {reason}", details=details)


def duplicate_item_code(item_code: str) -> ValidationError:
    """Create item code already exists exception."""
    return ValidationError(
        f"Item code '{item_code}' already exists",
        details={"item_code": item_code}
    )


def product_not_found(item_code: Optional[str] = None) -> NotFoundError:
    """Create product not found exception."""
    details = {"item_code": item_code} if item_code else {}
    return NotFoundError("Item not found", details=details)


def invalid_quantity(value: Any = None) -> InvalidQuantityError:
    """Create invalid quantity exception."""
    details = {"quantity": str(value)} if value is not None else {}
    return InvalidQuantityError("Invalid quantity", details=details)


def amount_out_of_range(item_code: str, quantity: Any) -> InvalidQuantityError:
    """Create exception for a sale too large to price in cents."""
    return InvalidQuantityError(
        f"Sale amount for '{item_code}' is out of range",
        details={"item_code": item_code, "quantity": str(quantity)}
    )


def insufficient_stock(
    item_code: str,
    requested: int,
    available: int
) -> InsufficientStockError:
    """Create insufficient stock exception."""
    return InsufficientStockError(
        f"Insufficient stock for '{item_code}'. "
        f"Requested: {requested}, available: {available}",
        details={
            "item_code": item_code,
            "requested": requested,
            "available": available
        }
    )


def quote_mismatch(item_code: str, reason: str) -> ValidationError:
    """Create quote does not match the sale exception."""
    return ValidationError(
        f"Quote does not match sale of '{item_code}': {reason}",
        details={"item_code": item_code, "reason": reason}
    )


def persistence_failed(path: Any, reason: str) -> PersistenceError:
    """Create store read/write failure exception."""
    return PersistenceError(
        f"Could not write catalog to {path}: {reason}",
        details={"path": str(path), "reason": reason}
    )
