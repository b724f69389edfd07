"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for product and sale input.

This module implements:
- ItemCodeValidator: Validates and normalizes item codes
- PriceValidator: Validates unit prices as non-negative Decimals
- QuantityValidator: Validates sale quantities and stock levels

Every validator returns a tuple instead of raising, so callers choose which
tagged AppException to raise.

Item Code Rules:
---------------
- Required, surrounding whitespace removed
- Compared case-insensitively (``key``)
- Stored with the operator's casing

==============================================================================
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from farmstore.utils.money import round2, to_decimal


class ItemCodeValidator:
    """
    Validator for operator-assigned item codes.

    Example:
        >>> validator = ItemCodeValidator()
        >>> validator.validate("  f100 ")
        (True, 'f100', None)
        >>> ItemCodeValidator.key("F100") == ItemCodeValidator.key("f100")
        True
    """

    def validate(self, code: Any) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate and normalize an item code.

        Returns:
            Tuple of (is_valid, normalized_code, error_message)
        """
        if code is None or not isinstance(code, str):
            return False, None, "Item code is required"

        code = code.strip()
        if not code:
            return False, None, "Item code is required"

        return True, code, None

    @staticmethod
    def key(code: str) -> str:
        """Comparison key for case-insensitive matching."""
        return code.strip().casefold()


class PriceValidator:
    """
    Validator for unit prices.

    Accepts Decimal, int, float or numeric strings and normalizes to Decimal.
    """

    def validate(self, value: Any) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Validate a unit price.

        Returns:
            Tuple of (is_valid, price, error_message)
        """
        if value is None:
            return False, None, "Price is required"

        try:
            price = to_decimal(value)
        except ValueError:
            return False, None, "Price must be a valid decimal"

        if price < 0:
            return False, None, "Price cannot be negative"

        # must be representable in cents at the context precision
        try:
            round2(price)
        except InvalidOperation:
            return False, None, "Price is out of range"

        return True, price, None


class QuantityValidator:
    """
    Validator for quantity values.

    Sale quantities must be positive; stock levels may be zero.
    """

    # optional sign, then ASCII digits only
    DIGITS_PATTERN = re.compile(r"^[+-]?[0-9]+$")

    def validate(self, qty: Any, allow_zero: bool = False) -> Tuple[bool, Optional[str]]:
        """
        Validate an already-typed quantity.

        Args:
            qty: Quantity to validate
            allow_zero: Accept zero (stock levels) instead of requiring > 0

        Returns:
            Tuple of (is_valid, error_message)
        """
        # bool is an int subclass; True is not a quantity
        if isinstance(qty, bool) or not isinstance(qty, int):
            return False, "Quantity must be a whole number"

        if qty < 0:
            return False, "Quantity cannot be negative"

        if qty == 0 and not allow_zero:
            return False, "Quantity must be greater than zero"

        return True, None

    def parse(self, raw: Any, allow_zero: bool = False) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Parse operator input into a quantity.

        Returns:
            Tuple of (is_valid, quantity, error_message)
        """
        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                return False, None, "Quantity is required"
            if not self.DIGITS_PATTERN.match(text):
                return False, None, "Quantity must be a whole number"
            raw = int(text)

        is_valid, error = self.validate(raw, allow_zero=allow_zero)
        if not is_valid:
            return False, None, error

        return True, raw, None
