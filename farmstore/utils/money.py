"""
Monetary helpers.

All money is held as ``Decimal``. Rounding to cents uses ROUND_HALF_UP and is
applied once per computed figure.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

MoneyInput = Union[Decimal, int, float, str]


def to_decimal(value: MoneyInput) -> Decimal:
    """
    Convert a number or numeric string to a finite Decimal.

    Floats go through ``str`` so 12.1 becomes Decimal("12.1") rather than its
    binary expansion.

    Raises:
        ValueError: If the value is not a valid finite number
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a monetary amount")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a valid decimal: {value!r}") from None
    else:
        raise ValueError(f"Unsupported monetary type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")

    return result


def round2(value: Decimal) -> Decimal:
    """Round to two decimal places, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal, symbol: str = "$") -> str:
    """Render an amount as e.g. ``$12.00``."""
    return f"{symbol}{round2(value):.2f}"
