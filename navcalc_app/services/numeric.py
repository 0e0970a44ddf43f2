"""
Decimal helpers shared by the conversion and lookup services.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any


def as_decimal(value: Any) -> Decimal:
    """
    Decimal for an int, float, Decimal or numeric string.

    Floats go through their shortest repr, so 2.675 becomes Decimal('2.675')
    and 15.0 compares equal to a stored Decimal('15').
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a numeric value: {value!r}") from exc
    raise ValueError(f"Not a numeric value: {value!r}")


def plain(value: Decimal) -> str:
    """Fixed-point text without trailing zeros: Decimal('15.00') -> '15'."""
    text = f"{value.normalize():f}"
    return "0" if text == "-0" else text
