"""
Money Utilities - Decimal arithmetic and display formatting for prices.

Prices are kept as Decimal internally and only turned into display
strings at the projection layer.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

from stitches.config import CURRENCY_LABEL

# Displayed amounts never carry fractional units
DISPLAY_PRECISION = Decimal("1")

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Returns Decimal("0") for None or unparseable input.
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def round_display(value: Number) -> int:
    """Round to a whole currency unit, half up."""
    return int(to_decimal(value).quantize(DISPLAY_PRECISION, rounding=ROUND_HALF_UP))


def format_amount(value: Number) -> str:
    """Group thousands with commas: 7500 -> '7,500'."""
    return f"{round_display(value):,}"


def format_money(value: Number, label: str = CURRENCY_LABEL) -> str:
    """
    Format a price for display with the currency label.

    Args:
        value: Amount in major units
        label: Currency label prefix

    Returns:
        e.g. "Ksh 7,500"
    """
    return f"{label} {format_amount(value)}"


def to_float(value: Number) -> float:
    """
    Convert to float for JSON payloads.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))
