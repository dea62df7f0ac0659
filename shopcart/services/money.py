"""
Money Utilities - Safe Decimal operations for prices and totals.

Avoids float precision issues by using Decimal throughout. Floats are
converted via their string form, so 562.131 stays 562.131.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Union

Number = Union[str, int, float, Decimal]

# Default number of decimal places for displayed prices
DEFAULT_DECIMAL_PLACES = 2


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Use string representation to preserve precision
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> Decimal:
    """
    Round a monetary value half-up to the given number of decimal places.

    Args:
        value: Value to round
        decimal_places: Digits kept after the decimal point (0 rounds to integer)

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    if not decimal_value.is_finite():
        return decimal_value

    # Enough digits for the integer part plus the kept decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + decimal_places + 2)
        precision = Decimal(1).scaleb(-decimal_places)
        return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_decimal(value: Number, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """
    Format a value fixed-point: '.' as separator, no thousands grouping.

    >>> format_decimal(562.131)
    '562.13'
    >>> format_decimal(562.131, 0)
    '562'
    """
    return format(round_money(value, decimal_places), "f")


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
