"""
Money Utilities - Decimal handling for prices and totals.

Avoids float precision issues by using Decimal throughout; floats appear
only in JSON responses.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

Numeric = Union[str, int, float, Decimal, None]


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert any value to Decimal safely.

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Convert via string to avoid float precision issues
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_price(value: Numeric) -> Decimal:
    """
    Parse a price strictly (catalog records, cart snapshots, admin form).

    Unlike to_decimal, invalid or negative input raises instead of becoming zero.

    Raises:
        ValueError: If the value is empty, not a number, negative or not finite
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("Price is required")
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid price: {value!r}")
    if not price.is_finite() or price < 0:
        raise ValueError("Price must be a non-negative number")
    return price


def to_float(value: Numeric) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))
