"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_decimal_or_none(value) -> Decimal | None:
    """Convert a raw form value to Decimal, returning None when invalid.

    Args:
        value: Raw value (Decimal, int, float or string).

    Returns:
        Decimal | None: Parsed value, or None for blanks and garbage.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return None


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two decimals, returning zero for a zero denominator."""
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator


__all__ = ["coerce_decimal", "to_decimal_or_none", "safe_divide"]
