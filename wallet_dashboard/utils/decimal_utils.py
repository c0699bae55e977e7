"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that ``0.1`` stays ``Decimal("0.1")``;
    ``nan`` and ``inf`` map to the matching Decimal specials.

    Args:
        value: Raw numeric value from a balance or price source.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def require_decimal(value) -> Decimal:
    """Normalize a value that must be present in a source record.

    Raises:
        TypeError: If the value is None.
    """
    if value is None:
        raise TypeError("Expected a numeric value, got None")
    return coerce_decimal(value)


__all__ = ["coerce_decimal", "require_decimal"]
