"""Helpers for exact Decimal handling across storage backends."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Amounts are stored as text so every backend keeps them exact; this turns
    them, and any other numeric value, back into Decimal.

    Args:
        value: Raw value from SQL rows, adapters, or callers.

    Returns:
        Decimal: Normalized numeric value, zero for None.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(str(value))


def decimal_to_storage(value: Decimal) -> str:
    """Serialize a Decimal for a text column without losing digits."""
    return format(coerce_decimal(value), "f")


__all__ = ["coerce_decimal", "decimal_to_storage"]
