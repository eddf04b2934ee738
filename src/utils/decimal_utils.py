"""Helpers for Decimal normalization."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL rows or callers.

    Returns:
        Decimal: Normalized numeric value; None becomes zero.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    raw = value.strip() if isinstance(value, str) else str(value)
    if not raw:
        return ZERO
    try:
        return Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Not a monetary amount: {value!r}") from exc


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    """Return the Decimal sum of values, zero when empty."""
    return sum(values, ZERO)


__all__ = ["ZERO", "coerce_decimal", "sum_decimals"]
