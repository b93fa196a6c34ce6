"""Helpers for Decimal normalization."""

from decimal import Decimal


ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters, or callers.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def safe_divide(numerator, denominator) -> Decimal:
    """Divide two amounts, returning zero when the denominator is zero.

    Args:
        numerator: Dividend, coerced to Decimal.
        denominator: Divisor, coerced to Decimal.

    Returns:
        Decimal: Quotient, or zero for a zero divisor.
    """
    divisor = coerce_decimal(denominator)
    if divisor == 0:
        return ZERO
    return coerce_decimal(numerator) / divisor


__all__ = ["ZERO", "coerce_decimal", "safe_divide"]
