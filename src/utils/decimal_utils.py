"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_amount(value) -> Decimal | None:
    """Normalize a stored transaction amount.

    Amounts are entered positive; the sign comes from the record kind.

    Args:
        value: Raw amount from a record.

    Returns:
        Decimal | None: The amount, or None when it is missing,
        non-numeric, non-finite or negative.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount < 0:
        return None
    return amount


__all__ = ["coerce_decimal", "coerce_amount"]
