"""Classification of period-over-period movements."""

from decimal import Decimal

from src.domain.constants import (
    TREND_DECREASING,
    TREND_INCREASING,
    TREND_STABLE,
    TREND_THRESHOLD,
)
from src.utils.decimal_utils import coerce_decimal


def classify_trend(
    current: Decimal,
    previous: Decimal,
    threshold: Decimal = TREND_THRESHOLD,
) -> str:
    """Compare two period totals using a relative dead-band.

    The comparison multiplies ``previous`` rather than dividing by it, so
    a zero previous total with a positive current one is ``increasing``.
    Values exactly on the band edge are ``stable``.

    Args:
        current: Total for the latest period.
        previous: Total for the period before it.
        threshold: Relative band half-width (0.10 means 10%).

    Returns:
        str: ``increasing``, ``decreasing`` or ``stable``.
    """
    current = coerce_decimal(current)
    previous = coerce_decimal(previous)
    band = coerce_decimal(threshold)
    if current > previous * (1 + band):
        return TREND_INCREASING
    if current < previous * (1 - band):
        return TREND_DECREASING
    return TREND_STABLE


__all__ = ["classify_trend"]
