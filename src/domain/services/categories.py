"""Category breakdown of personal spends."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models.finance import CategoryAmount
from src.domain.models.records import SpendRecord
from src.domain.services.normalization import normalize_category
from src.domain.services.signing import signed_amount

_HUNDRED = Decimal("100")


def compute_category_breakdown(
    spends: Iterable[SpendRecord],
    *,
    logger: Logger | None = None,
) -> list[CategoryAmount]:
    """Sum spends per category and derive each category's share.

    Args:
        spends: Spend records; categories are treated as opaque labels.
        logger: Optional logger used to report skipped records.

    Returns:
        list[CategoryAmount]: Categories by descending amount, ties kept in
        first-seen order. Empty when the total spend is zero.
    """
    totals: dict[str, Decimal] = {}
    for spend in spends:
        amount = signed_amount(spend, logger)
        if amount is None:
            continue
        category = normalize_category(spend.category)
        totals[category] = totals.get(category, Decimal("0")) + amount

    grand_total = sum(totals.values(), Decimal("0"))
    if grand_total == 0:
        return []

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(
            category=category,
            amount=amount,
            percentage=amount / grand_total * _HUNDRED,
        )
        for category, amount in ranked
    ]


def top_categories(
    breakdown: list[CategoryAmount],
    count: int,
) -> list[CategoryAmount]:
    """Return the leading ``count`` entries of a breakdown."""
    return list(breakdown[: max(count, 0)])


__all__ = ["compute_category_breakdown", "top_categories"]
