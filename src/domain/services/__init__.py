"""Domain services package."""

from .balances import (
    compute_activity_by_entity,
    compute_balance,
    compute_balances_by_entity,
    compute_ledger_stats,
)
from .categories import compute_category_breakdown, top_categories
from .dashboard import build_dashboard_summary
from .normalization import normalize_category
from .outstanding import (
    classify_tier,
    earliest_due_dates,
    list_upcoming_dues,
    rank_outstanding,
    summarize_outstanding,
)
from .periods import bucket_by_period, total_between
from .signing import signed_amount
from .trends import classify_trend

__all__ = [
    "signed_amount",
    "compute_balance",
    "compute_balances_by_entity",
    "compute_ledger_stats",
    "compute_activity_by_entity",
    "classify_tier",
    "rank_outstanding",
    "summarize_outstanding",
    "list_upcoming_dues",
    "earliest_due_dates",
    "bucket_by_period",
    "total_between",
    "compute_category_breakdown",
    "top_categories",
    "classify_trend",
    "build_dashboard_summary",
    "normalize_category",
]
