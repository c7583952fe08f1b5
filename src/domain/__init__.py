"""Domain package for ledger rules and derived models."""

from .constants import DEFAULT_SPEND_CATEGORY, SPEND_CATEGORIES
from .models import (
    BalanceEntry,
    CategoryAmount,
    DashboardSummary,
    LoanTransaction,
    OutstandingItem,
    OutstandingPolicy,
    PeriodBucket,
    SpendRecord,
    SupplierTransaction,
)
from .services import (
    bucket_by_period,
    build_dashboard_summary,
    classify_trend,
    compute_balance,
    compute_category_breakdown,
    rank_outstanding,
)

__all__ = [
    "DEFAULT_SPEND_CATEGORY",
    "SPEND_CATEGORIES",
    "SupplierTransaction",
    "LoanTransaction",
    "SpendRecord",
    "BalanceEntry",
    "OutstandingPolicy",
    "OutstandingItem",
    "PeriodBucket",
    "CategoryAmount",
    "DashboardSummary",
    "compute_balance",
    "rank_outstanding",
    "bucket_by_period",
    "compute_category_breakdown",
    "classify_trend",
    "build_dashboard_summary",
]
