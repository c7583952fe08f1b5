"""Domain models package."""

from .finance import (
    BalanceEntry,
    CategoryAmount,
    DashboardSummary,
    EntityActivity,
    EntityBalance,
    LedgerStats,
    OutstandingItem,
    OutstandingPolicy,
    OutstandingSummary,
    PeriodBucket,
    TierThresholds,
    UpcomingDue,
)
from .records import (
    Counterparty,
    LoanTransaction,
    SpendRecord,
    SupplierTransaction,
)

__all__ = [
    "SupplierTransaction",
    "LoanTransaction",
    "SpendRecord",
    "Counterparty",
    "EntityBalance",
    "EntityActivity",
    "LedgerStats",
    "TierThresholds",
    "OutstandingPolicy",
    "BalanceEntry",
    "OutstandingItem",
    "OutstandingSummary",
    "PeriodBucket",
    "CategoryAmount",
    "UpcomingDue",
    "DashboardSummary",
]
