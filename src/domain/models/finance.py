"""Domain models for derived ledger aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_LOW_TIER_LIMIT,
    DEFAULT_MEDIUM_TIER_LIMIT,
    SIGN_ANY,
)
from src.domain.models.records import SupplierTransaction


@dataclass(frozen=True)
class EntityBalance:
    """Signed net balance for one counterparty, never persisted."""

    entity_id: str
    net_amount: Decimal


@dataclass(frozen=True)
class LedgerStats:
    """Totals shown on a counterparty detail view.

    Attributes:
        total_debits: Sum of balance-increasing amounts.
        total_credits: Sum of balance-decreasing amounts.
        balance: Signed net balance.
        transaction_count: Number of records that were aggregated.
    """

    total_debits: Decimal
    total_credits: Decimal
    balance: Decimal
    transaction_count: int

    @property
    def outstanding(self) -> Decimal:
        """Return the absolute balance."""
        return abs(self.balance)


@dataclass(frozen=True)
class EntityActivity:
    """Debit and credit totals of one counterparty over a date window."""

    entity_id: str
    total_debits: Decimal
    total_credits: Decimal
    transaction_count: int

    @property
    def balance(self) -> Decimal:
        """Return debits minus credits."""
        return self.total_debits - self.total_credits


@dataclass(frozen=True)
class TierThresholds:
    """Upper bounds of the low and medium outstanding tiers."""

    low: Decimal = DEFAULT_LOW_TIER_LIMIT
    medium: Decimal = DEFAULT_MEDIUM_TIER_LIMIT


@dataclass(frozen=True)
class OutstandingPolicy:
    """Filtering and tiering rules for outstanding rankings."""

    include_zero: bool = False
    sign: str = SIGN_ANY
    thresholds: TierThresholds = field(default_factory=TierThresholds)


@dataclass(frozen=True)
class BalanceEntry:
    """Ranking input: a counterparty with its derived balance."""

    entity_id: str
    name: str
    balance: Decimal
    due_date: date | None = None


@dataclass(frozen=True)
class OutstandingItem:
    """Ranked counterparty with its presentation tier."""

    entity_id: str
    name: str
    balance: Decimal
    tier: str
    due_date: date | None = None


@dataclass(frozen=True)
class OutstandingSummary:
    """Header totals for an outstanding list."""

    total_receivable: Decimal
    total_payable: Decimal
    tier_counts: dict[str, int]

    @property
    def net(self) -> Decimal:
        """Return receivable minus payable."""
        return self.total_receivable - self.total_payable


@dataclass(frozen=True)
class PeriodBucket:
    """Totals for one calendar window ``[start, end)``.

    ``outflow`` sums balance-increasing amounts and ``inflow`` sums
    balance-decreasing amounts, so ``net`` is the balance change.
    """

    label: str
    start: date
    end: date
    inflow: Decimal
    outflow: Decimal

    @property
    def net(self) -> Decimal:
        """Return outflow minus inflow."""
        return self.outflow - self.inflow


@dataclass(frozen=True)
class CategoryAmount:
    """Spend total for one category with its share of the whole."""

    category: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class UpcomingDue:
    """Unsettled purchase with a due date on or after today."""

    transaction_id: str
    counterparty_id: str
    amount: Decimal
    due_date: date


@dataclass(frozen=True)
class DashboardSummary:
    """Numbers and lists needed by the dashboard view."""

    today_total: Decimal
    month_total: Decimal
    previous_month_total: Decimal
    all_time_total: Decimal
    monthly_average: Decimal
    trend: str
    top_category: CategoryAmount | None
    categories: list[CategoryAmount]
    parties_owed: int
    parties_owing: int
    total_dues: Decimal = Decimal("0")
    pending_purchases: int = 0
    upcoming_dues: list[UpcomingDue] = field(default_factory=list)
    total_suppliers: int = 0
    total_transactions: int = 0
    recent_transactions: list[SupplierTransaction] = field(
        default_factory=list
    )


__all__ = [
    "EntityBalance",
    "LedgerStats",
    "EntityActivity",
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
