"""Composition of ledger aggregates into the dashboard summary."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    DEFAULT_TOP_CATEGORIES,
    MONTHLY_AVERAGE_WINDOW,
    RECENT_TRANSACTIONS_LIMIT,
    SUPPLIER_NEW_PURCHASE,
    UPCOMING_DUES_LIMIT,
)
from src.domain.models.finance import DashboardSummary
from src.domain.models.records import (
    Counterparty,
    LoanTransaction,
    SpendRecord,
    SupplierTransaction,
)
from src.domain.services.balances import (
    compute_balance,
    compute_balances_by_entity,
)
from src.domain.services.categories import (
    compute_category_breakdown,
    top_categories,
)
from src.domain.services.outstanding import list_upcoming_dues
from src.domain.services.periods import (
    month_start,
    next_month_start,
    shift_months,
    to_day,
    total_between,
)
from src.domain.services.signing import record_day
from src.domain.services.trends import classify_trend
from src.utils.decimal_utils import coerce_amount

_ONE_DAY = timedelta(days=1)


def build_dashboard_summary(
    spends: Iterable[SpendRecord],
    loan_transactions: Iterable[LoanTransaction],
    now: datetime | date,
    *,
    supplier_transactions: Iterable[SupplierTransaction] = (),
    suppliers: Iterable[Counterparty] = (),
    average_window_months: int = MONTHLY_AVERAGE_WINDOW,
    top_n: int = DEFAULT_TOP_CATEGORIES,
    logger: Logger | None = None,
) -> DashboardSummary:
    """Compute the dashboard numbers from already-fetched records.

    ``monthly_average`` divides the all-time spend by
    ``average_window_months`` whatever the number of active months; it
    is zero when no spend falls inside that trailing window.

    Args:
        spends: Personal spend records of the owner.
        loan_transactions: Person ledger records of the owner.
        now: Reference instant for today and month windows.
        supplier_transactions: Supplier ledger records of the owner.
        suppliers: Supplier counterparties of the owner.
        average_window_months: Divisor for the monthly average.
        top_n: Number of categories kept in the breakdown.
        logger: Optional logger used to report skipped records.

    Returns:
        DashboardSummary: Totals, averages, trend and counterparty counts.
    """
    spends = list(spends)
    supplier_transactions = list(supplier_transactions)
    today = to_day(now)
    current_month = month_start(today)
    previous_month = shift_months(current_month, -1)
    month_end = next_month_start(current_month) - _ONE_DAY

    today_total = total_between(spends, today, today)
    month_total = total_between(spends, current_month, month_end)
    previous_month_total = total_between(
        spends,
        previous_month,
        current_month - _ONE_DAY,
    )
    all_time_total = total_between(spends)

    breakdown = compute_category_breakdown(spends, logger=logger)
    person_balances = compute_balances_by_entity(
        loan_transactions,
        logger=logger,
    )

    return DashboardSummary(
        today_total=today_total,
        month_total=month_total,
        previous_month_total=previous_month_total,
        all_time_total=all_time_total,
        monthly_average=_monthly_average(
            spends,
            all_time_total,
            today,
            average_window_months,
        ),
        trend=classify_trend(month_total, previous_month_total),
        top_category=breakdown[0] if breakdown else None,
        categories=top_categories(breakdown, top_n),
        parties_owed=sum(
            1 for balance in person_balances if balance.net_amount > 0
        ),
        parties_owing=sum(
            1 for balance in person_balances if balance.net_amount < 0
        ),
        total_dues=compute_balance(supplier_transactions, logger=logger),
        pending_purchases=_count_pending_purchases(supplier_transactions),
        upcoming_dues=list_upcoming_dues(
            supplier_transactions,
            today,
            UPCOMING_DUES_LIMIT,
        ),
        total_suppliers=len(list(suppliers)),
        total_transactions=len(supplier_transactions),
        recent_transactions=_recent_transactions(supplier_transactions),
    )


def _monthly_average(
    spends: list[SpendRecord],
    all_time_total: Decimal,
    today: date,
    window_months: int,
) -> Decimal:
    if window_months <= 0:
        return Decimal("0")
    window_start = shift_months(today, -window_months)
    has_recent = any(
        coerce_amount(spend.amount) is not None
        and record_day(spend) is not None
        and record_day(spend) >= window_start
        for spend in spends
    )
    if not has_recent:
        return Decimal("0")
    return all_time_total / window_months


def _recent_transactions(
    transactions: list[SupplierTransaction],
) -> list[SupplierTransaction]:
    dated = [t for t in transactions if t.created_at is not None]
    dated.sort(key=lambda transaction: transaction.created_at, reverse=True)
    return dated[:RECENT_TRANSACTIONS_LIMIT]


def _count_pending_purchases(
    transactions: list[SupplierTransaction],
) -> int:
    return sum(
        1
        for transaction in transactions
        if transaction.kind == SUPPLIER_NEW_PURCHASE
        and not transaction.settled
        and coerce_amount(transaction.amount) is not None
    )


__all__ = ["build_dashboard_summary"]
