"""Use case to compute the dashboard summary of an owner."""

from datetime import date, datetime

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import (
    DEFAULT_TOP_CATEGORIES,
    MONTHLY_AVERAGE_WINDOW,
)
from src.domain.models import DashboardSummary
from src.domain.services import build_dashboard_summary
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Recompute dashboard numbers from a fresh ledger snapshot."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        average_window_months: int = MONTHLY_AVERAGE_WINDOW,
        top_n: int = DEFAULT_TOP_CATEGORIES,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing read access to the ledger.
            logger: Optional logger compatible with logging.Logger-like API.
            average_window_months: Divisor used for the monthly average.
            top_n: Number of categories kept in the breakdown.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._average_window_months = average_window_months
        self._top_n = top_n

    def execute(
        self,
        owner_id: str,
        now: datetime | date | None = None,
    ) -> DashboardSummary:
        """Return the dashboard summary as of ``now``.

        Args:
            owner_id: Account holder whose ledger is read.
            now: Reference instant; defaults to the current time.

        Returns:
            DashboardSummary: Totals, trend, breakdown and counts.
        """
        reference = now or datetime.now()
        snapshot = self._ledger_repository.fetch_snapshot(owner_id)
        summary = build_dashboard_summary(
            snapshot.spends,
            snapshot.loan_transactions,
            reference,
            supplier_transactions=snapshot.supplier_transactions,
            suppliers=snapshot.suppliers,
            average_window_months=self._average_window_months,
            top_n=self._top_n,
            logger=self._logger,
        )
        self._logger.info(
            f"Dashboard computed for owner={owner_id}: "
            f"month={summary.month_total}, all_time={summary.all_time_total}, "
            f"trend={summary.trend}, dues={summary.total_dues}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase"]
