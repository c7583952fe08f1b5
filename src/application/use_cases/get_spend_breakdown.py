"""Use case to break personal spends down by category."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_TOP_CATEGORIES
from src.domain.models import CategoryAmount
from src.domain.services import compute_category_breakdown, top_categories
from src.domain.services.signing import record_day
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SpendBreakdown:
    """Category shares of the owner's spends."""

    categories: list[CategoryAmount]
    top: list[CategoryAmount]

    @property
    def total(self) -> Decimal:
        """Return the summed amount of all categories."""
        return sum(
            (category.amount for category in self.categories),
            Decimal("0"),
        )


class GetSpendBreakdownUseCase:
    """Compute the category breakdown of an owner's spends."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        top_n: int = DEFAULT_TOP_CATEGORIES,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing read access to the ledger.
            logger: Optional logger compatible with logging.Logger-like API.
            top_n: Number of categories in the top view.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._top_n = top_n

    def execute(
        self,
        owner_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> SpendBreakdown:
        """Return the breakdown for spends dated within the window.

        Args:
            owner_id: Account holder whose spends are read.
            start_date: Optional first day to include.
            end_date: Optional last day to include.

        Returns:
            SpendBreakdown: Full breakdown and its top-N slice.
        """
        snapshot = self._ledger_repository.fetch_snapshot(owner_id)
        spends = [
            spend
            for spend in snapshot.spends
            if self._within(record_day(spend), start_date, end_date)
        ]
        categories = compute_category_breakdown(spends, logger=self._logger)
        breakdown = SpendBreakdown(
            categories=categories,
            top=top_categories(categories, self._top_n),
        )
        self._logger.info(
            f"Spend breakdown for owner={owner_id}: "
            f"{len(categories)} categories, total={breakdown.total}"
        )
        return breakdown

    @staticmethod
    def _within(
        day: date | None,
        start_date: date | None,
        end_date: date | None,
    ) -> bool:
        if day is None:
            return False
        if start_date is not None and day < start_date:
            return False
        if end_date is not None and day > end_date:
            return False
        return True


__all__ = ["GetSpendBreakdownUseCase", "SpendBreakdown"]
