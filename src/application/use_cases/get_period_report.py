"""Use case to bucket ledger activity into calendar periods."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.constants import LEDGER_SPENDS
from src.application.use_cases.ledger_filters import select_records
from src.domain.constants import GRANULARITY_DAY
from src.domain.models import PeriodBucket
from src.domain.services import bucket_by_period
from src.domain.services.signing import entity_id_of
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PeriodReport:
    """Bucketed totals for a date range."""

    ledger: str
    granularity: str
    buckets: list[PeriodBucket]

    @property
    def total_inflow(self) -> Decimal:
        """Return the inflow summed over all buckets."""
        return sum((bucket.inflow for bucket in self.buckets), Decimal("0"))

    @property
    def total_outflow(self) -> Decimal:
        """Return the outflow summed over all buckets."""
        return sum((bucket.outflow for bucket in self.buckets), Decimal("0"))


class GetPeriodReportUseCase:
    """Compute per-period totals for one ledger of an owner."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing read access to the ledger.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: str,
        start_date: date,
        end_date: date,
        granularity: str = GRANULARITY_DAY,
        ledger: str = LEDGER_SPENDS,
        counterparty_id: str | None = None,
    ) -> PeriodReport:
        """Return bucketed totals for the period.

        Args:
            owner_id: Account holder whose ledger is read.
            start_date: First day of the report.
            end_date: Last day of the report (inclusive).
            granularity: ``day``, ``month`` or ``range``.
            ledger: ``suppliers``, ``persons`` or ``spends``.
            counterparty_id: Optional supplier or person to restrict to.

        Returns:
            PeriodReport: Buckets covering the whole range.
        """
        snapshot = self._ledger_repository.fetch_snapshot(owner_id)
        records = select_records(snapshot, ledger)
        if counterparty_id is not None:
            records = [
                record
                for record in records
                if entity_id_of(record) == counterparty_id
            ]

        buckets = bucket_by_period(
            records,
            start_date,
            end_date,
            granularity,
            logger=self._logger,
        )
        report = PeriodReport(
            ledger=ledger,
            granularity=granularity,
            buckets=buckets,
        )
        self._logger.info(
            f"Period report for owner={owner_id}, ledger={ledger}: "
            f"{len(buckets)} {granularity} buckets, "
            f"in={report.total_inflow}, out={report.total_outflow}"
        )
        return report


__all__ = ["GetPeriodReportUseCase", "PeriodReport"]
