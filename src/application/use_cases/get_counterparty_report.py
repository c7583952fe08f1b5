"""Use case to report each counterparty's activity over a date range."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.constants import LEDGER_SUPPLIERS
from src.application.use_cases.ledger_filters import (
    display_name,
    select_counterparties,
    select_records,
)
from src.domain.services import compute_activity_by_entity
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CounterpartyReportRow:
    """Purchases, payments and balance of one counterparty in the range."""

    entity_id: str
    name: str
    total_debits: Decimal
    total_credits: Decimal
    balance: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CounterpartyReport:
    """Per-counterparty activity with the report-wide totals."""

    ledger: str
    start_date: date
    end_date: date
    rows: list[CounterpartyReportRow]
    total_debits: Decimal
    total_credits: Decimal

    @property
    def net(self) -> Decimal:
        """Return total debits minus total credits."""
        return self.total_debits - self.total_credits


class GetCounterpartyReportUseCase:
    """Break a date range down by supplier or person."""

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
        ledger: str = LEDGER_SUPPLIERS,
    ) -> CounterpartyReport:
        """Return counterparties active in the range, highest balance first.

        Args:
            owner_id: Account holder whose ledger is read.
            start_date: First day of the report.
            end_date: Last day of the report (inclusive).
            ledger: ``suppliers`` or ``persons``.

        Returns:
            CounterpartyReport: Rows sorted by descending balance and the
            summed debits and credits of the range.
        """
        snapshot = self._ledger_repository.fetch_snapshot(owner_id)
        names = {
            counterparty.id: counterparty.name
            for counterparty in select_counterparties(snapshot, ledger)
        }
        activities = compute_activity_by_entity(
            select_records(snapshot, ledger),
            start_date,
            end_date,
            logger=self._logger,
        )
        rows = [
            CounterpartyReportRow(
                entity_id=activity.entity_id,
                name=display_name(names.get(activity.entity_id)),
                total_debits=activity.total_debits,
                total_credits=activity.total_credits,
                balance=activity.balance,
                transaction_count=activity.transaction_count,
            )
            for activity in activities
        ]
        report = CounterpartyReport(
            ledger=ledger,
            start_date=start_date,
            end_date=end_date,
            rows=rows,
            total_debits=sum(
                (row.total_debits for row in rows),
                Decimal("0"),
            ),
            total_credits=sum(
                (row.total_credits for row in rows),
                Decimal("0"),
            ),
        )
        self._logger.info(
            f"Counterparty report for owner={owner_id}, ledger={ledger}: "
            f"{len(rows)} active between {start_date} and {end_date}, "
            f"debits={report.total_debits}, credits={report.total_credits}"
        )
        return report


__all__ = [
    "GetCounterpartyReportUseCase",
    "CounterpartyReport",
    "CounterpartyReportRow",
]
