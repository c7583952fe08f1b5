"""Use case to summarize the ledger of a single counterparty."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.constants import LEDGER_SUPPLIERS
from src.application.use_cases.ledger_filters import (
    display_name,
    select_counterparties,
    select_records,
)
from src.domain.models import LedgerStats
from src.domain.services import classify_tier, compute_ledger_stats
from src.domain.services.signing import entity_id_of
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CounterpartyLedgerView:
    """Detail view of one supplier or person."""

    counterparty_id: str
    name: str
    stats: LedgerStats
    tier: str
    transactions: list


class GetCounterpartyLedgerUseCase:
    """Compute balance and totals for one supplier or person."""

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
        counterparty_id: str,
        ledger: str = LEDGER_SUPPLIERS,
    ) -> CounterpartyLedgerView:
        """Return the signed balance and totals of a counterparty.

        Args:
            owner_id: Account holder whose ledger is read.
            counterparty_id: Supplier or person identifier.
            ledger: ``suppliers`` or ``persons``.

        Returns:
            CounterpartyLedgerView: Stats and the counterparty's records.
        """
        snapshot = self._ledger_repository.fetch_snapshot(owner_id)
        names = {
            counterparty.id: counterparty.name
            for counterparty in select_counterparties(snapshot, ledger)
        }
        transactions = [
            record
            for record in select_records(snapshot, ledger)
            if entity_id_of(record) == counterparty_id
        ]
        stats = compute_ledger_stats(transactions, logger=self._logger)
        self._logger.info(
            f"Ledger of {counterparty_id} for owner={owner_id}: "
            f"balance={stats.balance}, records={stats.transaction_count}"
        )
        return CounterpartyLedgerView(
            counterparty_id=counterparty_id,
            name=display_name(names.get(counterparty_id)),
            stats=stats,
            tier=classify_tier(stats.balance),
            transactions=transactions,
        )


__all__ = ["GetCounterpartyLedgerUseCase", "CounterpartyLedgerView"]
