"""Use case to rank counterparties by outstanding balance."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.constants import LEDGER_SUPPLIERS
from src.application.use_cases.ledger_filters import (
    display_name,
    select_counterparties,
    select_records,
)
from src.domain.models import (
    BalanceEntry,
    OutstandingItem,
    OutstandingPolicy,
    OutstandingSummary,
)
from src.domain.services import (
    compute_balances_by_entity,
    earliest_due_dates,
    rank_outstanding,
    summarize_outstanding,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class OutstandingView:
    """Ranked outstanding list with its header totals."""

    ledger: str
    items: list[OutstandingItem]
    summary: OutstandingSummary


class GetOutstandingUseCase:
    """Rank an owner's suppliers or persons by what is outstanding."""

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
        ledger: str = LEDGER_SUPPLIERS,
        policy: OutstandingPolicy | None = None,
        limit: int | None = None,
    ) -> OutstandingView:
        """Return the ranked outstanding list.

        Args:
            owner_id: Account holder whose ledger is read.
            ledger: ``suppliers`` or ``persons``.
            policy: Zero/sign filtering and tier thresholds.
            limit: Optional number of leading items to keep.

        Returns:
            OutstandingView: Ranked items and their totals.
        """
        snapshot = self._ledger_repository.fetch_snapshot(owner_id)
        records = select_records(snapshot, ledger)
        counterparties = select_counterparties(snapshot, ledger)

        balances = {
            balance.entity_id: balance.net_amount
            for balance in compute_balances_by_entity(
                records,
                logger=self._logger,
            )
        }
        due_dates = earliest_due_dates(records)

        entries = []
        known_ids = set()
        for counterparty in counterparties:
            known_ids.add(counterparty.id)
            entries.append(
                BalanceEntry(
                    entity_id=counterparty.id,
                    name=display_name(counterparty.name),
                    balance=balances.get(counterparty.id, Decimal("0")),
                    due_date=due_dates.get(counterparty.id),
                )
            )
        for entity_id, balance in balances.items():
            if entity_id in known_ids:
                continue
            entries.append(
                BalanceEntry(
                    entity_id=entity_id,
                    name=display_name(None),
                    balance=balance,
                    due_date=due_dates.get(entity_id),
                )
            )

        items = rank_outstanding(entries, policy, limit)
        summary = summarize_outstanding(items)
        self._logger.info(
            f"Outstanding {ledger} ranked for owner={owner_id}: "
            f"{len(items)} of {len(entries)} counterparties, "
            f"receivable={summary.total_receivable}, "
            f"payable={summary.total_payable}"
        )
        return OutstandingView(ledger=ledger, items=items, summary=summary)


__all__ = ["GetOutstandingUseCase", "OutstandingView"]
