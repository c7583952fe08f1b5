"""Application port for read access to an owner's ledger."""

from dataclasses import dataclass, field
from typing import Protocol

from src.domain.models import (
    Counterparty,
    LoanTransaction,
    SpendRecord,
    SupplierTransaction,
)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Every record of one owner, read from a single consistent state.

    Attributes:
        owner_id: Account holder the records belong to.
        suppliers: Supplier counterparties.
        persons: Person counterparties.
        supplier_transactions: Supplier ledger events.
        loan_transactions: Person ledger events.
        spends: Personal expenditures.
    """

    owner_id: str
    suppliers: tuple[Counterparty, ...] = field(default_factory=tuple)
    persons: tuple[Counterparty, ...] = field(default_factory=tuple)
    supplier_transactions: tuple[SupplierTransaction, ...] = field(
        default_factory=tuple
    )
    loan_transactions: tuple[LoanTransaction, ...] = field(
        default_factory=tuple
    )
    spends: tuple[SpendRecord, ...] = field(default_factory=tuple)


class LedgerRepositoryPort(Protocol):
    """Port exposing read-only access to the ledger record store."""

    def fetch_snapshot(self, owner_id: str) -> LedgerSnapshot:
        """Return all records of an owner from one consistent read."""


__all__ = ["LedgerSnapshot", "LedgerRepositoryPort"]
