"""Shared snapshot selection helpers for application use cases."""

from src.application.ports.ledger_repository import LedgerSnapshot
from src.application.use_cases.constants import (
    COUNTERPARTY_LEDGERS,
    LEDGER_PERSONS,
    LEDGER_SUPPLIERS,
    REPORT_LEDGERS,
    UNKNOWN_COUNTERPARTY_NAME,
)
from src.domain.models import Counterparty


def select_records(snapshot: LedgerSnapshot, ledger: str) -> tuple:
    """Return the records of one ledger from a snapshot.

    Args:
        snapshot: Records of a single owner.
        ledger: ``suppliers``, ``persons`` or ``spends``.

    Returns:
        tuple: Records of the requested ledger.

    Raises:
        ValueError: If the ledger name is not supported.
    """
    if ledger not in REPORT_LEDGERS:
        raise ValueError(f"Unsupported ledger: {ledger}")
    if ledger == LEDGER_SUPPLIERS:
        return snapshot.supplier_transactions
    if ledger == LEDGER_PERSONS:
        return snapshot.loan_transactions
    return snapshot.spends


def select_counterparties(
    snapshot: LedgerSnapshot,
    ledger: str,
) -> tuple[Counterparty, ...]:
    """Return the counterparties of a supplier or person ledger.

    Raises:
        ValueError: If the ledger has no counterparties.
    """
    if ledger not in COUNTERPARTY_LEDGERS:
        raise ValueError(f"Ledger has no counterparties: {ledger}")
    if ledger == LEDGER_SUPPLIERS:
        return snapshot.suppliers
    return snapshot.persons


def display_name(name: str | None) -> str:
    """Return a counterparty name, or ``Unknown`` when it is blank.

    Args:
        name: Stored counterparty name.

    Returns:
        str: Name to show in ranked lists.
    """
    if name is None:
        return UNKNOWN_COUNTERPARTY_NAME
    candidate = name.strip()
    return candidate or UNKNOWN_COUNTERPARTY_NAME


__all__ = ["select_records", "select_counterparties", "display_name"]
