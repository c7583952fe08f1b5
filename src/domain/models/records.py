"""Domain models for ledger records as read from the record store."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class SupplierTransaction:
    """Event in the supplier ledger.

    Attributes:
        id: Record identifier.
        owner_id: Account holder owning the record.
        counterparty_id: Supplier the event applies to.
        kind: One of new_purchase, pay_due or settle_bill.
        amount: Non-negative amount; the sign is derived from ``kind``.
        created_at: Timestamp the event was recorded.
        due_date: Optional payment due date for purchases.
        settled: Whether a purchase was flagged as paid.
    """

    id: str
    owner_id: str
    counterparty_id: str
    kind: str
    amount: Decimal
    created_at: datetime
    due_date: date | None = None
    settled: bool = False
    description: str = ""


@dataclass(frozen=True)
class LoanTransaction:
    """Event in the person ledger (money given to or taken back)."""

    id: str
    owner_id: str
    person_id: str
    kind: str
    amount: Decimal
    created_at: datetime
    due_date: date | None = None
    description: str = ""


@dataclass(frozen=True)
class SpendRecord:
    """Personal expenditure with no counterparty."""

    id: str
    owner_id: str
    category: str
    amount: Decimal
    date: date
    created_at: datetime | None = None
    description: str = ""


@dataclass(frozen=True)
class Counterparty:
    """Supplier or person the owner transacts with."""

    id: str
    owner_id: str
    name: str


__all__ = [
    "SupplierTransaction",
    "LoanTransaction",
    "SpendRecord",
    "Counterparty",
]
