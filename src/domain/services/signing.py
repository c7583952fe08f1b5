"""Sign assignment shared by balance and period aggregation."""

from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    LOAN_CREDIT_KINDS,
    LOAN_DEBIT_KINDS,
    SUPPLIER_CREDIT_KINDS,
    SUPPLIER_DEBIT_KINDS,
)
from src.domain.models.records import (
    LoanTransaction,
    SpendRecord,
    SupplierTransaction,
)
from src.utils.decimal_utils import coerce_amount


def signed_amount(record, logger: Logger | None = None) -> Decimal | None:
    """Return the signed contribution of a record to its balance.

    Purchases and loans given count positive, payments and repayments
    received count negative. Spends always count positive.

    Args:
        record: Supplier transaction, loan transaction or spend.
        logger: Optional logger used to report skipped records.

    Returns:
        Decimal | None: Signed amount, or None when the record is malformed
        or its kind is unknown.
    """
    amount = coerce_amount(record.amount)
    if amount is None:
        _warn(
            logger,
            f"Skipping record {record.id}: invalid amount {record.amount!r}",
        )
        return None
    if isinstance(record, SpendRecord):
        return amount
    if isinstance(record, SupplierTransaction):
        debit_kinds, credit_kinds = SUPPLIER_DEBIT_KINDS, SUPPLIER_CREDIT_KINDS
    elif isinstance(record, LoanTransaction):
        debit_kinds, credit_kinds = LOAN_DEBIT_KINDS, LOAN_CREDIT_KINDS
    else:
        _warn(
            logger,
            f"Skipping unsupported record type {type(record).__name__}",
        )
        return None
    if record.kind in debit_kinds:
        return amount
    if record.kind in credit_kinds:
        return -amount
    _warn(
        logger,
        f"Skipping record {record.id}: unknown kind {record.kind!r}",
    )
    return None


def entity_id_of(record) -> str | None:
    """Return the counterparty identifier of a ledger record."""
    if isinstance(record, SupplierTransaction):
        return record.counterparty_id
    if isinstance(record, LoanTransaction):
        return record.person_id
    return None


def record_day(record) -> date:
    """Return the calendar day a record is reported under."""
    if isinstance(record, SpendRecord):
        value = record.date
    else:
        value = record.created_at
    if isinstance(value, datetime):
        return value.date()
    return value


def _warn(logger: Logger | None, message: str) -> None:
    if logger is not None:
        logger.warning(message)


__all__ = ["signed_amount", "entity_id_of", "record_day"]
