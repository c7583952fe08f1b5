"""Balance derivation from the transaction log."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from src.domain.models.finance import (
    EntityActivity,
    EntityBalance,
    LedgerStats,
)
from src.domain.services.periods import to_day
from src.domain.services.signing import (
    entity_id_of,
    record_day,
    signed_amount,
)


def compute_balance(
    records: Iterable,
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Reduce one counterparty's records into a signed net balance.

    Args:
        records: Supplier or loan transactions for a single counterparty.
        logger: Optional logger used to report skipped records.

    Returns:
        Decimal: Net balance; zero for an empty log.
    """
    balance = Decimal("0")
    for record in records:
        amount = signed_amount(record, logger)
        if amount is not None:
            balance += amount
    return balance


def compute_balances_by_entity(
    records: Iterable,
    *,
    logger: Logger | None = None,
) -> list[EntityBalance]:
    """Compute one balance per counterparty, in first-seen order.

    A counterparty whose records are all malformed still gets a zero
    balance so it is not hidden from the owner.
    """
    totals: dict[str, Decimal] = {}
    for record in records:
        entity_id = entity_id_of(record)
        if entity_id is None:
            continue
        if entity_id not in totals:
            totals[entity_id] = Decimal("0")
        amount = signed_amount(record, logger)
        if amount is not None:
            totals[entity_id] += amount
    return [
        EntityBalance(entity_id=entity_id, net_amount=amount)
        for entity_id, amount in totals.items()
    ]


def compute_ledger_stats(
    records: Iterable,
    *,
    logger: Logger | None = None,
) -> LedgerStats:
    """Compute detail-view totals for one counterparty.

    Args:
        records: Supplier or loan transactions for a single counterparty.
        logger: Optional logger used to report skipped records.

    Returns:
        LedgerStats: Debit and credit totals, balance and record count.
    """
    debits = Decimal("0")
    credits = Decimal("0")
    count = 0
    for record in records:
        amount = signed_amount(record, logger)
        if amount is None:
            continue
        count += 1
        if amount >= 0:
            debits += amount
        else:
            credits += -amount
    return LedgerStats(
        total_debits=debits,
        total_credits=credits,
        balance=debits - credits,
        transaction_count=count,
    )


def compute_activity_by_entity(
    records: Iterable,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
    *,
    logger: Logger | None = None,
) -> list[EntityActivity]:
    """Total each counterparty's debits and credits within a date window.

    Only records dated inside the inclusive ``[start, end]`` window count;
    either bound may be None. Counterparties without records in the window
    are left out.

    Args:
        records: Supplier or loan transactions of several counterparties.
        start: First day of the window, as a date or timestamp.
        end: Last day of the window, as a date or timestamp.
        logger: Optional logger used to report skipped records.

    Returns:
        list[EntityActivity]: Counterparties by descending window balance,
        ties kept in first-seen order.
    """
    start = to_day(start)
    end = to_day(end)
    totals: dict[str, list] = {}
    for record in records:
        entity_id = entity_id_of(record)
        day = record_day(record)
        if entity_id is None or day is None:
            continue
        if start is not None and day < start:
            continue
        if end is not None and day > end:
            continue
        amount = signed_amount(record, logger)
        if amount is None:
            continue
        debits, credits, count = totals.get(
            entity_id,
            [Decimal("0"), Decimal("0"), 0],
        )
        if amount >= 0:
            debits += amount
        else:
            credits += -amount
        totals[entity_id] = [debits, credits, count + 1]

    activities = [
        EntityActivity(
            entity_id=entity_id,
            total_debits=debits,
            total_credits=credits,
            transaction_count=count,
        )
        for entity_id, (debits, credits, count) in totals.items()
    ]
    return sorted(
        activities,
        key=lambda activity: activity.balance,
        reverse=True,
    )


__all__ = [
    "compute_balance",
    "compute_balances_by_entity",
    "compute_ledger_stats",
    "compute_activity_by_entity",
]
