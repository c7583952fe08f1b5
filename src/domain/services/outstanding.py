"""Ranking of counterparties by outstanding balance."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    SIGN_ANY,
    SIGN_NEGATIVE_ONLY,
    SIGN_POSITIVE_ONLY,
    SUPPLIER_NEW_PURCHASE,
    TIER_HIGH,
    TIER_LOW,
    TIER_MEDIUM,
    UPCOMING_DUES_LIMIT,
)
from src.domain.models.finance import (
    BalanceEntry,
    OutstandingItem,
    OutstandingPolicy,
    OutstandingSummary,
    TierThresholds,
    UpcomingDue,
)
from src.domain.models.records import SupplierTransaction
from src.domain.services.signing import entity_id_of, signed_amount
from src.utils.decimal_utils import coerce_amount, coerce_decimal

_SIGNS = (SIGN_POSITIVE_ONLY, SIGN_NEGATIVE_ONLY, SIGN_ANY)


def classify_tier(
    balance: Decimal,
    thresholds: TierThresholds | None = None,
) -> str:
    """Classify a balance into the low, medium or high tier.

    Args:
        balance: Signed balance; only its magnitude matters.
        thresholds: Tier upper bounds, defaulting to 1,000 and 10,000.

    Returns:
        str: One of ``low``, ``medium`` or ``high``.
    """
    resolved = thresholds or TierThresholds()
    magnitude = abs(coerce_decimal(balance))
    if magnitude <= resolved.low:
        return TIER_LOW
    if magnitude <= resolved.medium:
        return TIER_MEDIUM
    return TIER_HIGH


def rank_outstanding(
    entries: Sequence[BalanceEntry],
    policy: OutstandingPolicy | None = None,
    limit: int | None = None,
) -> list[OutstandingItem]:
    """Filter and order counterparties by what is outstanding.

    Entries are ordered by ascending due date (missing dates last), then
    by descending absolute balance, then by their input position. The
    input sequence is left untouched.

    Args:
        entries: Counterparties with their derived balances.
        policy: Zero and sign filtering plus tier thresholds.
        limit: Optional number of leading items to keep.

    Returns:
        list[OutstandingItem]: Ranked items tagged with their tier.

    Raises:
        ValueError: If the policy sign is not a supported value.
    """
    resolved = policy or OutstandingPolicy()
    if resolved.sign not in _SIGNS:
        raise ValueError(f"Unsupported outstanding sign: {resolved.sign}")

    candidates = [
        entry
        for entry in entries
        if _matches_policy(coerce_decimal(entry.balance), resolved)
    ]
    ranked = sorted(candidates, key=_sort_key)
    if limit is not None:
        ranked = ranked[: max(limit, 0)]
    return [
        OutstandingItem(
            entity_id=entry.entity_id,
            name=entry.name,
            balance=coerce_decimal(entry.balance),
            tier=classify_tier(entry.balance, resolved.thresholds),
            due_date=entry.due_date,
        )
        for entry in ranked
    ]


def summarize_outstanding(
    items: Iterable[OutstandingItem],
) -> OutstandingSummary:
    """Return receivable and payable totals plus per-tier counts."""
    receivable = Decimal("0")
    payable = Decimal("0")
    tier_counts = {TIER_LOW: 0, TIER_MEDIUM: 0, TIER_HIGH: 0}
    for item in items:
        if item.balance > 0:
            receivable += item.balance
        elif item.balance < 0:
            payable += -item.balance
        tier_counts[item.tier] = tier_counts.get(item.tier, 0) + 1
    return OutstandingSummary(
        total_receivable=receivable,
        total_payable=payable,
        tier_counts=tier_counts,
    )


def list_upcoming_dues(
    transactions: Iterable[SupplierTransaction],
    today: date,
    limit: int = UPCOMING_DUES_LIMIT,
) -> list[UpcomingDue]:
    """Return unsettled purchases due today or later, earliest first."""
    dues = []
    for transaction in transactions:
        if transaction.kind != SUPPLIER_NEW_PURCHASE or transaction.settled:
            continue
        if transaction.due_date is None or transaction.due_date < today:
            continue
        amount = coerce_amount(transaction.amount)
        if amount is None:
            continue
        dues.append(
            UpcomingDue(
                transaction_id=transaction.id,
                counterparty_id=transaction.counterparty_id,
                amount=amount,
                due_date=transaction.due_date,
            )
        )
    dues.sort(key=lambda due: due.due_date)
    return dues[: max(limit, 0)]


def earliest_due_dates(records: Iterable) -> dict[str, date]:
    """Map each counterparty to the earliest due date of its open debits.

    Open debits are unsettled purchases or loans given that carry a due
    date.
    """
    earliest: dict[str, date] = {}
    for record in records:
        due_date = getattr(record, "due_date", None)
        if getattr(record, "settled", False) or due_date is None:
            continue
        amount = signed_amount(record)
        if amount is None or amount <= 0:
            continue
        entity_id = entity_id_of(record)
        current = earliest.get(entity_id)
        if current is None or due_date < current:
            earliest[entity_id] = due_date
    return earliest


def _matches_policy(balance: Decimal, policy: OutstandingPolicy) -> bool:
    if balance == 0:
        return policy.include_zero
    if policy.sign == SIGN_POSITIVE_ONLY:
        return balance > 0
    if policy.sign == SIGN_NEGATIVE_ONLY:
        return balance < 0
    return True


def _sort_key(entry: BalanceEntry) -> tuple[bool, date, Decimal]:
    return (
        entry.due_date is None,
        entry.due_date or date.min,
        -abs(coerce_decimal(entry.balance)),
    )


__all__ = [
    "classify_tier",
    "rank_outstanding",
    "summarize_outstanding",
    "list_upcoming_dues",
    "earliest_due_dates",
]
