"""Tests for calendar bucketing."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.models import SpendRecord, SupplierTransaction
from src.domain.services import (
    bucket_by_period,
    compute_balance,
    total_between,
)
from src.domain.services.periods import shift_months


def _supplier_tx(
    tx_id: str,
    kind: str,
    amount: str,
    created_at: datetime,
) -> SupplierTransaction:
    return SupplierTransaction(
        id=tx_id,
        owner_id="owner-1",
        counterparty_id="supplier-1",
        kind=kind,
        amount=Decimal(amount),
        created_at=created_at,
    )


def _spend(spend_id: str, amount: str, day: date) -> SpendRecord:
    return SpendRecord(
        id=spend_id,
        owner_id="owner-1",
        category="Food & Dining",
        amount=Decimal(amount),
        date=day,
    )


def test_day_buckets_include_idle_days() -> None:
    """Days without activity are emitted with zero totals."""
    spends = [
        _spend("s1", "120", date(2024, 3, 1)),
        _spend("s2", "30", date(2024, 3, 3)),
        _spend("s3", "20", date(2024, 3, 3)),
    ]

    buckets = bucket_by_period(spends, date(2024, 3, 1), date(2024, 3, 4))

    assert [b.label for b in buckets] == [
        "2024-03-01",
        "2024-03-02",
        "2024-03-03",
        "2024-03-04",
    ]
    assert [b.outflow for b in buckets] == [
        Decimal("120"),
        Decimal("0"),
        Decimal("50"),
        Decimal("0"),
    ]
    assert all(b.inflow == Decimal("0") for b in buckets)
    assert buckets[1].start == date(2024, 3, 2)
    assert buckets[1].end == date(2024, 3, 3)


def test_month_buckets_use_closed_open_windows() -> None:
    """A late timestamp stays in its month; the 1st opens the next one."""
    records = [
        _supplier_tx(
            "t1",
            "new_purchase",
            "1000",
            datetime(2024, 1, 31, 23, 59, 59),
        ),
        _supplier_tx("t2", "pay_due", "400", datetime(2024, 2, 1, 0, 0)),
        _supplier_tx("t3", "settle_bill", "100", datetime(2024, 3, 9)),
    ]

    buckets = bucket_by_period(
        records,
        date(2024, 1, 1),
        date(2024, 3, 31),
        "month",
    )

    assert [b.label for b in buckets] == ["2024-01", "2024-02", "2024-03"]
    assert buckets[0].outflow == Decimal("1000")
    assert buckets[1].inflow == Decimal("400")
    assert buckets[2].inflow == Decimal("100")
    assert buckets[0].end == date(2024, 2, 1)
    assert buckets[1].net == Decimal("-400")


def test_records_outside_range_are_excluded() -> None:
    """Only records dated within [start, end] are counted."""
    spends = [
        _spend("s1", "10", date(2024, 2, 29)),
        _spend("s2", "20", date(2024, 3, 1)),
        _spend("s3", "40", date(2024, 3, 10)),
        _spend("s4", "80", date(2024, 3, 11)),
    ]

    buckets = bucket_by_period(
        spends,
        date(2024, 3, 1),
        date(2024, 3, 10),
        "month",
    )

    assert len(buckets) == 1
    assert buckets[0].outflow == Decimal("60")


def test_range_granularity_returns_single_bucket() -> None:
    """A custom range is a single bucket covering the whole window."""
    spends = [
        _spend("s1", "5", date(2024, 1, 1)),
        _spend("s2", "7", date(2024, 1, 31)),
    ]

    buckets = bucket_by_period(
        spends,
        date(2024, 1, 1),
        date(2024, 1, 31),
        "range",
    )

    assert len(buckets) == 1
    assert buckets[0].label == "2024-01-01/2024-01-31"
    assert buckets[0].end == date(2024, 2, 1)
    assert buckets[0].outflow == Decimal("12")


def test_reversed_range_is_empty_and_bad_granularity_raises() -> None:
    """An inverted range is valid but empty; unknown granularity is not."""
    assert bucket_by_period([], date(2024, 2, 1), date(2024, 1, 1)) == []
    with pytest.raises(ValueError):
        bucket_by_period([], date(2024, 1, 1), date(2024, 1, 2), "week")


def test_period_totals_reconcile_with_balance() -> None:
    """Outflow minus inflow since the first record equals the balance."""
    records = [
        _supplier_tx("t1", "new_purchase", "1000", datetime(2023, 11, 5)),
        _supplier_tx("t2", "new_purchase", "2000", datetime(2023, 12, 24)),
        _supplier_tx("t3", "pay_due", "800", datetime(2024, 1, 2)),
        _supplier_tx("t4", "new_purchase", "500", datetime(2024, 2, 29)),
        _supplier_tx("t5", "settle_bill", "150.50", datetime(2024, 3, 1)),
        _supplier_tx("t6", "future_kind", "999", datetime(2024, 3, 2)),
    ]
    now = date(2024, 3, 15)

    for granularity in ("day", "month", "range"):
        buckets = bucket_by_period(
            records,
            date(2023, 11, 5),
            now,
            granularity,
        )
        outflow = sum((b.outflow for b in buckets), Decimal("0"))
        inflow = sum((b.inflow for b in buckets), Decimal("0"))
        assert outflow - inflow == compute_balance(records)


def test_bucketing_is_idempotent() -> None:
    """Repeated calls return identical buckets."""
    spends = [_spend("s1", "9.99", date(2024, 3, 2))]

    first = bucket_by_period(spends, date(2024, 3, 1), date(2024, 3, 3))
    second = bucket_by_period(spends, date(2024, 3, 1), date(2024, 3, 3))

    assert first == second


def test_total_between_supports_open_bounds() -> None:
    """Missing bounds leave that side of the window open."""
    spends = [
        _spend("s1", "1", date(2024, 1, 1)),
        _spend("s2", "2", date(2024, 2, 1)),
        _spend("s3", "4", date(2024, 3, 1)),
    ]

    assert total_between(spends) == Decimal("7")
    assert total_between(spends, start=date(2024, 2, 1)) == Decimal("6")
    assert total_between(spends, end=date(2024, 2, 1)) == Decimal("3")


def test_shift_months_clamps_to_month_end() -> None:
    """Shifting from a 31st lands on the last day of a shorter month."""
    assert shift_months(date(2024, 8, 31), -6) == date(2024, 2, 29)
    assert shift_months(date(2024, 1, 15), -1) == date(2023, 12, 15)


def test_timestamp_bounds_are_reduced_to_days() -> None:
    """Bounds given as timestamps cover their whole calendar days."""
    spends = [
        _spend("s1", "40", date(2024, 3, 2)),
        _spend("s2", "60", date(2024, 3, 3)),
        _spend("s3", "99", date(2024, 3, 4)),
    ]

    buckets = bucket_by_period(
        spends,
        datetime(2024, 3, 1, 18, 30),
        datetime(2024, 3, 3, 12, 0),
        "day",
    )
    total = total_between(
        spends,
        datetime(2024, 3, 2, 23, 59),
        datetime(2024, 3, 3, 0, 1),
    )

    assert [bucket.start for bucket in buckets] == [
        date(2024, 3, 1),
        date(2024, 3, 2),
        date(2024, 3, 3),
    ]
    assert [bucket.outflow for bucket in buckets] == [
        Decimal("0"),
        Decimal("40"),
        Decimal("60"),
    ]
    assert total == Decimal("100")
