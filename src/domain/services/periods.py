"""Calendar bucketing of ledger and spend records."""

import calendar
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    GRANULARITY_DAY,
    GRANULARITY_MONTH,
    GRANULARITY_RANGE,
)
from src.domain.models.finance import PeriodBucket
from src.domain.services.signing import record_day, signed_amount

_ONE_DAY = timedelta(days=1)


def to_day(value: date | datetime | None) -> date | None:
    """Return the calendar day of a date or timestamp."""
    if isinstance(value, datetime):
        return value.date()
    return value


def month_start(day: date) -> date:
    """Return the first day of the month containing ``day``."""
    return day.replace(day=1)


def next_month_start(day: date) -> date:
    """Return the first day of the month following ``day``."""
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the target month's end."""
    index = day.year * 12 + day.month - 1 + months
    year, month_index = divmod(index, 12)
    last_day = calendar.monthrange(year, month_index + 1)[1]
    return date(year, month_index + 1, min(day.day, last_day))


def bucket_by_period(
    records: Iterable,
    start: date | datetime,
    end: date | datetime,
    granularity: str = GRANULARITY_DAY,
    *,
    logger: Logger | None = None,
) -> list[PeriodBucket]:
    """Sum signed record amounts into contiguous calendar buckets.

    Every bucket between ``start`` and ``end`` is returned, including
    idle ones, so charted series have no gaps. Timestamp bounds are
    reduced to their calendar day. A record lands in the
    bucket whose ``[start, end)`` window holds its day; records dated
    outside the inclusive ``[start, end]`` range are dropped.

    Args:
        records: Supplier transactions, loan transactions or spends.
        start: First day of the report, as a date or timestamp.
        end: Last day of the report (inclusive), as a date or timestamp.
        granularity: ``day``, ``month`` or ``range`` (a single bucket).
        logger: Optional logger used to report skipped records.

    Returns:
        list[PeriodBucket]: Buckets in chronological order.

    Raises:
        ValueError: If the granularity is not supported.
    """
    start = to_day(start)
    end = to_day(end)
    windows = _build_windows(start, end, granularity)
    if not windows:
        return []
    positions = {
        window_start: index
        for index, (_, window_start, _) in enumerate(windows)
    }
    inflows = [Decimal("0")] * len(windows)
    outflows = [Decimal("0")] * len(windows)

    for record in records:
        day = record_day(record)
        if day is None or day < start or day > end:
            continue
        amount = signed_amount(record, logger)
        if amount is None:
            continue
        index = positions[_window_key(day, start, granularity)]
        if amount >= 0:
            outflows[index] += amount
        else:
            inflows[index] += -amount

    return [
        PeriodBucket(
            label=label,
            start=window_start,
            end=window_end,
            inflow=inflows[i],
            outflow=outflows[i],
        )
        for i, (label, window_start, window_end) in enumerate(windows)
    ]


def total_between(
    records: Iterable,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Return the signed total of records dated within ``[start, end]``.

    Either bound may be None to leave that side open. Timestamp bounds
    are reduced to their calendar day.
    """
    start = to_day(start)
    end = to_day(end)
    total = Decimal("0")
    for record in records:
        day = record_day(record)
        if day is None:
            continue
        if start is not None and day < start:
            continue
        if end is not None and day > end:
            continue
        amount = signed_amount(record, logger)
        if amount is not None:
            total += amount
    return total


def _build_windows(
    start: date,
    end: date,
    granularity: str,
) -> list[tuple[str, date, date]]:
    if granularity not in (
        GRANULARITY_DAY,
        GRANULARITY_MONTH,
        GRANULARITY_RANGE,
    ):
        raise ValueError(f"Unsupported granularity: {granularity}")
    if start > end:
        return []
    if granularity == GRANULARITY_RANGE:
        label = f"{start.isoformat()}/{end.isoformat()}"
        return [(label, start, end + _ONE_DAY)]

    windows = []
    if granularity == GRANULARITY_DAY:
        current = start
        while current <= end:
            windows.append((current.isoformat(), current, current + _ONE_DAY))
            current += _ONE_DAY
        return windows

    current = month_start(start)
    while current <= end:
        following = next_month_start(current)
        windows.append((current.strftime("%Y-%m"), current, following))
        current = following
    return windows


def _window_key(day: date, start: date, granularity: str) -> date:
    if granularity == GRANULARITY_DAY:
        return day
    if granularity == GRANULARITY_MONTH:
        return month_start(day)
    return start


__all__ = [
    "to_day",
    "month_start",
    "next_month_start",
    "shift_months",
    "bucket_by_period",
    "total_between",
]
