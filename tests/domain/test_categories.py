"""Tests for the spend category breakdown."""

from datetime import date
from decimal import Decimal

from src.domain.models import SpendRecord
from src.domain.services import compute_category_breakdown, top_categories


def _spend(spend_id: str, category, amount) -> SpendRecord:
    return SpendRecord(
        id=spend_id,
        owner_id="owner-1",
        category=category,
        amount=amount,
        date=date(2024, 3, 1),
    )


def test_breakdown_sorted_with_percentages() -> None:
    """Food and Transport shares are computed against the total."""
    spends = [
        _spend("s1", "Food", Decimal("300")),
        _spend("s2", "Food", Decimal("200")),
        _spend("s3", "Transport", Decimal("100")),
    ]

    breakdown = compute_category_breakdown(spends)

    assert [(c.category, c.amount) for c in breakdown] == [
        ("Food", Decimal("500")),
        ("Transport", Decimal("100")),
    ]
    assert breakdown[0].percentage.quantize(Decimal("0.1")) == Decimal("83.3")
    assert breakdown[1].percentage.quantize(Decimal("0.1")) == Decimal("16.7")


def test_percentages_sum_to_hundred() -> None:
    """Shares add up to 100 within rounding."""
    spends = [
        _spend("s1", "A", Decimal("1")),
        _spend("s2", "B", Decimal("1")),
        _spend("s3", "C", Decimal("1")),
    ]

    total = sum(
        (c.percentage for c in compute_category_breakdown(spends)),
        Decimal("0"),
    )

    assert abs(total - Decimal("100")) < Decimal("0.000001")


def test_zero_total_returns_empty_list() -> None:
    """No spend, or only zero amounts, gives an empty breakdown."""
    assert compute_category_breakdown([]) == []
    assert compute_category_breakdown([_spend("s1", "Food", "0")]) == []


def test_unknown_categories_are_preserved_and_blank_falls_back() -> None:
    """Labels outside the known set stay as-is; blanks become General."""
    spends = [
        _spend("s1", "Crypto Mining", Decimal("40")),
        _spend("s2", "  ", Decimal("30")),
        _spend("s3", None, Decimal("30")),
    ]

    breakdown = compute_category_breakdown(spends)

    assert [(c.category, c.amount) for c in breakdown] == [
        ("General", Decimal("60")),
        ("Crypto Mining", Decimal("40")),
    ]


def test_ties_keep_first_seen_order_and_malformed_are_skipped() -> None:
    """Equal totals keep their first appearance order."""
    spends = [
        _spend("s1", "Travel", Decimal("50")),
        _spend("s2", "Books", Decimal("50")),
        _spend("s3", "Books", "-10"),
        _spend("s4", "Travel", "n/a"),
    ]

    breakdown = compute_category_breakdown(spends)

    assert [c.category for c in breakdown] == ["Travel", "Books"]
    assert breakdown[0].percentage == Decimal("50")


def test_top_categories_is_a_slice() -> None:
    """The top-N view is a prefix of the full breakdown."""
    spends = [
        _spend("s1", "A", Decimal("3")),
        _spend("s2", "B", Decimal("2")),
        _spend("s3", "C", Decimal("1")),
    ]
    breakdown = compute_category_breakdown(spends)

    assert top_categories(breakdown, 2) == breakdown[:2]
    assert top_categories(breakdown, 0) == []
    assert top_categories(breakdown, 10) == breakdown


def test_breakdown_is_idempotent() -> None:
    """Repeated calls return equal results."""
    spends = [_spend("s1", "A", Decimal("3")), _spend("s2", "B", "2.5")]

    assert compute_category_breakdown(spends) == compute_category_breakdown(
        spends
    )
