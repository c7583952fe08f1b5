"""Tests for the GetPeriodReportUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.ledger_repository import LedgerSnapshot
from src.application.use_cases.get_period_report import GetPeriodReportUseCase
from src.domain.models import SpendRecord, SupplierTransaction


def _transaction(tx_id, supplier_id, kind, amount, created_at):
    return SupplierTransaction(
        id=tx_id,
        owner_id="owner-1",
        counterparty_id=supplier_id,
        kind=kind,
        amount=Decimal(amount),
        created_at=created_at,
    )


@pytest.fixture
def repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = LedgerSnapshot(
        owner_id="owner-1",
        supplier_transactions=(
            _transaction(
                "t1", "s1", "new_purchase", "400", datetime(2024, 1, 10)
            ),
            _transaction(
                "t2", "s2", "new_purchase", "90", datetime(2024, 1, 31)
            ),
            _transaction("t3", "s1", "pay_due", "150", datetime(2024, 2, 1)),
        ),
        spends=(
            SpendRecord(
                id="sp1",
                owner_id="owner-1",
                category="Food",
                amount=Decimal("12.50"),
                date=date(2024, 1, 2),
            ),
        ),
    )
    return repository


def test_monthly_supplier_report(repository: MagicMock) -> None:
    """Purchases are outflow and payments inflow per calendar month."""
    logger = MagicMock()
    report = GetPeriodReportUseCase(repository, logger=logger).execute(
        "owner-1",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 2, 29),
        granularity="month",
        ledger="suppliers",
    )

    assert [bucket.label for bucket in report.buckets] == [
        "2024-01",
        "2024-02",
    ]
    assert report.buckets[0].outflow == Decimal("490")
    assert report.buckets[0].inflow == Decimal("0")
    assert report.buckets[1].inflow == Decimal("150")
    assert report.total_outflow - report.total_inflow == Decimal("340")
    assert report.ledger == "suppliers"
    assert report.granularity == "month"
    logger.info.assert_called_once()


def test_report_restricted_to_counterparty(repository: MagicMock) -> None:
    """Only the requested supplier contributes to the buckets."""
    report = GetPeriodReportUseCase(repository, logger=MagicMock()).execute(
        "owner-1",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 2, 29),
        granularity="range",
        ledger="suppliers",
        counterparty_id="s1",
    )

    assert len(report.buckets) == 1
    assert report.buckets[0].net == Decimal("250")


def test_spends_are_the_default_ledger(repository: MagicMock) -> None:
    """Without a ledger name the spends are bucketed per day."""
    report = GetPeriodReportUseCase(repository, logger=MagicMock()).execute(
        "owner-1",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 3),
    )

    assert [bucket.outflow for bucket in report.buckets] == [
        Decimal("0"),
        Decimal("12.50"),
        Decimal("0"),
    ]


def test_unknown_granularity_raises(repository: MagicMock) -> None:
    """Unsupported granularities are rejected."""
    use_case = GetPeriodReportUseCase(repository, logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(
            "owner-1",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            granularity="week",
        )
