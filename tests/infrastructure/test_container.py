"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.get_counterparty_ledger import (
    GetCounterpartyLedgerUseCase,
)
from src.application.use_cases.get_counterparty_report import (
    GetCounterpartyReportUseCase,
)
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_outstanding import GetOutstandingUseCase
from src.application.use_cases.get_period_report import (
    GetPeriodReportUseCase,
)
from src.application.use_cases.get_spend_breakdown import (
    GetSpendBreakdownUseCase,
)
from src.infrastructure import container
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import LedgerSettings


def test_build_ledger_repository_uses_settings() -> None:
    """The repository receives the configured isolation level."""
    db_port = MagicMock()

    repository = container.build_ledger_repository(
        db_port=db_port,
        settings=LedgerSettings(snapshot_isolation="SERIALIZABLE"),
    )

    assert isinstance(repository, SqlAlchemyLedgerRepository)
    assert repository._db_port is db_port
    assert repository._isolation_level == "SERIALIZABLE"


def test_build_dashboard_use_case_applies_settings(monkeypatch) -> None:
    """Window and top-N settings reach the dashboard use case."""
    logger = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: logger)
    repository = MagicMock()

    use_case = container.build_dashboard_use_case(
        repository=repository,
        settings=LedgerSettings(average_window_months=3, top_categories=4),
    )

    assert isinstance(use_case, GetDashboardSummaryUseCase)
    assert use_case._ledger_repository is repository
    assert use_case._average_window_months == 3
    assert use_case._top_n == 4
    assert use_case._logger is logger


def test_builders_wire_given_repository(monkeypatch) -> None:
    """Each builder wraps the repository it is given."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()

    built = [
        container.build_outstanding_use_case(repository),
        container.build_period_report_use_case(repository),
        container.build_spend_breakdown_use_case(
            repository,
            settings=LedgerSettings(),
        ),
        container.build_counterparty_ledger_use_case(repository),
        container.build_counterparty_report_use_case(repository),
    ]

    assert [type(use_case) for use_case in built] == [
        GetOutstandingUseCase,
        GetPeriodReportUseCase,
        GetSpendBreakdownUseCase,
        GetCounterpartyLedgerUseCase,
        GetCounterpartyReportUseCase,
    ]
    assert all(u._ledger_repository is repository for u in built)


def test_build_ledger_repository_defaults(monkeypatch) -> None:
    """Without arguments the SQLAlchemy adapter and env settings are used."""
    db_port = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: db_port)
    monkeypatch.setattr(
        container.LedgerSettings,
        "from_env",
        classmethod(lambda cls: cls(snapshot_isolation="READ COMMITTED")),
    )

    repository = container.build_ledger_repository()

    assert repository._db_port is db_port
    assert repository._isolation_level == "READ COMMITTED"
