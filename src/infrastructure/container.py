"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
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
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyLedgerRepository(
        resolved_db,
        isolation_level=resolved_settings.snapshot_isolation,
    )


def build_dashboard_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetDashboardSummaryUseCase:
    """Return the dashboard use case wired to the ledger repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetDashboardSummaryUseCase(
        repository or build_ledger_repository(settings=resolved_settings),
        logger=get_app_logger(),
        average_window_months=resolved_settings.average_window_months,
        top_n=resolved_settings.top_categories,
    )


def build_outstanding_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetOutstandingUseCase:
    """Return the outstanding ranking use case."""
    return GetOutstandingUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_period_report_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetPeriodReportUseCase:
    """Return the period report use case."""
    return GetPeriodReportUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_spend_breakdown_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetSpendBreakdownUseCase:
    """Return the spend breakdown use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetSpendBreakdownUseCase(
        repository or build_ledger_repository(settings=resolved_settings),
        logger=get_app_logger(),
        top_n=resolved_settings.top_categories,
    )


def build_counterparty_ledger_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetCounterpartyLedgerUseCase:
    """Return the counterparty detail use case."""
    return GetCounterpartyLedgerUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_counterparty_report_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetCounterpartyReportUseCase:
    """Return the per-counterparty date-range report use case."""
    return GetCounterpartyReportUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_dashboard_use_case",
    "build_outstanding_use_case",
    "build_period_report_use_case",
    "build_spend_breakdown_use_case",
    "build_counterparty_ledger_use_case",
    "build_counterparty_report_use_case",
]
