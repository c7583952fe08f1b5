"""Application use cases package."""

from .categorize_spend import CategorizeSpendUseCase
from .get_counterparty_ledger import (
    CounterpartyLedgerView,
    GetCounterpartyLedgerUseCase,
)
from .get_counterparty_report import (
    CounterpartyReport,
    CounterpartyReportRow,
    GetCounterpartyReportUseCase,
)
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .get_outstanding import GetOutstandingUseCase, OutstandingView
from .get_period_report import GetPeriodReportUseCase, PeriodReport
from .get_spend_breakdown import GetSpendBreakdownUseCase, SpendBreakdown

__all__ = [
    "CategorizeSpendUseCase",
    "GetCounterpartyLedgerUseCase",
    "CounterpartyLedgerView",
    "GetCounterpartyReportUseCase",
    "CounterpartyReport",
    "CounterpartyReportRow",
    "GetDashboardSummaryUseCase",
    "GetOutstandingUseCase",
    "OutstandingView",
    "GetPeriodReportUseCase",
    "PeriodReport",
    "GetSpendBreakdownUseCase",
    "SpendBreakdown",
]
