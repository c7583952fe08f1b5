"""Application ports package."""

from .database import DatabaseEnginePort
from .expense_parser import ExpenseParserPort, ParsedSpend
from .ledger_repository import LedgerRepositoryPort, LedgerSnapshot

__all__ = [
    "DatabaseEnginePort",
    "ExpenseParserPort",
    "ParsedSpend",
    "LedgerRepositoryPort",
    "LedgerSnapshot",
]
