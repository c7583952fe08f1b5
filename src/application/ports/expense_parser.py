"""Port for the optional free-text expense parser."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol


@dataclass(frozen=True)
class ParsedSpend:
    """Structured result of parsing a free-text expense."""

    title: str
    amount: Decimal | None
    category: str
    confidence: str = "low"


class ExpenseParserPort(Protocol):
    """Port exposing a best-effort expense parser."""

    def parse(self, text: str) -> ParsedSpend:
        """Parse free text such as "lunch 350" into a spend suggestion."""


__all__ = ["ParsedSpend", "ExpenseParserPort"]
