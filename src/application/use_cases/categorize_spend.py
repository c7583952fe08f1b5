"""Use case to suggest a category for a free-text expense."""

from src.application.ports.expense_parser import ExpenseParserPort, ParsedSpend
from src.domain.constants import DEFAULT_SPEND_CATEGORY
from src.domain.services import normalize_category
from src.infrastructure.logging.logger import get_app_logger

_TITLE_LIMIT = 50


class CategorizeSpendUseCase:
    """Ask the optional expense parser for a spend suggestion.

    The parser is best-effort: when it is not configured or fails, the
    suggestion falls back to the ``General`` category.
    """

    def __init__(
        self,
        parser: ExpenseParserPort | None = None,
        logger=None,
    ) -> None:
        self._parser = parser
        self._logger = logger or get_app_logger()

    def execute(self, text: str) -> ParsedSpend:
        """Return a spend suggestion for the text."""
        if self._parser is None:
            return self._fallback(text)
        try:
            parsed = self._parser.parse(text)
        except Exception as exc:
            self._logger.warning(
                f"Expense parser failed, using {DEFAULT_SPEND_CATEGORY}: {exc}"
            )
            return self._fallback(text)
        return ParsedSpend(
            title=parsed.title or self._title(text),
            amount=parsed.amount,
            category=normalize_category(parsed.category),
            confidence=parsed.confidence,
        )

    def _fallback(self, text: str) -> ParsedSpend:
        return ParsedSpend(
            title=self._title(text),
            amount=None,
            category=DEFAULT_SPEND_CATEGORY,
            confidence="low",
        )

    @staticmethod
    def _title(text: str) -> str:
        return (text or "").strip()[:_TITLE_LIMIT]


__all__ = ["CategorizeSpendUseCase"]
