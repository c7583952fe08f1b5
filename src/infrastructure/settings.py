"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import (
    DEFAULT_TOP_CATEGORIES,
    MONTHLY_AVERAGE_WINDOW,
)
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_SNAPSHOT_ISOLATION = "REPEATABLE READ"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reading and summarizing the ledger.

    Attributes:
        snapshot_isolation: Isolation level of the snapshot transaction.
        average_window_months: Divisor of the dashboard monthly average.
        top_categories: Number of categories shown on the dashboard.
    """

    snapshot_isolation: str = DEFAULT_SNAPSHOT_ISOLATION
    average_window_months: int = MONTHLY_AVERAGE_WINDOW
    top_categories: int = DEFAULT_TOP_CATEGORIES

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        isolation = (
            os.getenv("LEDGER_SNAPSHOT_ISOLATION", DEFAULT_SNAPSHOT_ISOLATION)
            .strip()
            .upper()
        )
        return cls(
            snapshot_isolation=isolation or DEFAULT_SNAPSHOT_ISOLATION,
            average_window_months=cls._positive_int(
                "LEDGER_AVERAGE_WINDOW_MONTHS",
                MONTHLY_AVERAGE_WINDOW,
                logger=logger,
            ),
            top_categories=cls._positive_int(
                "LEDGER_TOP_CATEGORIES",
                DEFAULT_TOP_CATEGORIES,
                logger=logger,
            ),
        )

    @staticmethod
    def _positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value


__all__ = ["LedgerSettings", "DEFAULT_SNAPSHOT_ISOLATION"]
