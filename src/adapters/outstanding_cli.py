"""CLI adapter printing the ranked outstanding list of an owner.

Reads ``LEDGER_OWNER_ID``, ``OUTSTANDING_LEDGER`` (suppliers or persons),
``OUTSTANDING_SIGN`` (positive_only, negative_only or any) and
``OUTSTANDING_LIMIT`` from the environment.
"""

import os

from src.domain.constants import SIGN_ANY
from src.domain.models import OutstandingPolicy
from src.infrastructure.container import build_outstanding_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_limit(value: str | None, logger) -> int | None:
    """Parse the optional top-N limit.

    Args:
        value: Raw limit string.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed limit or None when unset or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid limit '{value}'. Expected an integer.")
        return None


def main() -> None:
    """Compute and print the outstanding ranking."""
    logger = get_app_logger()
    owner_id = os.getenv("LEDGER_OWNER_ID")
    if not owner_id:
        logger.warning("LEDGER_OWNER_ID is required to rank outstanding.")
        return
    ledger = os.getenv("OUTSTANDING_LEDGER", "suppliers").strip().lower()
    sign = os.getenv("OUTSTANDING_SIGN", SIGN_ANY).strip().lower()
    limit = _parse_limit(os.getenv("OUTSTANDING_LIMIT"), logger)

    get_usage_logger().info(f"outstanding owner={owner_id} ledger={ledger}")
    use_case = build_outstanding_use_case()
    try:
        view = use_case.execute(
            owner_id,
            ledger=ledger,
            policy=OutstandingPolicy(sign=sign),
            limit=limit,
        )
    except ValueError as exc:
        logger.error(str(exc))
        return

    print(f"Outstanding {view.ledger} (owner={owner_id}, sign={sign})")
    for item in view.items:
        due = item.due_date.isoformat() if item.due_date else "-"
        print(f"  {item.name}: {item.balance} [{item.tier}] due={due}")
    print(
        f"Receivable={view.summary.total_receivable}, "
        f"payable={view.summary.total_payable}, net={view.summary.net}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
