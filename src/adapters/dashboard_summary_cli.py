"""CLI adapter printing the dashboard summary of an owner.

The owner and reference date come from ``LEDGER_OWNER_ID`` and the
optional ``LEDGER_AS_OF`` (YYYY-MM-DD) environment variables.
"""

from datetime import date
import os

from src.infrastructure.container import build_dashboard_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Compute and print the dashboard summary."""
    logger = get_app_logger()
    owner_id = os.getenv("LEDGER_OWNER_ID")
    if not owner_id:
        logger.warning("LEDGER_OWNER_ID is required to build a dashboard.")
        return
    as_of = _parse_date(os.getenv("LEDGER_AS_OF"), logger)

    get_usage_logger().info(f"dashboard_summary owner={owner_id}")
    use_case = build_dashboard_use_case()
    summary = use_case.execute(owner_id, now=as_of)

    print(f"Dashboard (owner={owner_id}, as_of={as_of or date.today()})")
    print(
        f"Spends: today={summary.today_total}, month={summary.month_total}, "
        f"previous_month={summary.previous_month_total}, "
        f"all_time={summary.all_time_total}, "
        f"monthly_average={summary.monthly_average}, trend={summary.trend}"
    )
    for category in summary.categories:
        print(
            f"  {category.category}: {category.amount} "
            f"({category.percentage:.1f}%)"
        )
    print(
        f"Persons: owed={summary.parties_owed}, owing={summary.parties_owing}"
    )
    print(
        f"Suppliers: count={summary.total_suppliers}, "
        f"transactions={summary.total_transactions}, "
        f"dues={summary.total_dues}, "
        f"pending_purchases={summary.pending_purchases}"
    )
    for due in summary.upcoming_dues:
        print(f"  due {due.due_date}: {due.amount} ({due.counterparty_id})")
    for transaction in summary.recent_transactions:
        print(
            f"  recent {transaction.created_at:%Y-%m-%d} {transaction.kind}: "
            f"{transaction.amount} ({transaction.counterparty_id})"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
