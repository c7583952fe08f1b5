"""Domain constants for ledger analytics."""

from decimal import Decimal

SUPPLIER_NEW_PURCHASE = "new_purchase"
SUPPLIER_PAY_DUE = "pay_due"
SUPPLIER_SETTLE_BILL = "settle_bill"

SUPPLIER_DEBIT_KINDS = (SUPPLIER_NEW_PURCHASE,)
SUPPLIER_CREDIT_KINDS = (SUPPLIER_PAY_DUE, SUPPLIER_SETTLE_BILL)

LOAN_GIVES = "Gives"
LOAN_TAKES = "Takes"

LOAN_DEBIT_KINDS = (LOAN_GIVES,)
LOAN_CREDIT_KINDS = (LOAN_TAKES,)

DEFAULT_SPEND_CATEGORY = "General"
SPEND_CATEGORIES = (
    "Food & Dining",
    "Transportation",
    "Entertainment",
    "Shopping",
    "Bills & Utilities",
    "Healthcare",
    "Education",
    "Travel",
    "Personal Care",
    "Home & Garden",
    DEFAULT_SPEND_CATEGORY,
    "Other",
)

SIGN_POSITIVE_ONLY = "positive_only"
SIGN_NEGATIVE_ONLY = "negative_only"
SIGN_ANY = "any"

TIER_LOW = "low"
TIER_MEDIUM = "medium"
TIER_HIGH = "high"
DEFAULT_LOW_TIER_LIMIT = Decimal("1000")
DEFAULT_MEDIUM_TIER_LIMIT = Decimal("10000")

GRANULARITY_DAY = "day"
GRANULARITY_MONTH = "month"
GRANULARITY_RANGE = "range"

TREND_INCREASING = "increasing"
TREND_DECREASING = "decreasing"
TREND_STABLE = "stable"
TREND_THRESHOLD = Decimal("0.10")

# All-time spend is divided by this many months, active or not.
MONTHLY_AVERAGE_WINDOW = 6
DEFAULT_TOP_CATEGORIES = 6
UPCOMING_DUES_LIMIT = 5
RECENT_TRANSACTIONS_LIMIT = 5


__all__ = [
    "SUPPLIER_NEW_PURCHASE",
    "SUPPLIER_PAY_DUE",
    "SUPPLIER_SETTLE_BILL",
    "SUPPLIER_DEBIT_KINDS",
    "SUPPLIER_CREDIT_KINDS",
    "LOAN_GIVES",
    "LOAN_TAKES",
    "LOAN_DEBIT_KINDS",
    "LOAN_CREDIT_KINDS",
    "DEFAULT_SPEND_CATEGORY",
    "SPEND_CATEGORIES",
    "SIGN_POSITIVE_ONLY",
    "SIGN_NEGATIVE_ONLY",
    "SIGN_ANY",
    "TIER_LOW",
    "TIER_MEDIUM",
    "TIER_HIGH",
    "DEFAULT_LOW_TIER_LIMIT",
    "DEFAULT_MEDIUM_TIER_LIMIT",
    "GRANULARITY_DAY",
    "GRANULARITY_MONTH",
    "GRANULARITY_RANGE",
    "TREND_INCREASING",
    "TREND_DECREASING",
    "TREND_STABLE",
    "TREND_THRESHOLD",
    "MONTHLY_AVERAGE_WINDOW",
    "DEFAULT_TOP_CATEGORIES",
    "UPCOMING_DUES_LIMIT",
    "RECENT_TRANSACTIONS_LIMIT",
]
