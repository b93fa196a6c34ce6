"""Domain constants for budgeting, validation and projections."""

from decimal import Decimal

MAX_TRANSACTION_AMOUNT = Decimal("1000000")
MAX_TITLE_LENGTH = 100

MAX_GOAL_NAME_LENGTH = 100
MAX_GOAL_TARGET_AMOUNT = Decimal("10000000")
MAX_GOAL_YEARS_AHEAD = 50

MAX_CURRENCY_INPUT = Decimal("1000000")

EMAIL_PATTERN = r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}"

BUDGET_WARNING_RATIO = Decimal("0.8")

WEEKS_PER_MONTH = Decimal("4.33")
WEEKS_PER_YEAR = Decimal("52")
DAYS_PER_WEEK = Decimal("7")

# Multipliers turning a recurring amount into its monthly equivalent.
RECURRING_MONTHLY_MULTIPLIERS = (
    ("daily", Decimal("30")),
    ("weekly", WEEKS_PER_MONTH),
    ("monthly", Decimal("1")),
    ("yearly", Decimal("1") / Decimal("12")),
)
RECURRING_KEYWORD = "recurring"

# Divisors applied to a yearly expense total.
WORK_HOURS_PER_YEAR = Decimal("2080")
BIWEEKLY_PERIODS_PER_YEAR = Decimal("26")

GOAL_MILESTONES = (25, 50, 75, 100)

NOTIFICATION_LIMIT = 50

DEFAULT_CURRENCY_CODE = "USD"
DEFAULT_LOCALE = "en_US"
DEFAULT_FRACTION_DIGITS = 2


__all__ = [
    "MAX_TRANSACTION_AMOUNT",
    "MAX_TITLE_LENGTH",
    "MAX_GOAL_NAME_LENGTH",
    "MAX_GOAL_TARGET_AMOUNT",
    "MAX_GOAL_YEARS_AHEAD",
    "MAX_CURRENCY_INPUT",
    "EMAIL_PATTERN",
    "BUDGET_WARNING_RATIO",
    "WEEKS_PER_MONTH",
    "WEEKS_PER_YEAR",
    "DAYS_PER_WEEK",
    "RECURRING_MONTHLY_MULTIPLIERS",
    "RECURRING_KEYWORD",
    "WORK_HOURS_PER_YEAR",
    "BIWEEKLY_PERIODS_PER_YEAR",
    "GOAL_MILESTONES",
    "NOTIFICATION_LIMIT",
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_LOCALE",
    "DEFAULT_FRACTION_DIGITS",
]
