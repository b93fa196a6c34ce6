"""Domain services package."""

from .balance import balance_at, balance_trend, build_balance_series
from .budgets import (
    apply_transaction_to_budget,
    compute_budget_progress,
    recalculate_budget,
)
from .currency import format_amount, get_currency_symbol
from .goals import crossed_milestones
from .overview import build_monthly_overview, spending_by_category
from .projections import (
    calculate_income_projections,
    calculate_required_hourly_rate,
)
from .recurring import monthly_expense_total
from .time_scale import convert
from .validation import ValidationResult, validate_goal, validate_transaction

__all__ = [
    "ValidationResult",
    "validate_transaction",
    "validate_goal",
    "compute_budget_progress",
    "recalculate_budget",
    "apply_transaction_to_budget",
    "convert",
    "calculate_income_projections",
    "calculate_required_hourly_rate",
    "monthly_expense_total",
    "balance_at",
    "build_balance_series",
    "balance_trend",
    "build_monthly_overview",
    "spending_by_category",
    "crossed_milestones",
    "format_amount",
    "get_currency_symbol",
]
