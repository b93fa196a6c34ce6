"""Domain models for monthly and per-period overviews."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class MonthTotals:
    """Income and expense totals for one calendar month."""

    month_start: datetime
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class MonthlyOverview:
    """Current month compared with the previous month."""

    current_month: MonthTotals
    previous_month: MonthTotals
    month_over_month_change: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Income and expenses over a window, compared with the window before."""

    start: datetime
    end: datetime
    income: Decimal
    expenses: Decimal
    income_change_percentage: Decimal
    expense_change_percentage: Decimal


@dataclass(frozen=True)
class CategorySpending:
    """Expense total for one category and its share of all spending."""

    category: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class ExpenseRate:
    """Normalised expenses expressed over one period length."""

    label: str
    amount: Decimal


__all__ = [
    "MonthTotals",
    "MonthlyOverview",
    "PeriodSummary",
    "CategorySpending",
    "ExpenseRate",
]
