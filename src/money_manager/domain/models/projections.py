"""Domain models for time-scale conversion and income projections."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from money_manager.utils.decimal_utils import safe_divide


class TimeScale(str, Enum):
    """Time bases a monetary rate can be expressed in."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def conversion_factor(self) -> Decimal:
        """Return the length of one period, in hours."""
        return _HOURS_PER_PERIOD[self]


_HOURS_PER_PERIOD = {
    TimeScale.HOURLY: Decimal("1"),
    TimeScale.DAILY: Decimal("24"),
    TimeScale.WEEKLY: Decimal("168"),
    TimeScale.MONTHLY: Decimal("730"),
    TimeScale.YEARLY: Decimal("8760"),
}


class WorkSchedule(str, Enum):
    """Work arrangements with their weekly hours."""

    FULL_TIME = "Full Time"
    PART_TIME = "Part Time"
    FREELANCE = "Freelance"
    CONTRACT = "Contract"

    @property
    def hours_per_week(self) -> Decimal:
        return _HOURS_PER_WEEK[self]


_HOURS_PER_WEEK = {
    WorkSchedule.FULL_TIME: Decimal("40"),
    WorkSchedule.PART_TIME: Decimal("20"),
    WorkSchedule.FREELANCE: Decimal("30"),
    WorkSchedule.CONTRACT: Decimal("35"),
}


class ExpenseCategory(str, Enum):
    HOUSING = "Housing"
    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    LOANS = "Loans"
    OTHER = "Other"
    INCOME = "Income"


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expenses split by category for one time scale."""

    housing: Decimal = Decimal("0")
    food: Decimal = Decimal("0")
    transportation: Decimal = Decimal("0")
    loans: Decimal = Decimal("0")
    other: Decimal = Decimal("0")

    @property
    def total_expenses(self) -> Decimal:
        return (
            self.housing
            + self.food
            + self.transportation
            + self.loans
            + self.other
        )

    def amount_for(self, category: ExpenseCategory) -> Decimal:
        """Return the amount for an expense category (0 for income)."""
        if category is ExpenseCategory.INCOME:
            return Decimal("0")
        return getattr(self, category.name.lower())

    def percentage_for(self, category: ExpenseCategory) -> Decimal:
        """Return the category's share of total expenses, in percent."""
        return safe_divide(self.amount_for(category), self.total_expenses) * 100

    def scaled(self, factor: Decimal) -> "ExpenseBreakdown":
        return ExpenseBreakdown(
            housing=self.housing * factor,
            food=self.food * factor,
            transportation=self.transportation * factor,
            loans=self.loans * factor,
            other=self.other * factor,
        )


@dataclass(frozen=True)
class IncomeProjection:
    """Current and projected income against expenses for one time scale."""

    time_scale: TimeScale
    current_income: Decimal
    projected_income: Decimal
    expense_breakdown: ExpenseBreakdown
    loan_payments: Decimal
    available_income: Decimal
    projected_available_income: Decimal

    @property
    def income_gap(self) -> Decimal:
        return self.projected_income - self.expense_breakdown.total_expenses

    @property
    def current_income_gap(self) -> Decimal:
        return self.current_income - self.expense_breakdown.total_expenses


@dataclass(frozen=True)
class IncomeProjectionResult:
    """Income at every scale for one hourly rate, with one scale's budget."""

    hourly_rate: Decimal
    daily_income: Decimal
    weekly_income: Decimal
    monthly_income: Decimal
    yearly_income: Decimal
    expense_breakdown: ExpenseBreakdown
    loan_payments: Decimal
    available_income: Decimal
    projected_available_income: Decimal


@dataclass(frozen=True)
class ProjectionComparison:
    """Current versus projected amount for one chart category."""

    category: ExpenseCategory
    current_amount: Decimal
    projected_amount: Decimal


__all__ = [
    "TimeScale",
    "WorkSchedule",
    "ExpenseCategory",
    "ExpenseBreakdown",
    "IncomeProjection",
    "IncomeProjectionResult",
    "ProjectionComparison",
]
