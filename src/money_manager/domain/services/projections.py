"""Income projection services."""

from decimal import Decimal

from money_manager.domain.constants import WEEKS_PER_MONTH
from money_manager.domain.models.projections import (
    ExpenseBreakdown,
    ExpenseCategory,
    IncomeProjection,
    IncomeProjectionResult,
    ProjectionComparison,
    TimeScale,
    WorkSchedule,
)
from money_manager.domain.services.time_scale import (
    calculate_expenses,
    calculate_income,
    calculate_loan_payments,
    is_valid_value,
)
from money_manager.utils.decimal_utils import coerce_decimal, safe_divide


def calculate_income_projection_for_scale(
    hourly_rate,
    projected_hourly_rate,
    work_schedule: WorkSchedule,
    time_scale: TimeScale,
    monthly_expenses: ExpenseBreakdown,
    monthly_loan_payments,
) -> IncomeProjection:
    """Compute current and projected income against expenses for one scale."""
    current_income = calculate_income(hourly_rate, work_schedule, time_scale)
    projected_income = calculate_income(
        projected_hourly_rate, work_schedule, time_scale
    )
    expenses = calculate_expenses(monthly_expenses, time_scale)
    loan_payments = calculate_loan_payments(monthly_loan_payments, time_scale)
    outgoings = expenses.total_expenses + loan_payments
    return IncomeProjection(
        time_scale=time_scale,
        current_income=current_income,
        projected_income=projected_income,
        expense_breakdown=expenses,
        loan_payments=loan_payments,
        available_income=current_income - outgoings,
        projected_available_income=projected_income - outgoings,
    )


def calculate_income_projections(
    hourly_rate,
    projected_hourly_rate,
    work_schedule: WorkSchedule,
    monthly_expenses: ExpenseBreakdown,
    monthly_loan_payments,
) -> list[IncomeProjection]:
    """Compute income projections for every time scale.

    Args:
        hourly_rate: Current pay per hour.
        projected_hourly_rate: Pay per hour being considered.
        work_schedule: Schedule supplying the weekly hours.
        monthly_expenses: Expense breakdown per month.
        monthly_loan_payments: Loan payments per month.

    Returns:
        list[IncomeProjection]: One projection per scale, hourly first.
    """
    return [
        calculate_income_projection_for_scale(
            hourly_rate,
            projected_hourly_rate,
            work_schedule,
            time_scale,
            monthly_expenses,
            monthly_loan_payments,
        )
        for time_scale in TimeScale
    ]


def calculate_income_projection(
    hourly_rate,
    work_schedule: WorkSchedule,
    time_scale: TimeScale,
    monthly_expenses: ExpenseBreakdown,
    monthly_loan_payments,
) -> IncomeProjectionResult:
    """Compute income at every scale plus the budget for ``time_scale``."""
    rate = coerce_decimal(hourly_rate)
    income = calculate_income(rate, work_schedule, time_scale)
    expenses = calculate_expenses(monthly_expenses, time_scale)
    loan_payments = calculate_loan_payments(monthly_loan_payments, time_scale)
    available = income - expenses.total_expenses - loan_payments
    return IncomeProjectionResult(
        hourly_rate=rate,
        daily_income=calculate_income(rate, work_schedule, TimeScale.DAILY),
        weekly_income=calculate_income(rate, work_schedule, TimeScale.WEEKLY),
        monthly_income=calculate_income(rate, work_schedule, TimeScale.MONTHLY),
        yearly_income=calculate_income(rate, work_schedule, TimeScale.YEARLY),
        expense_breakdown=expenses,
        loan_payments=loan_payments,
        available_income=available,
        projected_available_income=available,
    )


def calculate_required_hourly_rate(
    monthly_expenses: ExpenseBreakdown,
    monthly_loan_payments,
    work_schedule: WorkSchedule,
    target_savings=Decimal("0"),
) -> Decimal:
    """Return the hourly rate that covers monthly needs plus savings."""
    needs = (
        monthly_expenses.total_expenses
        + coerce_decimal(monthly_loan_payments)
        + coerce_decimal(target_savings)
    )
    hours_per_month = work_schedule.hours_per_week * WEEKS_PER_MONTH
    return safe_divide(needs, hours_per_month)


def calculate_expense_percentages(
    expense_breakdown: ExpenseBreakdown,
) -> dict[ExpenseCategory, Decimal]:
    """Return each expense category's share of the total, in percent."""
    return {
        category: expense_breakdown.percentage_for(category)
        for category in ExpenseCategory
        if category is not ExpenseCategory.INCOME
    }


def build_comparison_rows(
    projection: IncomeProjection,
) -> list[ProjectionComparison]:
    """Build current-versus-projected rows for charting a projection.

    Only income differs between the two columns; loan rows use the converted
    loan payments rather than the breakdown's loans field.
    """
    breakdown = projection.expense_breakdown
    rows = [
        ProjectionComparison(
            ExpenseCategory.INCOME,
            projection.current_income,
            projection.projected_income,
        )
    ]
    for category in ExpenseCategory:
        if category is ExpenseCategory.INCOME:
            continue
        if category is ExpenseCategory.LOANS:
            amount = projection.loan_payments
        else:
            amount = breakdown.amount_for(category)
        rows.append(ProjectionComparison(category, amount, amount))
    return rows


def validate_projection_inputs(
    hourly_rate,
    monthly_expenses: ExpenseBreakdown,
    monthly_loan_payments,
) -> bool:
    """Return True when the projection inputs are usable."""
    rate = coerce_decimal(hourly_rate)
    if not rate.is_finite() or rate <= 0:
        return False
    if monthly_expenses.total_expenses < 0:
        return False
    return is_valid_value(monthly_loan_payments)


__all__ = [
    "calculate_income_projection_for_scale",
    "calculate_income_projections",
    "calculate_income_projection",
    "calculate_required_hourly_rate",
    "calculate_expense_percentages",
    "build_comparison_rows",
    "validate_projection_inputs",
]
