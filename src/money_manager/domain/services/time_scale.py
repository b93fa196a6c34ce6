"""Conversion of monetary rates between time scales."""

from decimal import Decimal, InvalidOperation

from money_manager.domain.constants import (
    DAYS_PER_WEEK,
    WEEKS_PER_MONTH,
    WEEKS_PER_YEAR,
)
from money_manager.domain.models.projections import (
    ExpenseBreakdown,
    TimeScale,
    WorkSchedule,
)
from money_manager.utils.decimal_utils import coerce_decimal


def convert(value, from_scale: TimeScale, to_scale: TimeScale) -> Decimal:
    """Convert a rate between scales through its hourly equivalent.

    Multiplication happens before division so that ratios of whole factors
    (such as monthly to yearly) stay exact.
    """
    amount = coerce_decimal(value)
    return amount * to_scale.conversion_factor / from_scale.conversion_factor


def from_hourly(hourly_rate, to_scale: TimeScale) -> Decimal:
    return coerce_decimal(hourly_rate) * to_scale.conversion_factor


def to_hourly(value, from_scale: TimeScale) -> Decimal:
    return coerce_decimal(value) / from_scale.conversion_factor


def calculate_income(
    hourly_rate,
    work_schedule: WorkSchedule,
    time_scale: TimeScale,
) -> Decimal:
    """Compute income for a work schedule at a given scale.

    Weekly income is ``hourly_rate * hours_per_week``; the other scales derive
    from it using 7 days per week, 4.33 weeks per month and 52 weeks per year.

    Args:
        hourly_rate: Pay per hour.
        work_schedule: Schedule supplying the weekly hours.
        time_scale: Scale to express the income in.

    Returns:
        Decimal: Income for one period of ``time_scale``.
    """
    rate = coerce_decimal(hourly_rate)
    weekly_income = rate * work_schedule.hours_per_week
    if time_scale is TimeScale.HOURLY:
        return rate
    if time_scale is TimeScale.DAILY:
        return weekly_income / DAYS_PER_WEEK
    if time_scale is TimeScale.WEEKLY:
        return weekly_income
    if time_scale is TimeScale.MONTHLY:
        return weekly_income * WEEKS_PER_MONTH
    return weekly_income * WEEKS_PER_YEAR


def _monthly_factor(time_scale: TimeScale) -> Decimal:
    return time_scale.conversion_factor / TimeScale.MONTHLY.conversion_factor


def calculate_expenses(
    monthly_expenses: ExpenseBreakdown,
    time_scale: TimeScale,
) -> ExpenseBreakdown:
    """Scale a monthly expense breakdown to another time scale."""
    return monthly_expenses.scaled(_monthly_factor(time_scale))


def calculate_loan_payments(monthly_loan_payments, time_scale: TimeScale) -> Decimal:
    return coerce_decimal(monthly_loan_payments) * _monthly_factor(time_scale)


def is_valid_value(value) -> bool:
    """Return True for finite, non-negative amounts."""
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return False
    return amount.is_finite() and amount >= 0


__all__ = [
    "convert",
    "from_hourly",
    "to_hourly",
    "calculate_income",
    "calculate_expenses",
    "calculate_loan_payments",
    "is_valid_value",
]
