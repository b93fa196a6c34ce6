"""Normalisation of recurring expenses to monthly figures."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from money_manager.domain.constants import (
    BIWEEKLY_PERIODS_PER_YEAR,
    RECURRING_KEYWORD,
    RECURRING_MONTHLY_MULTIPLIERS,
    WEEKS_PER_YEAR,
    WORK_HOURS_PER_YEAR,
)
from money_manager.domain.models.overview import ExpenseRate
from money_manager.domain.models.transactions import Transaction
from money_manager.utils.dates import add_months, start_of_month
from money_manager.utils.decimal_utils import ZERO, coerce_decimal


def is_recurring(transaction: Transaction) -> bool:
    return RECURRING_KEYWORD in transaction.subtitle.lower()


def monthly_equivalent(transaction: Transaction) -> Decimal:
    """Return the monthly equivalent of a recurring transaction.

    The first frequency keyword found in the subtitle (daily, weekly,
    monthly, yearly) picks the multiplier; recurring transactions without
    one count once per month. Non-recurring transactions return zero.
    """
    if not is_recurring(transaction):
        return ZERO
    subtitle = transaction.subtitle.lower()
    amount = abs(transaction.amount)
    for keyword, multiplier in RECURRING_MONTHLY_MULTIPLIERS:
        if keyword in subtitle:
            return amount * multiplier
    return amount


def monthly_expense_total(
    transactions: Iterable[Transaction],
    now: datetime | None = None,
) -> Decimal:
    """Project monthly expenses from recurring and current-month spending.

    Args:
        transactions: Transactions to consider; income is ignored.
        now: Reference time selecting the current month.

    Returns:
        Decimal: Recurring expenses as monthly equivalents plus one-off
        expenses dated within the current calendar month.
    """
    month_start = start_of_month(now or datetime.now())
    month_end = add_months(month_start, 1)
    total = ZERO
    for transaction in transactions:
        if transaction.is_income:
            continue
        if is_recurring(transaction):
            total += monthly_equivalent(transaction)
        elif month_start <= transaction.date < month_end:
            total += transaction.amount
    return total


def expense_rate_table(monthly_total) -> list[ExpenseRate]:
    """Express a monthly expense total per hour, week, bi-week, month and year."""
    monthly = coerce_decimal(monthly_total)
    yearly = monthly * 12
    return [
        ExpenseRate("Hour", yearly / WORK_HOURS_PER_YEAR),
        ExpenseRate("Week", yearly / WEEKS_PER_YEAR),
        ExpenseRate("Bi-Week", yearly / BIWEEKLY_PERIODS_PER_YEAR),
        ExpenseRate("Month", monthly),
        ExpenseRate("Year", yearly),
    ]


__all__ = [
    "is_recurring",
    "monthly_equivalent",
    "monthly_expense_total",
    "expense_rate_table",
]
