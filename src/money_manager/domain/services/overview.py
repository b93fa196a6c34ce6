"""Domain services for income and spending overviews."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal

from money_manager.domain.models.overview import (
    CategorySpending,
    MonthlyOverview,
    MonthTotals,
    PeriodSummary,
)
from money_manager.domain.models.transactions import Transaction
from money_manager.utils.dates import add_months, start_of_month
from money_manager.utils.decimal_utils import ZERO, coerce_decimal, safe_divide


def change_percentage(previous, current) -> Decimal:
    """Return the percent change from ``previous`` to ``current``.

    Zero when ``previous`` is zero.
    """
    before = coerce_decimal(previous)
    after = coerce_decimal(current)
    return safe_divide(after - before, abs(before)) * 100


def _totals(
    transactions: Iterable[Transaction],
    start: datetime,
    end: datetime,
) -> tuple[Decimal, Decimal]:
    income = ZERO
    expenses = ZERO
    for transaction in transactions:
        if not start <= transaction.date < end:
            continue
        if transaction.is_income:
            income += transaction.amount
        else:
            expenses += transaction.amount
    return income, expenses


def month_totals(
    transactions: Iterable[Transaction],
    month_start: datetime,
) -> MonthTotals:
    income, expenses = _totals(
        transactions, month_start, add_months(month_start, 1)
    )
    return MonthTotals(
        month_start=month_start,
        income=income,
        expenses=expenses,
    )


def build_monthly_overview(
    transactions: Sequence[Transaction],
    now: datetime | None = None,
) -> MonthlyOverview:
    """Compare the current calendar month with the previous one.

    Args:
        transactions: Transactions to aggregate.
        now: Reference time selecting the current month.

    Returns:
        MonthlyOverview: Totals for both months and the percent change of
        the net amount.
    """
    current_start = start_of_month(now or datetime.now())
    current = month_totals(transactions, current_start)
    previous = month_totals(transactions, add_months(current_start, -1))
    return MonthlyOverview(
        current_month=current,
        previous_month=previous,
        month_over_month_change=change_percentage(previous.net, current.net),
    )


def summarize_period(
    transactions: Sequence[Transaction],
    start: datetime,
    end: datetime,
) -> PeriodSummary:
    """Summarize ``[start, end)`` against the preceding window of equal length.

    Args:
        transactions: Transactions to aggregate.
        start: Inclusive start of the period.
        end: Exclusive end of the period.

    Returns:
        PeriodSummary: Period totals with percent changes versus the
        previous window.
    """
    length = end - start
    income, expenses = _totals(transactions, start, end)
    previous_income, previous_expenses = _totals(
        transactions, start - length, start
    )
    return PeriodSummary(
        start=start,
        end=end,
        income=income,
        expenses=expenses,
        income_change_percentage=change_percentage(previous_income, income),
        expense_change_percentage=change_percentage(
            previous_expenses, expenses
        ),
    )


def spending_by_category(
    transactions: Iterable[Transaction],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[CategorySpending]:
    """Group expenses by category, largest first.

    Args:
        transactions: Transactions to aggregate; income is ignored.
        start: Optional inclusive lower date bound.
        end: Optional exclusive upper date bound.

    Returns:
        list[CategorySpending]: Per-category totals and their share of all
        matching expenses.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for transaction in transactions:
        if transaction.is_income:
            continue
        if start is not None and transaction.date < start:
            continue
        if end is not None and transaction.date >= end:
            continue
        category = getattr(transaction.category, "value", transaction.category)
        totals[str(category)] += transaction.amount
    grand_total = sum(totals.values(), ZERO)
    rows = [
        CategorySpending(
            category=category,
            amount=amount,
            percentage=safe_divide(amount, grand_total) * 100,
        )
        for category, amount in totals.items()
    ]
    rows.sort(key=lambda row: (-row.amount, row.category))
    return rows


__all__ = [
    "change_percentage",
    "month_totals",
    "build_monthly_overview",
    "summarize_period",
    "spending_by_category",
]
