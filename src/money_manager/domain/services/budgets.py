"""Domain services for budget progress and spending."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal

from money_manager.domain.constants import BUDGET_WARNING_RATIO
from money_manager.domain.models.budgets import (
    Budget,
    BudgetPeriodType,
    BudgetProgress,
    ProgressStatus,
)
from money_manager.domain.models.transactions import Transaction
from money_manager.utils.dates import add_months, start_of_day, start_of_month
from money_manager.utils.decimal_utils import ZERO, coerce_decimal, safe_divide


def progress_status(ratio: Decimal) -> ProgressStatus:
    """Bucket an uncapped ``spent / allocated`` ratio."""
    if ratio > 1:
        return ProgressStatus.OVER
    if ratio > BUDGET_WARNING_RATIO:
        return ProgressStatus.WARNING
    return ProgressStatus.ON_TRACK


def compute_budget_progress(spent, allocated) -> BudgetProgress:
    """Compute progress of spending against an allocation.

    Args:
        spent: Amount spent so far.
        allocated: Amount allocated for the period.

    Returns:
        BudgetProgress: Capped percentage, over-budget flag and status.
    """
    spent_value = coerce_decimal(spent)
    allocated_value = coerce_decimal(allocated)
    ratio = safe_divide(spent_value, allocated_value)
    is_over = spent_value > allocated_value
    return BudgetProgress(
        percentage=min(ratio, Decimal("1")),
        is_over_budget=is_over,
        status=ProgressStatus.OVER if is_over else progress_status(ratio),
    )


def budget_period_bounds(
    period_type: BudgetPeriodType,
    reference: datetime,
) -> tuple[datetime, datetime]:
    """Return the half-open period containing ``reference``.

    Weekly periods start on Monday, monthly ones on the first of the month
    and yearly ones on January 1st.
    """
    if period_type is BudgetPeriodType.WEEKLY:
        start = start_of_day(reference) - timedelta(days=reference.weekday())
        return start, start + timedelta(days=7)
    if period_type is BudgetPeriodType.YEARLY:
        start = start_of_month(reference).replace(month=1)
        return start, start.replace(year=start.year + 1)
    start = start_of_month(reference)
    return start, add_months(start, 1)


def transaction_matches_budget(budget: Budget, transaction: Transaction) -> bool:
    """Return True when an expense falls in the budget's category and period."""
    if transaction.is_income:
        return False
    category = transaction.category
    name = getattr(category, "value", category)
    if str(name).lower() != budget.category.strip().lower():
        return False
    return budget.contains(transaction.date)


def spent_for_budget(
    budget: Budget,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Sum the matching expenses of a budget."""
    total = ZERO
    for transaction in transactions:
        if transaction_matches_budget(budget, transaction):
            total += transaction.amount
    return total


def recalculate_budget(
    budget: Budget,
    transactions: Iterable[Transaction],
) -> Budget:
    """Return the budget with ``spent_amount`` recomputed from scratch."""
    return replace(budget, spent_amount=spent_for_budget(budget, transactions))


def apply_transaction_to_budget(
    budget: Budget,
    transaction: Transaction,
    remove: bool = False,
) -> Budget:
    """Add (or remove) one transaction's effect on a budget.

    Non-matching transactions leave the budget unchanged. Removing never
    takes ``spent_amount`` below zero.

    Args:
        budget: Budget to update.
        transaction: Transaction being added or removed.
        remove: True when the transaction is being removed.

    Returns:
        Budget: Updated budget.
    """
    if not transaction_matches_budget(budget, transaction):
        return budget
    if remove:
        spent = max(ZERO, budget.spent_amount - transaction.amount)
    else:
        spent = budget.spent_amount + transaction.amount
    return replace(budget, spent_amount=spent)


__all__ = [
    "progress_status",
    "compute_budget_progress",
    "budget_period_bounds",
    "transaction_matches_budget",
    "spent_for_budget",
    "recalculate_budget",
    "apply_transaction_to_budget",
]
