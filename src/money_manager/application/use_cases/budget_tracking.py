"""Keep category budgets in sync with transaction changes."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from money_manager.application.notifications import NotificationService
from money_manager.domain.models.budgets import (
    Budget,
    BudgetPeriodType,
    BudgetProgress,
    ProgressStatus,
)
from money_manager.domain.models.transactions import Transaction
from money_manager.domain.services.budgets import (
    apply_transaction_to_budget,
    budget_period_bounds,
    compute_budget_progress,
    recalculate_budget,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.decimal_utils import coerce_decimal, safe_divide

_SEVERITY = {
    ProgressStatus.ON_TRACK: 0,
    ProgressStatus.WARNING: 1,
    ProgressStatus.OVER: 2,
}


class BudgetTracker:
    """In-memory budget collection updated on every transaction change.

    When a change moves a budget into a more severe status (warning or
    over), a budget alert is published through the notification service.
    """

    def __init__(
        self,
        budgets: Iterable[Budget] | None = None,
        notifications: NotificationService | None = None,
        logger=None,
    ) -> None:
        """Initialize the tracker.

        Args:
            budgets: Initial budgets.
            notifications: Optional service receiving threshold alerts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets: dict[str, Budget] = {
            budget.id: budget for budget in budgets or ()
        }
        self._notifications = notifications
        self._logger = logger or get_app_logger()

    @property
    def budgets(self) -> list[Budget]:
        return list(self._budgets.values())

    def get_budget(self, budget_id: str) -> Budget | None:
        return self._budgets.get(budget_id)

    def create_budget(
        self,
        category: str,
        allocated_amount,
        period_type: BudgetPeriodType = BudgetPeriodType.MONTHLY,
        reference: datetime | None = None,
        transactions: Iterable[Transaction] = (),
    ) -> Budget:
        """Create a budget for the period containing ``reference``.

        Args:
            category: Category the budget tracks.
            allocated_amount: Amount allocated for the period.
            period_type: Weekly, monthly or yearly period.
            reference: Moment inside the period, defaults to now.
            transactions: Existing transactions counted towards spending.

        Returns:
            Budget: The stored budget.
        """
        start, end = budget_period_bounds(
            period_type, reference or datetime.now()
        )
        budget = recalculate_budget(
            Budget(
                category=category,
                allocated_amount=coerce_decimal(allocated_amount),
                start_date=start,
                end_date=end,
                period_type=period_type,
            ),
            transactions,
        )
        self._budgets[budget.id] = budget
        self._logger.info(
            f"Budget created: category={category}, "
            f"allocated={budget.allocated_amount}, period={period_type.value}"
        )
        return budget

    def add_budget(self, budget: Budget) -> None:
        self._budgets[budget.id] = budget

    def remove_budget(self, budget_id: str) -> bool:
        return self._budgets.pop(budget_id, None) is not None

    def update_allocation(self, budget_id: str, allocated_amount) -> Budget:
        """Change a budget's allocation, keeping its spending.

        Raises:
            KeyError: If no budget has ``budget_id``.
        """
        budget = self._budgets[budget_id]
        updated = replace(
            budget, allocated_amount=coerce_decimal(allocated_amount)
        )
        self._store(budget, updated)
        return updated

    def recalculate(self, transactions: Iterable[Transaction]) -> None:
        """Recompute every budget's spending from ``transactions``."""
        transactions = list(transactions)
        for budget in self.budgets:
            self._store(budget, recalculate_budget(budget, transactions))

    def on_transaction_added(self, transaction: Transaction) -> None:
        for budget in self.budgets:
            self._store(budget, apply_transaction_to_budget(budget, transaction))

    def on_transaction_removed(self, transaction: Transaction) -> None:
        for budget in self.budgets:
            self._store(
                budget,
                apply_transaction_to_budget(budget, transaction, remove=True),
            )

    def on_transaction_updated(
        self,
        previous: Transaction,
        current: Transaction,
    ) -> None:
        self.on_transaction_removed(previous)
        self.on_transaction_added(current)

    def progress(self, budget_id: str) -> BudgetProgress:
        budget = self._budgets[budget_id]
        return compute_budget_progress(
            budget.spent_amount, budget.allocated_amount
        )

    def _store(self, before: Budget, after: Budget) -> None:
        self._budgets[after.id] = after
        if after is before:
            return
        old_status = compute_budget_progress(
            before.spent_amount, before.allocated_amount
        ).status
        new_status = compute_budget_progress(
            after.spent_amount, after.allocated_amount
        ).status
        if _SEVERITY[new_status] <= _SEVERITY[old_status]:
            return
        percentage = safe_divide(after.spent_amount, after.allocated_amount)
        self._logger.warning(
            f"Budget threshold crossed: category={after.category}, "
            f"status={new_status.value}"
        )
        if self._notifications is not None:
            self._notifications.notify_budget_alert(
                after.category, percentage * Decimal("100")
            )


__all__ = ["BudgetTracker"]
