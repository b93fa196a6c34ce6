"""Use case to validate, persist and publish transactions."""

from dataclasses import dataclass, field
from datetime import datetime

from money_manager.application.notifications import NotificationService
from money_manager.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from money_manager.application.use_cases.budget_tracking import BudgetTracker
from money_manager.domain.models.transactions import (
    Transaction,
    TransactionCategory,
)
from money_manager.domain.services.validation import validate_transaction
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class RecordTransactionResult:
    """Outcome of recording a transaction.

    Attributes:
        transaction: Stored transaction, or None when validation failed.
        errors: Validation messages; empty on success.
    """

    transaction: Transaction | None
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_success(self) -> bool:
        return self.transaction is not None


class RecordTransactionUseCase:
    """Record, edit and delete transactions.

    Budgets and notifications are updated only after the repository call
    succeeds; repository errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        repository: TransactionRepositoryPort,
        budget_tracker: BudgetTracker | None = None,
        notifications: NotificationService | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port persisting transactions.
            budget_tracker: Optional tracker kept in sync with changes.
            notifications: Optional service announcing new transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._budget_tracker = budget_tracker
        self._notifications = notifications
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        title: str,
        amount,
        is_income: bool,
        category: TransactionCategory | str,
        date: datetime | None = None,
        subtitle: str = "",
        linked_goal_id: str | None = None,
    ) -> RecordTransactionResult:
        """Validate and store a new transaction.

        Args:
            title: Transaction title.
            amount: Non-negative magnitude.
            is_income: True for income, False for expenses.
            category: Category or its value.
            date: When it happened, defaults to now.
            subtitle: Free text, e.g. ``"Recurring monthly"``.
            linked_goal_id: Goal credited by the transaction.

        Returns:
            RecordTransactionResult: Stored transaction or validation errors.
        """
        raw_category = getattr(category, "value", category) or ""
        validation = validate_transaction(amount, title, raw_category)
        if not validation.is_valid:
            self._logger.warning(
                f"Transaction rejected: {validation.error_message!r}"
            )
            return RecordTransactionResult(None, validation.errors)

        transaction = Transaction(
            title=title.strip(),
            amount=coerce_decimal(amount),
            is_income=is_income,
            category=TransactionCategory.from_value(raw_category),
            date=date or datetime.now(),
            subtitle=subtitle,
            linked_goal_id=linked_goal_id,
        )
        stored = await self._repository.create_transaction(transaction)
        self._logger.info(
            f"Transaction recorded: id={stored.id}, "
            f"type={stored.transaction_type.value}, amount={stored.amount}"
        )
        if self._budget_tracker is not None:
            self._budget_tracker.on_transaction_added(stored)
        if self._notifications is not None:
            self._notifications.notify_new_transaction(stored)
        return RecordTransactionResult(stored)

    async def update(self, transaction: Transaction) -> RecordTransactionResult:
        """Validate and replace an existing transaction."""
        validation = validate_transaction(
            transaction.amount,
            transaction.title,
            transaction.category.value,
        )
        if not validation.is_valid:
            return RecordTransactionResult(None, validation.errors)
        previous = await self._repository.fetch_transaction(transaction.id)
        stored = await self._repository.update_transaction(transaction)
        if self._budget_tracker is not None:
            self._budget_tracker.on_transaction_updated(previous, stored)
        self._logger.info(f"Transaction updated: id={stored.id}")
        return RecordTransactionResult(stored)

    async def delete(self, transaction_id: str) -> Transaction:
        """Delete a transaction and return the removed record."""
        previous = await self._repository.fetch_transaction(transaction_id)
        await self._repository.delete_transaction(transaction_id)
        if self._budget_tracker is not None:
            self._budget_tracker.on_transaction_removed(previous)
        self._logger.info(f"Transaction deleted: id={transaction_id}")
        return previous


__all__ = ["RecordTransactionUseCase", "RecordTransactionResult"]
