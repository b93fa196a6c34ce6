"""Tests for the RecordTransactionUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from money_manager.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from money_manager.domain.errors import ErrorKind, TransactionError
from money_manager.domain.models.transactions import (
    Transaction,
    TransactionCategory,
)

NOW = datetime(2024, 5, 15, 12, 0, 0)


def _repository() -> AsyncMock:
    repository = AsyncMock()
    repository.create_transaction.side_effect = lambda transaction: transaction
    repository.update_transaction.side_effect = lambda transaction: transaction
    return repository


@pytest.mark.asyncio
async def test_execute_stores_and_publishes(fake_logger) -> None:
    """A valid transaction reaches the repository, budgets and feed."""
    repository = _repository()
    tracker = MagicMock()
    notifications = MagicMock()
    use_case = RecordTransactionUseCase(
        repository, tracker, notifications, logger=fake_logger
    )

    result = await use_case.execute(
        "  Coffee ", "4.50", False, "Leisure", date=NOW
    )

    assert result.is_success
    assert result.errors == ()
    stored = result.transaction
    assert stored.title == "Coffee"
    assert stored.amount == Decimal("4.50")
    assert stored.category is TransactionCategory.LEISURE
    repository.create_transaction.assert_awaited_once_with(stored)
    tracker.on_transaction_added.assert_called_once_with(stored)
    notifications.notify_new_transaction.assert_called_once_with(stored)


@pytest.mark.asyncio
async def test_execute_rejects_invalid_input(fake_logger) -> None:
    repository = _repository()
    use_case = RecordTransactionUseCase(repository, logger=fake_logger)

    result = await use_case.execute("", 0, True, "")

    assert not result.is_success
    assert result.errors == (
        "Amount must be greater than 0",
        "Title is required",
        "Category is required",
    )
    repository.create_transaction.assert_not_awaited()
    fake_logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_execute_blocks_amounts_over_limit(fake_logger) -> None:
    use_case = RecordTransactionUseCase(_repository(), logger=fake_logger)

    result = await use_case.execute("Car", "1000001", False, "bills")

    assert result.errors == ("Amount seems too large. Please verify the amount.",)


@pytest.mark.asyncio
async def test_repository_errors_propagate(fake_logger) -> None:
    repository = _repository()
    repository.create_transaction.side_effect = TransactionError(
        ErrorKind.SAVE_FAILED
    )
    notifications = MagicMock()
    use_case = RecordTransactionUseCase(
        repository, notifications=notifications, logger=fake_logger
    )

    with pytest.raises(TransactionError) as excinfo:
        await use_case.execute("Rent", 900, False, "bills", date=NOW)

    assert excinfo.value.kind is ErrorKind.SAVE_FAILED
    notifications.notify_new_transaction.assert_not_called()


@pytest.mark.asyncio
async def test_update_and_delete_keep_budgets_in_sync(fake_logger) -> None:
    previous = Transaction(
        title="Rent",
        amount=Decimal("900"),
        is_income=False,
        category=TransactionCategory.BILLS,
        date=NOW,
    )
    current = previous.with_changes(amount=Decimal("950"))
    repository = _repository()
    repository.fetch_transaction.return_value = previous
    tracker = MagicMock()
    use_case = RecordTransactionUseCase(repository, tracker, logger=fake_logger)

    updated = await use_case.update(current)
    removed = await use_case.delete(previous.id)

    assert updated.transaction is current
    tracker.on_transaction_updated.assert_called_once_with(previous, current)
    assert removed is previous
    repository.delete_transaction.assert_awaited_once_with(previous.id)
    tracker.on_transaction_removed.assert_called_once_with(previous)


@pytest.mark.asyncio
async def test_update_rejects_invalid_transaction(fake_logger) -> None:
    repository = _repository()
    use_case = RecordTransactionUseCase(repository, logger=fake_logger)
    invalid = Transaction(
        title=" ",
        amount=Decimal("5"),
        is_income=False,
        category=TransactionCategory.OTHER,
        date=NOW,
    )

    result = await use_case.update(invalid)

    assert result.errors == ("Title is required",)
    repository.update_transaction.assert_not_awaited()
