"""Tests for the SQLAlchemy transaction repository."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from money_manager.domain.errors import ErrorKind, TransactionError
from money_manager.domain.models.transactions import (
    Transaction,
    TransactionCategory,
    TransactionType,
)
from money_manager.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


@pytest.fixture
def repository(sqlite_adapter, fake_logger) -> SqlAlchemyTransactionRepository:
    repo = SqlAlchemyTransactionRepository(sqlite_adapter, logger=fake_logger)
    repo.prepare()
    return repo


def _tx(title, amount, is_income, category, date, **kwargs) -> Transaction:
    return Transaction(
        title=title,
        amount=Decimal(amount),
        is_income=is_income,
        category=category,
        date=date,
        **kwargs,
    )


@pytest.fixture
def seeded(repository) -> list[Transaction]:
    return [
        _tx("Salary", "3000.00", True, TransactionCategory.INCOME,
            datetime(2024, 5, 1, 9)),
        _tx("Rent", "1200.50", False, TransactionCategory.BILLS,
            datetime(2024, 5, 3, 8), subtitle="Recurring monthly"),
        _tx("Cinema", "18.25", False, TransactionCategory.LEISURE,
            datetime(2024, 5, 10, 20)),
        _tx("Power", "80", False, TransactionCategory.BILLS,
            datetime(2024, 4, 28, 12), linked_goal_id="goal-1"),
    ]


@pytest.mark.asyncio
async def test_create_and_fetch_round_trip(repository, seeded) -> None:
    """Stored rows come back newest first with exact amounts."""
    for transaction in seeded:
        await repository.create_transaction(transaction)

    fetched = await repository.fetch_transactions()

    assert [tx.title for tx in fetched] == ["Cinema", "Rent", "Salary", "Power"]
    assert fetched[1] == seeded[1]
    assert fetched[3].linked_goal_id == "goal-1"
    assert await repository.fetch_transaction(seeded[0].id) == seeded[0]


@pytest.mark.asyncio
async def test_queries_filter_rows(repository, seeded) -> None:
    for transaction in seeded:
        await repository.create_transaction(transaction)

    bills = await repository.fetch_by_category(TransactionCategory.BILLS)
    expenses = await repository.fetch_by_type(TransactionType.EXPENSE)
    may = await repository.fetch_by_date_range(
        datetime(2024, 5, 1, 9), datetime(2024, 5, 3, 8)
    )

    assert [tx.title for tx in bills] == ["Rent", "Power"]
    assert len(expenses) == 3
    assert [tx.title for tx in may] == ["Rent", "Salary"]


@pytest.mark.asyncio
async def test_totals(repository, seeded) -> None:
    for transaction in seeded:
        await repository.create_transaction(transaction)
    start, end = datetime(2024, 5, 1), datetime(2024, 5, 31, 23, 59)

    bills = await repository.total_for_category(
        TransactionCategory.BILLS, start, end
    )
    expenses = await repository.total_for_type(
        TransactionType.EXPENSE, start, end
    )
    income = await repository.total_for_type(
        TransactionType.INCOME, datetime(2023, 1, 1), datetime(2023, 2, 1)
    )

    assert bills == Decimal("1200.50")
    assert expenses == Decimal("1218.75")
    assert income == Decimal("0")


@pytest.mark.asyncio
async def test_update_and_delete(repository, seeded) -> None:
    rent = seeded[1]
    await repository.create_transaction(rent)

    updated = rent.with_changes(amount=Decimal("1250"), title="Rent (new)")
    await repository.update_transaction(updated)

    assert await repository.fetch_transaction(rent.id) == updated

    await repository.delete_transaction(rent.id)

    assert await repository.fetch_transactions() == []


@pytest.mark.asyncio
async def test_missing_rows_raise_not_found(repository, seeded) -> None:
    with pytest.raises(TransactionError) as fetch_error:
        await repository.fetch_transaction("missing")
    with pytest.raises(TransactionError) as update_error:
        await repository.update_transaction(seeded[0])
    with pytest.raises(TransactionError) as delete_error:
        await repository.delete_transaction("missing")

    assert fetch_error.value.kind is ErrorKind.NOT_FOUND
    assert update_error.value.kind is ErrorKind.NOT_FOUND
    assert delete_error.value.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("changes", "kind"),
    [
        ({"amount": Decimal("0")}, ErrorKind.INVALID_AMOUNT),
        ({"title": "   "}, ErrorKind.INVALID_DESCRIPTION),
        ({"title": "x" * 101}, ErrorKind.INVALID_DESCRIPTION),
        ({"category": ""}, ErrorKind.INVALID_CATEGORY),
    ],
)
async def test_invalid_transactions_are_rejected(
    repository, seeded, changes, kind
) -> None:
    """Validation runs before any write."""
    invalid = seeded[0].with_changes(**changes)

    with pytest.raises(TransactionError) as excinfo:
        await repository.create_transaction(invalid)

    assert excinfo.value.kind is kind
    assert excinfo.value.is_validation_error
    assert await repository.fetch_transactions() == []


@pytest.mark.asyncio
async def test_database_failures_are_wrapped(fake_logger, seeded) -> None:
    engine = MagicMock()
    engine.begin.side_effect = OperationalError("INSERT", {}, Exception("locked"))
    engine.connect.side_effect = OperationalError("SELECT", {}, Exception("gone"))
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    repository = SqlAlchemyTransactionRepository(db_port, logger=fake_logger)

    with pytest.raises(TransactionError) as save_error:
        await repository.create_transaction(seeded[0])
    with pytest.raises(TransactionError) as fetch_error:
        await repository.fetch_transactions()

    assert save_error.value.kind is ErrorKind.SAVE_FAILED
    assert isinstance(save_error.value.__cause__, OperationalError)
    assert fetch_error.value.kind is ErrorKind.FETCH_FAILED
    assert fake_logger.error.call_count == 2
