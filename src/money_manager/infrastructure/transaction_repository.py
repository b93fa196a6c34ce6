"""SQLAlchemy-backed repository for transactions."""

import asyncio
from datetime import datetime
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from money_manager.application.ports.database import DatabaseEnginePort
from money_manager.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from money_manager.domain.constants import MAX_TITLE_LENGTH
from money_manager.domain.errors import ErrorKind, TransactionError
from money_manager.domain.models.transactions import (
    Transaction,
    TransactionCategory,
    TransactionType,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.decimal_utils import ZERO, coerce_decimal

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    subtitle TEXT NOT NULL DEFAULT '',
    amount TEXT NOT NULL,
    is_income INTEGER NOT NULL,
    category TEXT NOT NULL,
    date TEXT NOT NULL,
    linked_goal_id TEXT
)
"""

CREATE_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_transactions_date ON transactions (date)
"""

SELECT_COLUMNS = """
SELECT id, title, subtitle, amount, is_income, category, date, linked_goal_id
FROM transactions
"""

ORDER_NEWEST_FIRST = " ORDER BY date DESC, id"


def _format_date(value: datetime) -> str:
    return value.isoformat(timespec="microseconds")


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository backed by SQLAlchemy for transactions.

    Each public coroutine runs its blocking database work on a worker thread.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare(self) -> None:
        """Create the transactions table and its index if needed."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(text(CREATE_TABLE_SQL))
            conn.execute(text(CREATE_INDEX_SQL))

    async def create_transaction(self, transaction: Transaction) -> Transaction:
        self._validate(transaction)
        return await asyncio.to_thread(self._insert, transaction)

    async def fetch_transactions(self) -> list[Transaction]:
        return await asyncio.to_thread(self._select, "", {})

    async def fetch_transaction(self, transaction_id: str) -> Transaction:
        rows = await asyncio.to_thread(
            self._select, " WHERE id = :id", {"id": transaction_id}
        )
        if not rows:
            raise TransactionError(ErrorKind.NOT_FOUND)
        return rows[0]

    async def update_transaction(self, transaction: Transaction) -> Transaction:
        self._validate(transaction)
        return await asyncio.to_thread(self._update, transaction)

    async def delete_transaction(self, transaction_id: str) -> None:
        await asyncio.to_thread(self._delete, transaction_id)

    async def fetch_by_category(
        self, category: TransactionCategory
    ) -> list[Transaction]:
        return await asyncio.to_thread(
            self._select,
            " WHERE category = :category",
            {"category": TransactionCategory.from_value(category).value},
        )

    async def fetch_by_date_range(
        self, start: datetime, end: datetime
    ) -> list[Transaction]:
        return await asyncio.to_thread(
            self._select,
            " WHERE date >= :start AND date <= :end",
            {"start": _format_date(start), "end": _format_date(end)},
        )

    async def fetch_by_type(
        self, transaction_type: TransactionType
    ) -> list[Transaction]:
        return await asyncio.to_thread(
            self._select,
            " WHERE is_income = :is_income",
            {"is_income": int(transaction_type is TransactionType.INCOME)},
        )

    async def total_for_category(
        self,
        category: TransactionCategory,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        rows = await asyncio.to_thread(
            self._select,
            " WHERE category = :category AND date >= :start AND date <= :end",
            {
                "category": TransactionCategory.from_value(category).value,
                "start": _format_date(start),
                "end": _format_date(end),
            },
        )
        return sum((row.amount for row in rows), ZERO)

    async def total_for_type(
        self,
        transaction_type: TransactionType,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        rows = await asyncio.to_thread(
            self._select,
            " WHERE is_income = :is_income AND date >= :start AND date <= :end",
            {
                "is_income": int(transaction_type is TransactionType.INCOME),
                "start": _format_date(start),
                "end": _format_date(end),
            },
        )
        return sum((row.amount for row in rows), ZERO)

    @staticmethod
    def _validate(transaction: Transaction) -> None:
        """Reject a transaction before any write.

        Raises:
            TransactionError: With the first failed rule's kind.
        """
        if coerce_decimal(transaction.amount) <= 0:
            raise TransactionError(ErrorKind.INVALID_AMOUNT)
        if not getattr(transaction.category, "value", transaction.category):
            raise TransactionError(ErrorKind.INVALID_CATEGORY)
        title = transaction.title.strip()
        if not title or len(transaction.title) > MAX_TITLE_LENGTH:
            raise TransactionError(ErrorKind.INVALID_DESCRIPTION)

    @staticmethod
    def _params(transaction: Transaction) -> dict:
        return {
            "id": transaction.id,
            "title": transaction.title,
            "subtitle": transaction.subtitle,
            "amount": str(coerce_decimal(transaction.amount)),
            "is_income": int(transaction.is_income),
            "category": TransactionCategory.from_value(
                transaction.category
            ).value,
            "date": _format_date(transaction.date),
            "linked_goal_id": transaction.linked_goal_id,
        }

    def _insert(self, transaction: Transaction) -> Transaction:
        query = text(
            """
            INSERT INTO transactions (
                id, title, subtitle, amount, is_income, category, date,
                linked_goal_id
            )
            VALUES (
                :id, :title, :subtitle, :amount, :is_income, :category, :date,
                :linked_goal_id
            )
            """
        )
        try:
            with self._db_port.get_engine().begin() as conn:
                conn.execute(query, self._params(transaction))
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to save transaction {transaction.id}: {exc}")
            raise TransactionError(ErrorKind.SAVE_FAILED) from exc
        self._logger.info(f"Saved transaction {transaction.id}")
        return transaction

    def _update(self, transaction: Transaction) -> Transaction:
        query = text(
            """
            UPDATE transactions
            SET title = :title,
                subtitle = :subtitle,
                amount = :amount,
                is_income = :is_income,
                category = :category,
                date = :date,
                linked_goal_id = :linked_goal_id
            WHERE id = :id
            """
        )
        try:
            with self._db_port.get_engine().begin() as conn:
                result = conn.execute(query, self._params(transaction))
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Failed to update transaction {transaction.id}: {exc}"
            )
            raise TransactionError(ErrorKind.UPDATE_FAILED) from exc
        if result.rowcount == 0:
            raise TransactionError(ErrorKind.NOT_FOUND)
        return transaction

    def _delete(self, transaction_id: str) -> None:
        query = text("DELETE FROM transactions WHERE id = :id")
        try:
            with self._db_port.get_engine().begin() as conn:
                result = conn.execute(query, {"id": transaction_id})
        except SQLAlchemyError as exc:
            self._logger.error(
                f"Failed to delete transaction {transaction_id}: {exc}"
            )
            raise TransactionError(ErrorKind.DELETE_FAILED) from exc
        if result.rowcount == 0:
            raise TransactionError(ErrorKind.NOT_FOUND)

    def _select(self, where: str, params: dict) -> list[Transaction]:
        query = text(SELECT_COLUMNS + where + ORDER_NEWEST_FIRST)
        try:
            with self._db_port.get_engine().connect() as conn:
                rows = conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to fetch transactions: {exc}")
            raise TransactionError(ErrorKind.FETCH_FAILED) from exc
        return [
            Transaction(
                id=row.id,
                title=row.title,
                subtitle=row.subtitle or "",
                amount=coerce_decimal(row.amount),
                is_income=bool(row.is_income),
                category=TransactionCategory.from_value(row.category),
                date=datetime.fromisoformat(row.date),
                linked_goal_id=row.linked_goal_id,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyTransactionRepository"]
