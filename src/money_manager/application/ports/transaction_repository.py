"""Port for persisting and querying transactions."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from money_manager.domain.models.transactions import (
    Transaction,
    TransactionCategory,
    TransactionType,
)


class TransactionRepositoryPort(Protocol):
    """Asynchronous CRUD and query access to transactions.

    Failures are raised as ``TransactionError``.
    """

    async def create_transaction(self, transaction: Transaction) -> Transaction:
        """Validate and store a new transaction."""

    async def fetch_transactions(self) -> list[Transaction]:
        """Return every transaction, newest first."""

    async def fetch_transaction(self, transaction_id: str) -> Transaction:
        """Return one transaction or raise ``not_found``."""

    async def update_transaction(self, transaction: Transaction) -> Transaction:
        """Validate and replace an existing transaction."""

    async def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction or raise ``not_found``."""

    async def fetch_by_category(
        self, category: TransactionCategory
    ) -> list[Transaction]:
        """Return transactions filed under ``category``."""

    async def fetch_by_date_range(
        self, start: datetime, end: datetime
    ) -> list[Transaction]:
        """Return transactions dated within ``[start, end]``."""

    async def fetch_by_type(
        self, transaction_type: TransactionType
    ) -> list[Transaction]:
        """Return income or expense transactions."""

    async def total_for_category(
        self,
        category: TransactionCategory,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        """Sum the amounts of a category within ``[start, end]``."""

    async def total_for_type(
        self,
        transaction_type: TransactionType,
        start: datetime,
        end: datetime,
    ) -> Decimal:
        """Sum the amounts of a type within ``[start, end]``."""


__all__ = ["TransactionRepositoryPort"]
