"""Use case to compute the balance-over-time series."""

from datetime import datetime
from decimal import Decimal

from money_manager.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from money_manager.domain.models.balance import BalancePoint, BalanceWindow
from money_manager.domain.services.balance import build_balance_series
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.decimal_utils import coerce_decimal


class GetBalanceSeriesUseCase:
    """Replay stored transactions into a sampled balance series."""

    def __init__(
        self,
        repository: TransactionRepositoryPort,
        starting_balance=Decimal("0"),
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing transactions.
            starting_balance: Balance before the first transaction.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._starting_balance = coerce_decimal(starting_balance)
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        window: BalanceWindow = BalanceWindow.ONE_MONTH,
        now: datetime | None = None,
    ) -> list[BalancePoint]:
        transactions = await self._repository.fetch_transactions()
        points = build_balance_series(
            self._starting_balance, transactions, window, now=now
        )
        self._logger.info(
            f"Balance series computed: window={window.value}, "
            f"points={len(points)}"
        )
        return points


__all__ = ["GetBalanceSeriesUseCase"]
