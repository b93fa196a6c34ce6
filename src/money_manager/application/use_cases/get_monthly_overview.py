"""Use case to summarize monthly income and spending."""

from dataclasses import dataclass
from datetime import datetime

from money_manager.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from money_manager.domain.models.overview import (
    CategorySpending,
    MonthlyOverview,
    PeriodSummary,
)
from money_manager.domain.services.overview import (
    build_monthly_overview,
    spending_by_category,
    summarize_period,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.dates import add_months, start_of_month


@dataclass(frozen=True)
class OverviewReport:
    """Monthly comparison and the current month's category split."""

    overview: MonthlyOverview
    categories: list[CategorySpending]


class GetMonthlyOverviewUseCase:
    """Aggregate stored transactions into overview figures."""

    def __init__(
        self,
        repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    async def execute(self, now: datetime | None = None) -> OverviewReport:
        """Return this month versus last month, with category spending.

        Args:
            now: Reference time selecting the current month.

        Returns:
            OverviewReport: Monthly overview and current-month categories.
        """
        now = now or datetime.now()
        transactions = await self._repository.fetch_transactions()
        overview = build_monthly_overview(transactions, now=now)
        month_start = start_of_month(now)
        categories = spending_by_category(
            transactions, month_start, add_months(month_start, 1)
        )
        self._logger.info(
            f"Monthly overview computed: income={overview.current_month.income}, "
            f"expenses={overview.current_month.expenses}"
        )
        return OverviewReport(overview=overview, categories=categories)

    async def summarize(self, start: datetime, end: datetime) -> PeriodSummary:
        transactions = await self._repository.fetch_transactions()
        return summarize_period(transactions, start, end)


__all__ = ["GetMonthlyOverviewUseCase", "OverviewReport"]
