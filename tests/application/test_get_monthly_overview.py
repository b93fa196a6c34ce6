"""Tests for the GetMonthlyOverviewUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from money_manager.application.use_cases.get_monthly_overview import (
    GetMonthlyOverviewUseCase,
)
from money_manager.domain.models.transactions import (
    Transaction,
    TransactionCategory,
)


def _tx(amount, date, is_income=False, category=TransactionCategory.BILLS):
    return Transaction(
        title="Entry",
        amount=Decimal(amount),
        is_income=is_income,
        category=category,
        date=date,
    )


@pytest.fixture
def repository() -> AsyncMock:
    repository = AsyncMock()
    repository.fetch_transactions.return_value = [
        _tx("2500", datetime(2024, 5, 1), True, TransactionCategory.INCOME),
        _tx("900", datetime(2024, 5, 2)),
        _tx("100", datetime(2024, 5, 9), category=TransactionCategory.LEISURE),
        _tx("2000", datetime(2024, 4, 1), True, TransactionCategory.INCOME),
        _tx("1000", datetime(2024, 4, 2)),
    ]
    return repository


@pytest.mark.asyncio
async def test_execute_builds_overview_and_categories(
    repository, fake_logger, now
) -> None:
    use_case = GetMonthlyOverviewUseCase(repository, logger=fake_logger)

    report = await use_case.execute(now=now)

    assert report.overview.current_month.net == Decimal("1500")
    assert report.overview.previous_month.net == Decimal("1000")
    assert report.overview.month_over_month_change == Decimal("50")
    assert [row.category for row in report.categories] == ["bills", "leisure"]
    assert report.categories[0].percentage == Decimal("90")


@pytest.mark.asyncio
async def test_summarize_period(repository, fake_logger) -> None:
    use_case = GetMonthlyOverviewUseCase(repository, logger=fake_logger)

    summary = await use_case.summarize(datetime(2024, 5, 1), datetime(2024, 6, 1))

    assert summary.income == Decimal("2500")
    assert summary.expenses == Decimal("1000")
    assert summary.income_change_percentage == Decimal("25")
    assert summary.expense_change_percentage == Decimal("0")
