"""Application use cases."""

from .budget_tracking import BudgetTracker
from .get_balance_series import GetBalanceSeriesUseCase
from .get_income_projection import (
    GetIncomeProjectionUseCase,
    IncomeProjectionReport,
)
from .get_monthly_overview import GetMonthlyOverviewUseCase, OverviewReport
from .record_transaction import (
    RecordTransactionResult,
    RecordTransactionUseCase,
)
from .update_goal_progress import UpdateGoalProgressUseCase

__all__ = [
    "BudgetTracker",
    "GetBalanceSeriesUseCase",
    "GetIncomeProjectionUseCase",
    "IncomeProjectionReport",
    "GetMonthlyOverviewUseCase",
    "OverviewReport",
    "RecordTransactionResult",
    "RecordTransactionUseCase",
    "UpdateGoalProgressUseCase",
]
