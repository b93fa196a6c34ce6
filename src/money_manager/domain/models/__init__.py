"""Domain models package."""

from .balance import BalancePoint, BalanceTrend, BalanceWindow
from .budgets import Budget, BudgetPeriodType, BudgetProgress, ProgressStatus
from .currency import CurrencyInfo
from .goals import Goal
from .loans import Loan, LoanStatus, LoanSummary, LoanType
from .notifications import (
    NotificationCategory,
    NotificationItem,
    NotificationType,
)
from .overview import (
    CategorySpending,
    ExpenseRate,
    MonthlyOverview,
    MonthTotals,
    PeriodSummary,
)
from .projections import (
    ExpenseBreakdown,
    ExpenseCategory,
    IncomeProjection,
    IncomeProjectionResult,
    ProjectionComparison,
    TimeScale,
    WorkSchedule,
)
from .transactions import Transaction, TransactionCategory, TransactionType

__all__ = [
    "Transaction",
    "TransactionCategory",
    "TransactionType",
    "Budget",
    "BudgetPeriodType",
    "BudgetProgress",
    "ProgressStatus",
    "Loan",
    "LoanStatus",
    "LoanSummary",
    "LoanType",
    "Goal",
    "NotificationCategory",
    "NotificationItem",
    "NotificationType",
    "TimeScale",
    "WorkSchedule",
    "ExpenseCategory",
    "ExpenseBreakdown",
    "IncomeProjection",
    "IncomeProjectionResult",
    "ProjectionComparison",
    "BalanceWindow",
    "BalancePoint",
    "BalanceTrend",
    "MonthTotals",
    "MonthlyOverview",
    "PeriodSummary",
    "CategorySpending",
    "ExpenseRate",
    "CurrencyInfo",
]
