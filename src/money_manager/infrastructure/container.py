"""Composition root for wiring infrastructure adapters."""

from money_manager.application.error_handler import ErrorHandler
from money_manager.application.notifications import NotificationService
from money_manager.application.ports.database import DatabaseEnginePort
from money_manager.application.ports.goal_repository import GoalRepositoryPort
from money_manager.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from money_manager.application.use_cases.budget_tracking import BudgetTracker
from money_manager.application.use_cases.get_balance_series import (
    GetBalanceSeriesUseCase,
)
from money_manager.application.use_cases.get_income_projection import (
    GetIncomeProjectionUseCase,
)
from money_manager.application.use_cases.get_monthly_overview import (
    GetMonthlyOverviewUseCase,
)
from money_manager.application.use_cases.record_transaction import (
    RecordTransactionUseCase,
)
from money_manager.application.use_cases.update_goal_progress import (
    UpdateGoalProgressUseCase,
)
from money_manager.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from money_manager.infrastructure.goal_repository import (
    SqlAlchemyGoalRepository,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.infrastructure.settings import AppSettings
from money_manager.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def build_database_adapter(
    settings: AppSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    if settings is None:
        return SqlAlchemyDatabaseEngineAdapter()
    return SqlAlchemyDatabaseEngineAdapter(settings.db_url)


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db, logger=get_app_logger())


def build_goal_repository(
    db_port: DatabaseEnginePort | None = None,
) -> GoalRepositoryPort:
    """Return the goals repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyGoalRepository(resolved_db, logger=get_app_logger())


def build_notification_service(
    settings: AppSettings | None = None,
) -> NotificationService:
    """Return a notification service honoring the configured limit."""
    resolved = settings or AppSettings.from_env()
    return NotificationService(
        limit=resolved.notification_limit,
        logger=get_app_logger(),
        currency_code=resolved.currency_code,
    )


def build_error_handler() -> ErrorHandler:
    return ErrorHandler(logger=get_app_logger())


def build_record_transaction_use_case(
    repository: TransactionRepositoryPort,
    budget_tracker: BudgetTracker | None = None,
    notifications: NotificationService | None = None,
) -> RecordTransactionUseCase:
    """Return the record-transaction use case wired to its collaborators."""
    return RecordTransactionUseCase(
        repository,
        budget_tracker=budget_tracker,
        notifications=notifications,
        logger=get_app_logger(),
    )


def build_update_goal_progress_use_case(
    repository: GoalRepositoryPort,
    notifications: NotificationService | None = None,
) -> UpdateGoalProgressUseCase:
    return UpdateGoalProgressUseCase(
        repository,
        notifications=notifications,
        logger=get_app_logger(),
    )


def build_balance_series_use_case(
    repository: TransactionRepositoryPort,
    settings: AppSettings | None = None,
) -> GetBalanceSeriesUseCase:
    """Return the balance-series use case seeded with the starting balance."""
    resolved = settings or AppSettings.from_env()
    return GetBalanceSeriesUseCase(
        repository,
        starting_balance=resolved.starting_balance,
        logger=get_app_logger(),
    )


def build_income_projection_use_case(
    repository: TransactionRepositoryPort,
) -> GetIncomeProjectionUseCase:
    return GetIncomeProjectionUseCase(repository, logger=get_app_logger())


def build_monthly_overview_use_case(
    repository: TransactionRepositoryPort,
) -> GetMonthlyOverviewUseCase:
    return GetMonthlyOverviewUseCase(repository, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_transaction_repository",
    "build_goal_repository",
    "build_notification_service",
    "build_error_handler",
    "build_record_transaction_use_case",
    "build_update_goal_progress_use_case",
    "build_balance_series_use_case",
    "build_income_projection_use_case",
    "build_monthly_overview_use_case",
]
