"""Use case to project income against recorded expenses."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from money_manager.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from money_manager.domain.errors import AppError, AppErrorCategory
from money_manager.domain.models.overview import ExpenseRate
from money_manager.domain.models.projections import (
    ExpenseBreakdown,
    IncomeProjection,
    WorkSchedule,
)
from money_manager.domain.services.projections import (
    calculate_income_projections,
    calculate_required_hourly_rate,
    validate_projection_inputs,
)
from money_manager.domain.services.recurring import (
    expense_rate_table,
    monthly_expense_total,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class IncomeProjectionReport:
    """Projections for every time scale plus the figures behind them.

    Attributes:
        projections: One projection per time scale, hourly first.
        monthly_expenses: Monthly expense breakdown used for the projections.
        required_hourly_rate: Rate covering expenses, loans and savings.
        expense_rates: Monthly expenses expressed per hour through year.
    """

    projections: list[IncomeProjection]
    monthly_expenses: ExpenseBreakdown
    required_hourly_rate: Decimal
    expense_rates: list[ExpenseRate]


class GetIncomeProjectionUseCase:
    """Project income at every time scale against monthly expenses."""

    def __init__(
        self,
        repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        hourly_rate,
        projected_hourly_rate,
        work_schedule: WorkSchedule = WorkSchedule.FULL_TIME,
        monthly_loan_payments=Decimal("0"),
        target_savings=Decimal("0"),
        monthly_expenses: ExpenseBreakdown | None = None,
        now: datetime | None = None,
    ) -> IncomeProjectionReport:
        """Build the income projection report.

        When ``monthly_expenses`` is not given, recorded transactions are
        normalised to a monthly total and reported under "other".

        Args:
            hourly_rate: Current pay per hour.
            projected_hourly_rate: Pay per hour being considered.
            work_schedule: Schedule supplying the weekly hours.
            monthly_loan_payments: Loan payments per month.
            target_savings: Monthly savings to include in the required rate.
            monthly_expenses: Optional explicit expense breakdown.
            now: Reference time selecting the current month.

        Returns:
            IncomeProjectionReport: Projections and supporting figures.

        Raises:
            AppError: If the inputs are not usable for a projection.
        """
        if monthly_expenses is None:
            transactions = await self._repository.fetch_transactions()
            monthly_expenses = ExpenseBreakdown(
                other=monthly_expense_total(transactions, now=now)
            )
        if not validate_projection_inputs(
            hourly_rate, monthly_expenses, monthly_loan_payments
        ):
            self._logger.warning(
                f"Invalid projection inputs: hourly_rate={hourly_rate}, "
                f"loan_payments={monthly_loan_payments}"
            )
            raise AppError(
                AppErrorCategory.VALIDATION,
                "Please enter a valid hourly rate and non-negative expenses.",
            )
        projections = calculate_income_projections(
            hourly_rate,
            projected_hourly_rate,
            work_schedule,
            monthly_expenses,
            monthly_loan_payments,
        )
        required_rate = calculate_required_hourly_rate(
            monthly_expenses,
            monthly_loan_payments,
            work_schedule,
            target_savings,
        )
        self._logger.info(
            f"Income projection computed: monthly_expenses="
            f"{monthly_expenses.total_expenses}, required_rate={required_rate}"
        )
        return IncomeProjectionReport(
            projections=projections,
            monthly_expenses=monthly_expenses,
            required_hourly_rate=required_rate,
            expense_rates=expense_rate_table(
                monthly_expenses.total_expenses
                + coerce_decimal(monthly_loan_payments)
            ),
        )


__all__ = ["GetIncomeProjectionUseCase", "IncomeProjectionReport"]
