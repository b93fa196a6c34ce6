"""Domain models for category budgets."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4


class BudgetPeriodType(str, Enum):
    """Length of a recurring budget allocation window."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ProgressStatus(str, Enum):
    """Severity bucket for a spending progress ratio."""

    ON_TRACK = "on_track"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class Budget:
    """Spending allocation for one category over ``[start_date, end_date)``.

    ``remaining_amount`` is derived so it always equals
    ``allocated_amount - spent_amount``; it goes negative when overspent.
    """

    category: str
    allocated_amount: Decimal
    start_date: datetime
    end_date: datetime
    period_type: BudgetPeriodType = BudgetPeriodType.MONTHLY
    spent_amount: Decimal = Decimal("0")
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def remaining_amount(self) -> Decimal:
        return self.allocated_amount - self.spent_amount

    @property
    def is_over_budget(self) -> bool:
        return self.spent_amount > self.allocated_amount

    def contains(self, moment: datetime) -> bool:
        """Return True when ``moment`` falls inside the budget period."""
        return self.start_date <= moment < self.end_date


@dataclass(frozen=True)
class BudgetProgress:
    """Progress of spending against an allocation.

    Attributes:
        percentage: ``spent / allocated`` capped at 1.
        is_over_budget: True when spending exceeds the allocation.
        status: Severity bucket derived from the two fields above.
    """

    percentage: Decimal
    is_over_budget: bool
    status: ProgressStatus


__all__ = ["BudgetPeriodType", "ProgressStatus", "Budget", "BudgetProgress"]
