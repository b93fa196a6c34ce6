"""Domain models for savings goals."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from money_manager.utils.decimal_utils import coerce_decimal, safe_divide


@dataclass(frozen=True)
class Goal:
    """A savings goal.

    ``saved_amount`` stays within ``[0, target_amount]`` through the progress
    operations; reaching the target flips ``is_completed``. Each operation
    returns a new instance.
    """

    name: str
    target_amount: Decimal
    target_date: datetime | None = None
    saved_amount: Decimal = Decimal("0")
    notes: str | None = None
    icon_name: str = "target"
    icon_color: str = "green"
    is_completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def progress_percentage(self) -> Decimal:
        """Return ``saved / target`` capped at 1 (0 for a zero target)."""
        return min(
            safe_divide(self.saved_amount, self.target_amount),
            Decimal("1"),
        )

    @property
    def remaining_amount(self) -> Decimal:
        return max(self.target_amount - self.saved_amount, Decimal("0"))

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.target_date is None:
            return False
        return not self.is_completed and self.target_date < (now or datetime.now())

    def days_remaining(self, now: datetime | None = None) -> int | None:
        if self.target_date is None:
            return None
        return (self.target_date - (now or datetime.now())).days

    def add_progress(self, amount) -> "Goal":
        """Return the goal after saving ``amount`` more.

        Non-positive amounts leave the goal unchanged. Reaching the target
        freezes ``saved_amount`` at the target and marks the goal completed.
        """
        value = coerce_decimal(amount)
        if value <= 0:
            return self
        saved = self.saved_amount + value
        if saved >= self.target_amount:
            return replace(
                self,
                saved_amount=self.target_amount,
                is_completed=True,
            )
        return replace(self, saved_amount=saved)

    def reset_progress(self) -> "Goal":
        return replace(self, saved_amount=Decimal("0"), is_completed=False)

    def update_target_amount(self, amount) -> "Goal":
        """Return the goal with a new target, re-evaluating completion.

        Non-positive targets leave the goal unchanged.
        """
        target = coerce_decimal(amount)
        if target <= 0:
            return self
        completed = self.saved_amount >= target
        saved = min(self.saved_amount, target)
        return replace(
            self,
            target_amount=target,
            saved_amount=saved,
            is_completed=completed,
        )

    def mark_completed(self) -> "Goal":
        return replace(
            self,
            saved_amount=self.target_amount,
            is_completed=True,
        )


__all__ = ["Goal"]
