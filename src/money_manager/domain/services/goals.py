"""Domain services for savings goal milestones."""

from collections.abc import Iterable
from decimal import Decimal

from money_manager.domain.constants import GOAL_MILESTONES
from money_manager.domain.models.goals import Goal


def crossed_milestones(
    before: Goal,
    after: Goal,
    milestones: Iterable[int] = GOAL_MILESTONES,
) -> list[int]:
    """Return the milestone percentages reached between two goal states.

    A milestone counts when the earlier state was below it and the later
    state is at or above it.
    """
    previous = before.progress_percentage * 100
    current = after.progress_percentage * 100
    return [
        milestone
        for milestone in milestones
        if previous < Decimal(milestone) <= current
    ]


def total_saved(goals: Iterable[Goal]) -> Decimal:
    return sum((goal.saved_amount for goal in goals), Decimal("0"))


__all__ = ["crossed_milestones", "total_saved"]
