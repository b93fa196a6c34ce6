"""Use case to add savings to a goal and announce milestones."""

from money_manager.application.notifications import NotificationService
from money_manager.application.ports.goal_repository import GoalRepositoryPort
from money_manager.domain.models.goals import Goal
from money_manager.domain.services.goals import crossed_milestones
from money_manager.infrastructure.logging.logger import get_app_logger


class UpdateGoalProgressUseCase:
    """Add progress to a goal through the repository."""

    def __init__(
        self,
        repository: GoalRepositoryPort,
        notifications: NotificationService | None = None,
        logger=None,
    ) -> None:
        self._repository = repository
        self._notifications = notifications
        self._logger = logger or get_app_logger()

    async def execute(self, goal_id: str, amount) -> Goal:
        """Save ``amount`` towards a goal.

        One notification is published per milestone (25/50/75/100 %)
        crossed by this update.

        Args:
            goal_id: Goal identifier.
            amount: Amount saved; must not be negative.

        Returns:
            Goal: The updated goal.
        """
        before = await self._repository.fetch_goal(goal_id)
        after = await self._repository.update_goal_progress(goal_id, amount)
        milestones = crossed_milestones(before, after)
        self._logger.info(
            f"Goal progress updated: id={goal_id}, saved={after.saved_amount}, "
            f"milestones={milestones}"
        )
        if self._notifications is not None:
            for milestone in milestones:
                self._notifications.notify_goal_milestone(after, milestone)
        return after


__all__ = ["UpdateGoalProgressUseCase"]
