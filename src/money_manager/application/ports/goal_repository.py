"""Port for persisting and querying savings goals."""

from typing import Protocol

from money_manager.domain.models.goals import Goal


class GoalRepositoryPort(Protocol):
    """Asynchronous CRUD and progress access to goals.

    Failures are raised as ``GoalError``.
    """

    async def create_goal(self, goal: Goal) -> Goal:
        """Validate and store a new goal."""

    async def fetch_goals(self) -> list[Goal]:
        """Return every goal, newest first."""

    async def fetch_goal(self, goal_id: str) -> Goal:
        """Return one goal or raise ``not_found``."""

    async def update_goal(self, goal: Goal) -> Goal:
        """Validate and replace an existing goal."""

    async def delete_goal(self, goal_id: str) -> None:
        """Delete a goal or raise ``not_found``."""

    async def fetch_active_goals(self) -> list[Goal]:
        """Return goals that are not completed."""

    async def fetch_completed_goals(self) -> list[Goal]:
        """Return completed goals."""

    async def update_goal_progress(self, goal_id: str, amount) -> Goal:
        """Add ``amount`` to a goal's savings, clamping at the target."""

    async def mark_goal_completed(self, goal_id: str) -> Goal:
        """Set savings to the target and flag the goal as completed."""


__all__ = ["GoalRepositoryPort"]
