"""SQLAlchemy-backed repository for savings goals."""

import asyncio
import threading
from collections.abc import Callable
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from money_manager.application.ports.database import DatabaseEnginePort
from money_manager.application.ports.goal_repository import GoalRepositoryPort
from money_manager.domain.constants import MAX_GOAL_NAME_LENGTH
from money_manager.domain.errors import ErrorKind, GoalError
from money_manager.domain.models.goals import Goal
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.decimal_utils import coerce_decimal

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS goals (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    target_amount TEXT NOT NULL,
    saved_amount TEXT NOT NULL,
    target_date TEXT,
    notes TEXT,
    icon_name TEXT NOT NULL,
    icon_color TEXT NOT NULL,
    is_completed INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL
)
"""

SELECT_COLUMNS = """
SELECT id, name, target_amount, saved_amount, target_date, notes, icon_name,
       icon_color, is_completed, created_at
FROM goals
"""

ORDER_NEWEST_FIRST = " ORDER BY created_at DESC, id"

UPDATE_SQL = """
UPDATE goals
SET name = :name,
    target_amount = :target_amount,
    saved_amount = :saved_amount,
    target_date = :target_date,
    notes = :notes,
    icon_name = :icon_name,
    icon_color = :icon_color,
    is_completed = :is_completed
WHERE id = :id
"""


def _format_date(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat(timespec="microseconds")


def _parse_date(value: str | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromisoformat(value)


class SqlAlchemyGoalRepository(GoalRepositoryPort):
    """Repository backed by SQLAlchemy for savings goals.

    Updates hold a per-repository lock across the read and the write,
    so concurrent updates of the same goal are serialized.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._write_lock = threading.Lock()

    def prepare(self) -> None:
        """Create the goals table if needed."""
        with self._db_port.get_engine().begin() as conn:
            conn.execute(text(CREATE_TABLE_SQL))

    async def create_goal(self, goal: Goal) -> Goal:
        self._validate(goal)
        return await asyncio.to_thread(self._insert, goal)

    async def fetch_goals(self) -> list[Goal]:
        return await asyncio.to_thread(self._select, "", {})

    async def fetch_goal(self, goal_id: str) -> Goal:
        rows = await asyncio.to_thread(
            self._select, " WHERE id = :id", {"id": goal_id}
        )
        if not rows:
            raise GoalError(ErrorKind.NOT_FOUND)
        return rows[0]

    async def update_goal(self, goal: Goal) -> Goal:
        self._validate(goal)
        return await asyncio.to_thread(
            self._modify, goal.id, lambda _current: goal
        )

    async def delete_goal(self, goal_id: str) -> None:
        await asyncio.to_thread(self._delete, goal_id)

    async def fetch_active_goals(self) -> list[Goal]:
        return await asyncio.to_thread(
            self._select, " WHERE is_completed = 0", {}
        )

    async def fetch_completed_goals(self) -> list[Goal]:
        return await asyncio.to_thread(
            self._select, " WHERE is_completed = 1", {}
        )

    async def update_goal_progress(self, goal_id: str, amount) -> Goal:
        """Add ``amount`` to a goal's savings.

        Raises:
            GoalError: ``invalid_progress_amount`` for negative amounts,
                ``not_found`` for unknown ids.
        """
        value = coerce_decimal(amount)
        if value < 0:
            raise GoalError(ErrorKind.INVALID_PROGRESS_AMOUNT)
        return await asyncio.to_thread(
            self._modify, goal_id, lambda current: current.add_progress(value)
        )

    async def mark_goal_completed(self, goal_id: str) -> Goal:
        return await asyncio.to_thread(
            self._modify, goal_id, lambda current: current.mark_completed()
        )

    @staticmethod
    def _validate(goal: Goal) -> None:
        """Reject a goal before any write.

        Raises:
            GoalError: With the first failed rule's kind.
        """
        if not goal.name.strip() or len(goal.name) > MAX_GOAL_NAME_LENGTH:
            raise GoalError(ErrorKind.INVALID_NAME)
        if coerce_decimal(goal.target_amount) <= 0:
            raise GoalError(ErrorKind.INVALID_TARGET_AMOUNT)
        if goal.target_date is not None and goal.target_date <= goal.created_at:
            raise GoalError(ErrorKind.INVALID_TARGET_DATE)

    @staticmethod
    def _params(goal: Goal) -> dict:
        return {
            "id": goal.id,
            "name": goal.name.strip(),
            "target_amount": str(coerce_decimal(goal.target_amount)),
            "saved_amount": str(coerce_decimal(goal.saved_amount)),
            "target_date": _format_date(goal.target_date),
            "notes": goal.notes,
            "icon_name": goal.icon_name,
            "icon_color": goal.icon_color,
            "is_completed": int(goal.is_completed),
            "created_at": _format_date(goal.created_at),
        }

    def _insert(self, goal: Goal) -> Goal:
        query = text(
            """
            INSERT INTO goals (
                id, name, target_amount, saved_amount, target_date, notes,
                icon_name, icon_color, is_completed, created_at
            )
            VALUES (
                :id, :name, :target_amount, :saved_amount, :target_date,
                :notes, :icon_name, :icon_color, :is_completed, :created_at
            )
            """
        )
        try:
            with self._db_port.get_engine().begin() as conn:
                conn.execute(query, self._params(goal))
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to save goal {goal.id}: {exc}")
            raise GoalError(ErrorKind.SAVE_FAILED) from exc
        self._logger.info(f"Saved goal {goal.id}")
        return goal

    def _modify(self, goal_id: str, change: Callable[[Goal], Goal]) -> Goal:
        """Apply ``change`` to the stored goal within one transaction."""
        try:
            with self._write_lock, self._db_port.get_engine().begin() as conn:
                current = self._fetch_one(conn, goal_id)
                if current is None:
                    raise GoalError(ErrorKind.NOT_FOUND)
                updated = change(current)
                conn.execute(text(UPDATE_SQL), self._params(updated))
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to update goal {goal_id}: {exc}")
            raise GoalError(ErrorKind.UPDATE_FAILED) from exc
        return updated

    def _delete(self, goal_id: str) -> None:
        query = text("DELETE FROM goals WHERE id = :id")
        try:
            with self._db_port.get_engine().begin() as conn:
                result = conn.execute(query, {"id": goal_id})
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to delete goal {goal_id}: {exc}")
            raise GoalError(ErrorKind.DELETE_FAILED) from exc
        if result.rowcount == 0:
            raise GoalError(ErrorKind.NOT_FOUND)

    def _fetch_one(self, conn: Connection, goal_id: str) -> Goal | None:
        row = conn.execute(
            text(SELECT_COLUMNS + " WHERE id = :id"), {"id": goal_id}
        ).first()
        if row is None:
            return None
        return self._to_goal(row)

    def _select(self, where: str, params: dict) -> list[Goal]:
        query = text(SELECT_COLUMNS + where + ORDER_NEWEST_FIRST)
        try:
            with self._db_port.get_engine().connect() as conn:
                rows = conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to fetch goals: {exc}")
            raise GoalError(ErrorKind.FETCH_FAILED) from exc
        return [self._to_goal(row) for row in rows]

    @staticmethod
    def _to_goal(row) -> Goal:
        return Goal(
            id=row.id,
            name=row.name,
            target_amount=coerce_decimal(row.target_amount),
            saved_amount=coerce_decimal(row.saved_amount),
            target_date=_parse_date(row.target_date),
            notes=row.notes,
            icon_name=row.icon_name,
            icon_color=row.icon_color,
            is_completed=bool(row.is_completed),
            created_at=_parse_date(row.created_at),
        )


__all__ = ["SqlAlchemyGoalRepository"]
