"""Tests for the SQLAlchemy goal repository."""

import asyncio
from datetime import datetime
from decimal import Decimal

import pytest

from money_manager.domain.errors import ErrorKind, GoalError
from money_manager.domain.models.goals import Goal
from money_manager.infrastructure.goal_repository import SqlAlchemyGoalRepository

CREATED = datetime(2024, 5, 15, 12, 0, 0)


@pytest.fixture
def repository(sqlite_adapter, fake_logger) -> SqlAlchemyGoalRepository:
    repo = SqlAlchemyGoalRepository(sqlite_adapter, logger=fake_logger)
    repo.prepare()
    return repo


def _goal(**overrides) -> Goal:
    values = {
        "name": "Vacation",
        "target_amount": Decimal("1000.00"),
        "target_date": datetime(2025, 1, 1),
        "created_at": CREATED,
        "notes": "Beach",
    }
    values.update(overrides)
    return Goal(**values)


@pytest.mark.asyncio
async def test_create_and_fetch(repository) -> None:
    goal = _goal()
    older = _goal(name="Laptop", target_date=None, created_at=datetime(2024, 1, 1))
    await repository.create_goal(goal)
    await repository.create_goal(older)

    goals = await repository.fetch_goals()

    assert [item.name for item in goals] == ["Vacation", "Laptop"]
    assert await repository.fetch_goal(goal.id) == goal
    assert goals[1].target_date is None


@pytest.mark.asyncio
async def test_update_goal_progress_clamps_and_completes(repository) -> None:
    """Progress never exceeds the target; reaching it completes the goal."""
    goal = await repository.create_goal(_goal())

    partial = await repository.update_goal_progress(goal.id, Decimal("250.50"))
    done = await repository.update_goal_progress(goal.id, 2000)

    assert partial.saved_amount == Decimal("250.50")
    assert done.saved_amount == Decimal("1000.00")
    assert done.is_completed is True
    stored = await repository.fetch_goal(goal.id)
    assert stored == done
    assert await repository.fetch_active_goals() == []
    assert await repository.fetch_completed_goals() == [done]


@pytest.mark.asyncio
async def test_zero_progress_is_a_no_op(repository) -> None:
    goal = await repository.create_goal(_goal(saved_amount=Decimal("10")))

    unchanged = await repository.update_goal_progress(goal.id, 0)

    assert unchanged.saved_amount == Decimal("10")


@pytest.mark.asyncio
async def test_concurrent_progress_updates_are_serialized(repository) -> None:
    """Every concurrent update of the same goal is kept."""
    goal = await repository.create_goal(_goal())

    await asyncio.gather(
        *(repository.update_goal_progress(goal.id, 1) for _ in range(40))
    )

    stored = await repository.fetch_goal(goal.id)
    assert stored.saved_amount == Decimal("40")


@pytest.mark.asyncio
async def test_negative_progress_is_rejected(repository) -> None:
    goal = await repository.create_goal(_goal())

    with pytest.raises(GoalError) as excinfo:
        await repository.update_goal_progress(goal.id, -5)

    assert excinfo.value.kind is ErrorKind.INVALID_PROGRESS_AMOUNT


@pytest.mark.asyncio
async def test_mark_completed_update_and_delete(repository) -> None:
    goal = await repository.create_goal(_goal())

    completed = await repository.mark_goal_completed(goal.id)
    reopened = await repository.update_goal(completed.reset_progress())

    assert completed.is_completed is True
    assert reopened.is_completed is False
    assert await repository.fetch_active_goals() == [reopened]

    await repository.delete_goal(goal.id)

    assert await repository.fetch_goals() == []


@pytest.mark.asyncio
async def test_unknown_goal_raises_not_found(repository) -> None:
    for call in (
        repository.fetch_goal("missing"),
        repository.update_goal_progress("missing", 10),
        repository.mark_goal_completed("missing"),
        repository.delete_goal("missing"),
        repository.update_goal(_goal(id="missing")),
    ):
        with pytest.raises(GoalError) as excinfo:
            await call
        assert excinfo.value.kind is ErrorKind.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("overrides", "kind"),
    [
        ({"name": " "}, ErrorKind.INVALID_NAME),
        ({"name": "n" * 101}, ErrorKind.INVALID_NAME),
        ({"target_amount": Decimal("0")}, ErrorKind.INVALID_TARGET_AMOUNT),
        ({"target_date": CREATED}, ErrorKind.INVALID_TARGET_DATE),
    ],
)
async def test_invalid_goals_are_rejected(repository, overrides, kind) -> None:
    with pytest.raises(GoalError) as excinfo:
        await repository.create_goal(_goal(**overrides))

    assert excinfo.value.kind is kind
    assert await repository.fetch_goals() == []
