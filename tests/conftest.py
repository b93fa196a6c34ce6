"""Shared fixtures for the test suite."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from money_manager.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


@pytest.fixture
def fake_logger() -> MagicMock:
    """Logger double so tests never write log files."""
    return MagicMock()


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 5, 15, 12, 0, 0)


@pytest.fixture
def sqlite_adapter(tmp_path) -> SqlAlchemyDatabaseEngineAdapter:
    """Database adapter bound to a temporary SQLite file."""
    adapter = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'money_manager.db'}"
    )
    yield adapter
    adapter.get_engine().dispose()
