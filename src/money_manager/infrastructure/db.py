"""Database infrastructure for the money manager.

This module exposes concrete helpers to create and reuse SQLAlchemy engines
connected to the configured database. It belongs to the infrastructure layer
because it deals with external systems (SQLite by default, any SQLAlchemy
URL otherwise).
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.pool import QueuePool

from money_manager.application.ports.database import DatabaseEnginePort
from money_manager.infrastructure.settings import AppSettings


def _get_database_url() -> str:
    """Read the database URL from the application settings.

    Returns:
        str: Configured URL, or the default SQLite file URL.
    """
    return AppSettings.from_env().db_url


def _prepare_sqlite_path(url: URL) -> None:
    """Create the parent directory of an on-disk SQLite database."""
    database = url.database
    if not database or database == ":memory:":
        return
    db_path = Path(database)
    if not db_path.is_absolute():
        db_path = (Path.cwd() / db_path).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: SQLite engines usable from worker threads, or an engine with
        a small connection pool and health checks for other backends.
    """
    parsed_url = make_url(db_url)
    if parsed_url.drivername.startswith("sqlite"):
        _prepare_sqlite_path(parsed_url)
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the money manager database.

    Returns:
        Engine: Lazily initialized engine connected to the configured backend.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_database_url())
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    Without a URL the adapter proxies the process-wide engine; with one it
    owns a dedicated engine, which keeps tests isolated.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_engine(self) -> Engine:
        """Get the engine for the money manager database.

        Returns:
            Engine: SQLAlchemy engine connected to the configured backend.
        """
        if self._db_url is None:
            return get_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
