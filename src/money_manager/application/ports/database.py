"""Database ports for the money manager.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the repositories.

    Repositories depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the money manager database.

        Returns:
            Engine: SQLAlchemy engine connected to the configured backend.
        """


__all__ = ["DatabaseEnginePort"]
