"""CLI adapter to prepare the money manager database.

This module wires the SQLAlchemy repositories to the configured database
and creates their tables when they do not exist yet.
"""

from money_manager.infrastructure.container import (
    build_database_adapter,
    build_goal_repository,
    build_transaction_repository,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.infrastructure.settings import AppSettings


def main() -> None:
    """Create the transactions and goals tables."""
    logger = get_app_logger()
    settings = AppSettings.from_env()
    db_adapter = build_database_adapter(settings)

    build_transaction_repository(db_adapter).prepare()
    build_goal_repository(db_adapter).prepare()

    logger.info(f"Database schema ready at {settings.db_url}")
    print(f"Prepared the money manager database at {settings.db_url}.")


if __name__ == "__main__":  # pragma: no cover
    main()
