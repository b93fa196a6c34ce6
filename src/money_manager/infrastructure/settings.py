"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

import dotenv

from money_manager.domain.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_LOCALE,
    NOTIFICATION_LIMIT,
)
from money_manager.infrastructure.logging.logger import get_app_logger
from money_manager.utils.utils import get_project_root

DEFAULT_DB_FILENAME = "money_manager.db"


def default_database_url() -> str:
    """Return the SQLite URL under the project's ``data/`` directory."""
    return f"sqlite:///{get_project_root() / 'data' / DEFAULT_DB_FILENAME}"


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the money manager.

    Attributes:
        db_url: SQLAlchemy database URL.
        currency_code: ISO 4217 code used for formatting.
        locale: CLDR locale used for formatting.
        starting_balance: Balance before the first recorded transaction.
        notification_limit: Maximum number of notifications retained.
    """

    db_url: str
    currency_code: str = DEFAULT_CURRENCY_CODE
    locale: str = DEFAULT_LOCALE
    starting_balance: Decimal = Decimal("0")
    notification_limit: int = NOTIFICATION_LIMIT

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and ``.env`` files.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("MONEY_MANAGER_DB_URL") or default_database_url()
        currency_code = (
            os.getenv("MONEY_MANAGER_CURRENCY", DEFAULT_CURRENCY_CODE)
            .strip()
            .upper()
            or DEFAULT_CURRENCY_CODE
        )
        locale = (
            os.getenv("MONEY_MANAGER_LOCALE", DEFAULT_LOCALE).strip()
            or DEFAULT_LOCALE
        )
        return cls(
            db_url=db_url,
            currency_code=currency_code,
            locale=locale,
            starting_balance=cls._parse_balance(
                os.getenv("MONEY_MANAGER_STARTING_BALANCE"), logger
            ),
            notification_limit=cls._parse_limit(
                os.getenv("MONEY_MANAGER_NOTIFICATION_LIMIT"), logger
            ),
        )

    @staticmethod
    def _parse_balance(raw: str | None, logger) -> Decimal:
        """Parse the starting balance, falling back to zero.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed balance.
        """
        if not raw:
            return Decimal("0")
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid MONEY_MANAGER_STARTING_BALANCE: {raw!r}")
            return Decimal("0")
        if not value.is_finite():
            logger.warning(f"Invalid MONEY_MANAGER_STARTING_BALANCE: {raw!r}")
            return Decimal("0")
        return value

    @staticmethod
    def _parse_limit(raw: str | None, logger) -> int:
        if not raw:
            return NOTIFICATION_LIMIT
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if value < 1:
            logger.warning(
                f"Invalid MONEY_MANAGER_NOTIFICATION_LIMIT: {raw!r}; "
                f"using {NOTIFICATION_LIMIT}"
            )
            return NOTIFICATION_LIMIT
        return value


__all__ = ["AppSettings", "default_database_url"]
