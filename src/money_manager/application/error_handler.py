"""Logging and user-facing mapping of application errors."""

from money_manager.domain.errors import get_user_friendly_message
from money_manager.infrastructure.logging.logger import get_app_logger


class ErrorHandler:
    """Log errors with their context and translate them for users."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def handle(self, error: BaseException, context: str = "") -> str:
        """Log an error and return the message to show the user.

        Args:
            error: Exception raised by a use case or repository.
            context: Short description of the failed action.

        Returns:
            str: User-facing message.
        """
        where = context or "unknown context"
        self._logger.error(
            f"Error in {where}: {type(error).__name__}: {error}"
        )
        return self.message_for(error)

    @staticmethod
    def message_for(error: BaseException) -> str:
        return get_user_friendly_message(error)


__all__ = ["ErrorHandler"]
