"""Error taxonomy for the domain and repository boundary.

Each failure carries a stable machine-readable ``ErrorKind``; the text shown
to users lives in separate lookup tables so logic never depends on wording.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable kinds of repository failures."""

    INVALID_AMOUNT = "invalid_amount"
    INVALID_CATEGORY = "invalid_category"
    INVALID_DESCRIPTION = "invalid_description"
    NOT_FOUND = "not_found"
    SAVE_FAILED = "save_failed"
    FETCH_FAILED = "fetch_failed"
    DELETE_FAILED = "delete_failed"
    UPDATE_FAILED = "update_failed"
    INVALID_PROGRESS_AMOUNT = "invalid_progress_amount"
    INVALID_NAME = "invalid_name"
    INVALID_TARGET_AMOUNT = "invalid_target_amount"
    INVALID_TARGET_DATE = "invalid_target_date"


VALIDATION_KINDS = frozenset(
    {
        ErrorKind.INVALID_AMOUNT,
        ErrorKind.INVALID_CATEGORY,
        ErrorKind.INVALID_DESCRIPTION,
        ErrorKind.INVALID_PROGRESS_AMOUNT,
        ErrorKind.INVALID_NAME,
        ErrorKind.INVALID_TARGET_AMOUNT,
        ErrorKind.INVALID_TARGET_DATE,
    }
)

TRANSACTION_ERROR_MESSAGES = {
    ErrorKind.INVALID_AMOUNT: "Transaction amount must be greater than zero",
    ErrorKind.INVALID_CATEGORY: "Transaction category cannot be empty",
    ErrorKind.INVALID_DESCRIPTION: "Transaction description is invalid",
    ErrorKind.NOT_FOUND: "Transaction not found",
    ErrorKind.SAVE_FAILED: "Failed to save transaction",
    ErrorKind.FETCH_FAILED: "Failed to fetch transactions",
    ErrorKind.DELETE_FAILED: "Failed to delete transaction",
    ErrorKind.UPDATE_FAILED: "Failed to update transaction",
}

GOAL_ERROR_MESSAGES = {
    ErrorKind.INVALID_NAME: "Goal name cannot be empty",
    ErrorKind.INVALID_TARGET_AMOUNT: "Target amount must be greater than zero",
    ErrorKind.INVALID_TARGET_DATE: "Target date is invalid",
    ErrorKind.NOT_FOUND: "Goal not found",
    ErrorKind.SAVE_FAILED: "Failed to save goal",
    ErrorKind.FETCH_FAILED: "Failed to fetch goals",
    ErrorKind.DELETE_FAILED: "Failed to delete goal",
    ErrorKind.UPDATE_FAILED: "Failed to update goal",
    ErrorKind.INVALID_PROGRESS_AMOUNT: "Progress amount cannot be negative",
}


class RepositoryError(Exception):
    """Typed failure raised at the repository boundary."""

    messages: dict[ErrorKind, str] = {}
    fallback_message = "Repository operation failed"

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Return the static user-facing message for this error."""
        return self.messages.get(self.kind, self.fallback_message)

    @property
    def is_validation_error(self) -> bool:
        return self.kind in VALIDATION_KINDS


class TransactionError(RepositoryError):
    """Failure of a transaction repository operation."""

    messages = TRANSACTION_ERROR_MESSAGES
    fallback_message = "Transaction operation failed"


class GoalError(RepositoryError):
    """Failure of a goal repository operation."""

    messages = GOAL_ERROR_MESSAGES
    fallback_message = "Goal operation failed"


class AppErrorCategory(str, Enum):
    """Coarse categories used for user-facing error messages."""

    DATA = "data"
    NETWORK = "network"
    VALIDATION = "validation"
    FILESYSTEM = "filesystem"
    UNKNOWN = "unknown"


APP_ERROR_PREFIXES = {
    AppErrorCategory.DATA: "Data Error",
    AppErrorCategory.NETWORK: "Network Error",
    AppErrorCategory.VALIDATION: "Validation Error",
    AppErrorCategory.FILESYSTEM: "File System Error",
    AppErrorCategory.UNKNOWN: "Unknown Error",
}

USER_FRIENDLY_MESSAGES = {
    AppErrorCategory.DATA: (
        "There was a problem saving your data. Please try again."
    ),
    AppErrorCategory.NETWORK: (
        "Please check your internet connection and try again."
    ),
    AppErrorCategory.FILESYSTEM: (
        "There was a problem accessing your files. Please try again."
    ),
    AppErrorCategory.UNKNOWN: "Something went wrong. Please try again.",
}

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class AppError(Exception):
    """Application error tagged with a coarse category."""

    def __init__(self, category: AppErrorCategory, detail: str) -> None:
        self.category = AppErrorCategory(category)
        self.detail = detail
        super().__init__(f"{APP_ERROR_PREFIXES[self.category]}: {detail}")


def get_user_friendly_message(error: BaseException) -> str:
    """Map any error to a short message suitable for end users.

    Validation failures surface their own message; everything else collapses
    to one of the generic data, network, filesystem or unknown messages.

    Args:
        error: Exception raised by a domain, application or adapter call.

    Returns:
        str: Message to display.
    """
    if isinstance(error, AppError):
        if error.category is AppErrorCategory.VALIDATION:
            return error.detail
        return USER_FRIENDLY_MESSAGES[error.category]
    if isinstance(error, RepositoryError):
        if error.is_validation_error:
            return error.message
        return USER_FRIENDLY_MESSAGES[AppErrorCategory.DATA]
    if isinstance(error, (ConnectionError, TimeoutError)):
        return USER_FRIENDLY_MESSAGES[AppErrorCategory.NETWORK]
    if isinstance(error, OSError):
        return USER_FRIENDLY_MESSAGES[AppErrorCategory.FILESYSTEM]
    return UNEXPECTED_ERROR_MESSAGE


__all__ = [
    "ErrorKind",
    "RepositoryError",
    "TransactionError",
    "GoalError",
    "AppErrorCategory",
    "AppError",
    "get_user_friendly_message",
    "UNEXPECTED_ERROR_MESSAGE",
    "USER_FRIENDLY_MESSAGES",
]
