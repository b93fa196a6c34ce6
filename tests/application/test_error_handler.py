"""Tests for the ErrorHandler."""

from money_manager.application.error_handler import ErrorHandler
from money_manager.domain.errors import ErrorKind, TransactionError


def test_handle_logs_context_and_returns_message(fake_logger) -> None:
    handler = ErrorHandler(logger=fake_logger)

    message = handler.handle(
        TransactionError(ErrorKind.INVALID_AMOUNT), "saving transaction"
    )

    assert message == "Transaction amount must be greater than zero"
    fake_logger.error.assert_called_once_with(
        "Error in saving transaction: TransactionError: "
        "Transaction amount must be greater than zero"
    )


def test_handle_without_context(fake_logger) -> None:
    handler = ErrorHandler(logger=fake_logger)

    message = handler.handle(RuntimeError("boom"))

    assert message == "An unexpected error occurred. Please try again."
    logged = fake_logger.error.call_args.args[0]
    assert logged.startswith("Error in unknown context: RuntimeError")
