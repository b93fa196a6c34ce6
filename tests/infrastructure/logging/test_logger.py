"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from money_manager.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should build loggers in the project logs directory."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240515"),
    )

    builder = logger_module.LoggerBuilder()
    custom_logger = (
        builder.name("money_manager_test")
        .subdir("budgets")
        .prefix("budget_logs")
        .console(True)
        .level(logging.WARNING)
        .build()
    )

    try:
        assert custom_logger.level == logging.WARNING
        assert custom_logger.propagate is False
        file_handlers = [
            h for h in custom_logger.handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        expected_path = tmp_path / "logs" / "budgets" / "20240515_budget_logs.log"
        assert file_handlers[0].baseFilename == str(expected_path)
        assert len(custom_logger.handlers) == 2
        assert builder.build() is custom_logger
        assert len(custom_logger.handlers) == 2
    finally:
        for handler in list(custom_logger.handlers):
            handler.close()
            custom_logger.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "money.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("app")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("app") is logger


def test_get_app_logger_returns_singleton(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    first = logger_module.get_app_logger()
    second = logger_module.get_app_logger()

    assert first is second
    assert first.logger is fake_logger
