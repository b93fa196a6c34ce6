"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from money_manager.infrastructure import settings as settings_module
from money_manager.infrastructure.settings import AppSettings

ENV_VARS = (
    "MONEY_MANAGER_DB_URL",
    "MONEY_MANAGER_CURRENCY",
    "MONEY_MANAGER_LOCALE",
    "MONEY_MANAGER_STARTING_BALANCE",
    "MONEY_MANAGER_NOTIFICATION_LIMIT",
)


@pytest.fixture
def fake_settings_logger(monkeypatch) -> MagicMock:
    """Isolate from .env files and the real logger."""
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_defaults(fake_settings_logger, monkeypatch, tmp_path) -> None:
    """Without variables the SQLite file lives under data/."""
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = AppSettings.from_env()

    assert settings.db_url == f"sqlite:///{tmp_path / 'data' / 'money_manager.db'}"
    assert settings.currency_code == "USD"
    assert settings.locale == "en_US"
    assert settings.starting_balance == Decimal("0")
    assert settings.notification_limit == 50


def test_from_env_reads_variables(fake_settings_logger, monkeypatch) -> None:
    monkeypatch.setenv("MONEY_MANAGER_DB_URL", "postgresql://money")
    monkeypatch.setenv("MONEY_MANAGER_CURRENCY", " eur ")
    monkeypatch.setenv("MONEY_MANAGER_LOCALE", "de_DE")
    monkeypatch.setenv("MONEY_MANAGER_STARTING_BALANCE", "1250.75")
    monkeypatch.setenv("MONEY_MANAGER_NOTIFICATION_LIMIT", "20")

    settings = AppSettings.from_env()

    assert settings == AppSettings(
        db_url="postgresql://money",
        currency_code="EUR",
        locale="de_DE",
        starting_balance=Decimal("1250.75"),
        notification_limit=20,
    )
    fake_settings_logger.warning.assert_not_called()


@pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity"])
def test_invalid_starting_balance_falls_back(
    fake_settings_logger, monkeypatch, raw
) -> None:
    monkeypatch.setenv("MONEY_MANAGER_STARTING_BALANCE", raw)

    settings = AppSettings.from_env()

    assert settings.starting_balance == Decimal("0")
    fake_settings_logger.warning.assert_called_once()


@pytest.mark.parametrize("raw", ["ten", "0", "-3"])
def test_invalid_notification_limit_falls_back(
    fake_settings_logger, monkeypatch, raw
) -> None:
    monkeypatch.setenv("MONEY_MANAGER_NOTIFICATION_LIMIT", raw)

    settings = AppSettings.from_env()

    assert settings.notification_limit == 50
    fake_settings_logger.warning.assert_called_once()
