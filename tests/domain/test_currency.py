"""Tests for currency reference data and formatting."""

from decimal import Decimal

import pytest

from money_manager.domain.models.projections import TimeScale
from money_manager.domain.services.currency import (
    SUPPORTED_CURRENCIES,
    currency_code_from_label,
    currency_labels,
    format_amount,
    format_for_scale,
    get_currency,
    get_currency_symbol,
)


def test_supported_currencies_are_unique() -> None:
    codes = [currency.code for currency in SUPPORTED_CURRENCIES]

    assert len(codes) == 25
    assert len(set(codes)) == len(codes)
    assert codes[0] == "USD"


def test_labels_and_code_extraction() -> None:
    assert currency_labels()[:2] == ["USD (US Dollar)", "EUR (Euro)"]
    assert currency_code_from_label("EUR (Euro)") == "EUR"
    assert currency_code_from_label("gbp") == "GBP"
    assert currency_code_from_label("   ") == "USD"


def test_get_currency_is_case_insensitive() -> None:
    assert get_currency(" jpy ").name == "Japanese Yen"
    assert get_currency("XYZ") is None


def test_symbol_prefers_reference_data() -> None:
    assert get_currency_symbol("eur") == "€"
    assert get_currency_symbol("CAD") == "C$"


def test_symbol_falls_back_to_cldr(monkeypatch) -> None:
    """Unknown codes are resolved through Babel."""
    from money_manager.domain.services import currency as currency_module

    calls = []

    def fake_symbol(code, locale):
        calls.append((code, locale))
        return "Kč"

    monkeypatch.setattr(currency_module, "babel_currency_symbol", fake_symbol)

    assert get_currency_symbol("czk", locale="cs_CZ") == "Kč"
    assert calls == [("CZK", "cs_CZ")]


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("0"), "$0.00"),
        ("99.999", "$100.00"),
    ],
)
def test_format_amount_us_dollars(amount, expected) -> None:
    assert format_amount(amount) == expected


def test_format_amount_follows_locale() -> None:
    formatted = format_amount(Decimal("1234.5"), "EUR", locale="de_DE")

    assert formatted.startswith("1.234,50")
    assert formatted.endswith("€")


def test_format_for_scale_drops_cents_except_hourly() -> None:
    assert format_for_scale(Decimal("25.5"), TimeScale.HOURLY) == "$25.50"
    assert format_for_scale(Decimal("4330.4"), TimeScale.MONTHLY) == "$4,330"
