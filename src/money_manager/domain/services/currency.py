"""Currency reference data and locale-aware amount formatting."""

from babel import Locale
from babel.numbers import get_currency_symbol as babel_currency_symbol
from babel.numbers import parse_pattern

from money_manager.domain.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_LOCALE,
)
from money_manager.domain.models.currency import CurrencyInfo
from money_manager.domain.models.projections import TimeScale
from money_manager.utils.decimal_utils import coerce_decimal

SUPPORTED_CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo("USD", "US Dollar", "$"),
    CurrencyInfo("EUR", "Euro", "€"),
    CurrencyInfo("GBP", "British Pound", "£"),
    CurrencyInfo("JPY", "Japanese Yen", "¥"),
    CurrencyInfo("CAD", "Canadian Dollar", "C$"),
    CurrencyInfo("AUD", "Australian Dollar", "A$"),
    CurrencyInfo("CHF", "Swiss Franc", "CHF"),
    CurrencyInfo("CNY", "Chinese Yuan", "¥"),
    CurrencyInfo("SEK", "Swedish Krona", "kr"),
    CurrencyInfo("NZD", "New Zealand Dollar", "NZ$"),
    CurrencyInfo("MXN", "Mexican Peso", "$"),
    CurrencyInfo("SGD", "Singapore Dollar", "S$"),
    CurrencyInfo("HKD", "Hong Kong Dollar", "HK$"),
    CurrencyInfo("NOK", "Norwegian Krone", "kr"),
    CurrencyInfo("TRY", "Turkish Lira", "₺"),
    CurrencyInfo("RUB", "Russian Ruble", "₽"),
    CurrencyInfo("INR", "Indian Rupee", "₹"),
    CurrencyInfo("BRL", "Brazilian Real", "R$"),
    CurrencyInfo("ZAR", "South African Rand", "R"),
    CurrencyInfo("KRW", "South Korean Won", "₩"),
    CurrencyInfo("DKK", "Danish Krone", "kr"),
    CurrencyInfo("PLN", "Polish Złoty", "zł"),
    CurrencyInfo("THB", "Thai Baht", "฿"),
    CurrencyInfo("AED", "UAE Dirham", "د.إ"),
    CurrencyInfo("ILS", "Israeli Shekel", "₪"),
)

_BY_CODE = {currency.code: currency for currency in SUPPORTED_CURRENCIES}


def get_currency(code: str) -> CurrencyInfo | None:
    return _BY_CODE.get(code.strip().upper())


def currency_labels() -> list[str]:
    """Return display labels such as ``"USD (US Dollar)"``."""
    return [currency.label for currency in SUPPORTED_CURRENCIES]


def currency_code_from_label(label: str) -> str:
    """Extract the ISO code from a display label.

    Args:
        label: Label such as ``"EUR (Euro)"`` or a bare code.

    Returns:
        str: Upper-case code, or the default code for an empty label.
    """
    parts = label.split()
    if not parts:
        return DEFAULT_CURRENCY_CODE
    return parts[0].upper()


def get_currency_symbol(code: str, locale: str = DEFAULT_LOCALE) -> str:
    """Return the symbol for a currency code.

    Supported currencies use their reference symbol; other codes fall back to
    the CLDR symbol for ``locale``.
    """
    currency = get_currency(code)
    if currency is not None:
        return currency.symbol
    return babel_currency_symbol(code.strip().upper(), locale=locale)


def format_amount(
    amount,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    fraction_digits: int = DEFAULT_FRACTION_DIGITS,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format an amount with the locale's standard currency pattern.

    Args:
        amount: Amount to format.
        currency_code: ISO 4217 code.
        fraction_digits: Exact number of fraction digits to show.
        locale: CLDR locale identifier such as ``"en_US"``.

    Returns:
        str: Formatted amount, e.g. ``"$1,234.50"``.
    """
    babel_locale = Locale.parse(locale)
    pattern = parse_pattern(babel_locale.currency_formats["standard"].pattern)
    pattern.frac_prec = (fraction_digits, fraction_digits)
    return pattern.apply(
        coerce_decimal(amount),
        babel_locale,
        currency=currency_code.strip().upper(),
        currency_digits=False,
    )


def format_for_scale(
    amount,
    time_scale: TimeScale,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format an amount with cents for hourly figures and none otherwise."""
    digits = 2 if time_scale is TimeScale.HOURLY else 0
    return format_amount(amount, currency_code, digits, locale)


__all__ = [
    "SUPPORTED_CURRENCIES",
    "get_currency",
    "currency_labels",
    "currency_code_from_label",
    "get_currency_symbol",
    "format_amount",
    "format_for_scale",
]
