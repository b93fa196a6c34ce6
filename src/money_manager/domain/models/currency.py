"""Reference data for supported currencies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyInfo:
    """A supported currency.

    Attributes:
        code: ISO 4217 code.
        name: English display name.
        symbol: Symbol shown next to amounts.
    """

    code: str
    name: str
    symbol: str

    @property
    def label(self) -> str:
        return f"{self.code} ({self.name})"


__all__ = ["CurrencyInfo"]
