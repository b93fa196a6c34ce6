"""Domain models for the balance-over-time series."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class BalanceWindow(str, Enum):
    """Windows the balance series can be sampled over."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    YEAR_TO_DATE = "YTD"
    ONE_YEAR = "1Y"
    ALL = "All"

    @property
    def is_hourly(self) -> bool:
        return self is BalanceWindow.ONE_DAY

    @property
    def step(self) -> int:
        """Return the sampling step, in hours for 1D and in days otherwise."""
        return _STEPS[self]


_STEPS = {
    BalanceWindow.ONE_DAY: 1,
    BalanceWindow.ONE_WEEK: 1,
    BalanceWindow.ONE_MONTH: 1,
    BalanceWindow.THREE_MONTHS: 1,
    BalanceWindow.YEAR_TO_DATE: 7,
    BalanceWindow.ONE_YEAR: 7,
    BalanceWindow.ALL: 30,
}


class BalanceTrend(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class BalancePoint:
    """Running balance at one sample time.

    ``change`` and ``change_percentage`` compare against the previous sample
    and are ``None`` for the first sample of a series.
    """

    date: datetime
    balance: Decimal
    change: Decimal | None = None
    change_percentage: Decimal | None = None


__all__ = ["BalanceWindow", "BalanceTrend", "BalancePoint"]
