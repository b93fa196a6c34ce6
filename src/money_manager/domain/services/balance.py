"""Domain services for the running balance time series."""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta
from decimal import Decimal

from money_manager.domain.models.balance import (
    BalancePoint,
    BalanceTrend,
    BalanceWindow,
)
from money_manager.domain.models.transactions import Transaction
from money_manager.utils.dates import add_months, end_of_day, start_of_day
from money_manager.utils.decimal_utils import coerce_decimal, safe_divide

ALL_WINDOW_FALLBACK_YEARS = 2


def window_bounds(
    window: BalanceWindow,
    now: datetime,
    transactions: Sequence[Transaction] = (),
) -> tuple[datetime, datetime]:
    """Return the ``(start, end)`` of a balance window ending at ``now``.

    The ALL window starts at the earliest transaction, or two years back
    when there are none.
    """
    if window is BalanceWindow.ONE_DAY:
        start = start_of_day(now)
    elif window is BalanceWindow.ONE_WEEK:
        start = now - timedelta(days=7)
    elif window is BalanceWindow.ONE_MONTH:
        start = add_months(now, -1)
    elif window is BalanceWindow.THREE_MONTHS:
        start = add_months(now, -3)
    elif window is BalanceWindow.YEAR_TO_DATE:
        start = start_of_day(now).replace(month=1, day=1)
    elif window is BalanceWindow.ONE_YEAR:
        start = add_months(now, -12)
    elif transactions:
        start = min(transaction.date for transaction in transactions)
    else:
        start = add_months(now, -12 * ALL_WINDOW_FALLBACK_YEARS)
    return min(start, now), now


def sample_times(window: BalanceWindow, start: datetime, end: datetime) -> list[datetime]:
    """Return evenly spaced sample times, always ending with ``end``."""
    if window.is_hourly:
        step = timedelta(hours=window.step)
    else:
        step = timedelta(days=window.step)
    samples = []
    current = start
    while current < end:
        samples.append(current)
        current += step
    samples.append(end)
    return samples


def balance_at(
    starting_balance,
    transactions: Iterable[Transaction],
    cutoff: datetime,
) -> Decimal:
    """Return the balance from transactions dated strictly before ``cutoff``."""
    balance = coerce_decimal(starting_balance)
    for transaction in transactions:
        if transaction.date < cutoff:
            balance += transaction.signed_amount
    return balance


def build_balance_series(
    starting_balance,
    transactions: Sequence[Transaction],
    window: BalanceWindow,
    now: datetime | None = None,
) -> list[BalancePoint]:
    """Build the running balance sampled across a window.

    Hourly samples include transactions before the sample time; daily and
    coarser samples include everything up to the end of the sample's day.
    Every point after the first carries its change versus the previous one.

    Args:
        starting_balance: Balance before any transaction.
        transactions: Transactions to replay.
        window: Window to sample.
        now: End of the window, defaults to the current time.

    Returns:
        list[BalancePoint]: Samples in chronological order.
    """
    now = now or datetime.now()
    start, end = window_bounds(window, now, transactions)
    points: list[BalancePoint] = []
    previous: Decimal | None = None
    for moment in sample_times(window, start, end):
        cutoff = moment if window.is_hourly else end_of_day(moment)
        balance = balance_at(starting_balance, transactions, cutoff)
        if previous is None:
            points.append(BalancePoint(date=moment, balance=balance))
        else:
            change = balance - previous
            points.append(
                BalancePoint(
                    date=moment,
                    balance=balance,
                    change=change,
                    change_percentage=safe_divide(change, abs(previous)) * 100,
                )
            )
        previous = balance
    return points


def balance_trend(points: Sequence[BalancePoint]) -> BalanceTrend:
    """Classify a series by comparing its last balance with its first."""
    if len(points) < 2:
        return BalanceTrend.NEUTRAL
    delta = points[-1].balance - points[0].balance
    if delta > 0:
        return BalanceTrend.POSITIVE
    if delta < 0:
        return BalanceTrend.NEGATIVE
    return BalanceTrend.NEUTRAL


__all__ = [
    "window_bounds",
    "sample_times",
    "balance_at",
    "build_balance_series",
    "balance_trend",
]
