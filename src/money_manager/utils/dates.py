"""Calendar helpers used by the domain services."""

import calendar
from datetime import datetime, timedelta


def start_of_day(moment: datetime) -> datetime:
    """Return midnight of the given day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_month(moment: datetime) -> datetime:
    """Return midnight of the first day of the given month."""
    return start_of_day(moment).replace(day=1)


def add_months(moment: datetime, months: int, day: int | None = None) -> datetime:
    """Shift a datetime by whole months, clamping the day to the month length.

    Args:
        moment: Datetime to shift.
        months: Number of months to add (negative to go back).
        day: Optional day of month to aim for instead of ``moment.day``.

    Returns:
        datetime: Shifted datetime with the same time of day.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    target_day = min(day or moment.day, last_day)
    return moment.replace(year=year, month=month, day=target_day)


def add_years(moment: datetime, years: int) -> datetime:
    """Shift a datetime by whole years (Feb 29 maps to Feb 28)."""
    return add_months(moment, years * 12)


def months_between(start: datetime, end: datetime) -> int:
    """Return the number of whole months from ``start`` to ``end``.

    Negative when ``end`` precedes ``start``.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months > 0 and add_months(start, months) > end:
        months -= 1
    elif months < 0 and add_months(start, months) < end:
        months += 1
    return months


def whole_years_between(start: datetime, end: datetime) -> int:
    """Return the number of whole years from ``start`` to ``end``."""
    return int(months_between(start, end) / 12)


def end_of_day(moment: datetime) -> datetime:
    """Return midnight of the following day (exclusive end of the day)."""
    return start_of_day(moment) + timedelta(days=1)


__all__ = [
    "start_of_day",
    "start_of_month",
    "add_months",
    "add_years",
    "months_between",
    "whole_years_between",
    "end_of_day",
]
