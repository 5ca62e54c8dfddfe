"""Calendar helpers for monthly weekday recurrence calculations."""

from __future__ import annotations

import calendar
from datetime import date, timedelta


def month_start(value: date) -> date:
    """Normalize any date to the first day of the same month."""

    return date(year=value.year, month=value.month, day=1)


def first_weekday_on_or_after(value: date, weekday: int) -> date:
    """Return the first date on or after value falling on weekday (Monday=0)."""

    return value + timedelta(days=(weekday - value.weekday()) % 7)


def add_months(value: date, months: int) -> date:
    """Return value shifted by a month offset, clamping the day to month length."""

    absolute_month = ((value.year - 1) * 12 + value.month - 1) + months
    if absolute_month < 0:
        msg = "Resulting month is before year 0001."
        raise ValueError(msg)

    target_year = absolute_month // 12 + 1
    target_month = absolute_month % 12 + 1
    _, month_last_day = calendar.monthrange(target_year, target_month)
    return date(
        year=target_year,
        month=target_month,
        day=min(value.day, month_last_day),
    )


def is_same_month(left: date, right: date) -> bool:
    """Return whether both dates belong to the same calendar month."""

    return (left.year, left.month) == (right.year, right.month)
