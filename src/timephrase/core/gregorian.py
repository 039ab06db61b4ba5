"""
Timephrase — Gregorian Calendar
Thin seam over the calendar arithmetic the resolvers need.
Gregorian rules come from the stdlib calendar module, month arithmetic from
dateutil's relativedelta (clamps Jan 31 + 1 month to Feb 28/29).

Arithmetic that leaves the datetime range (year 1..9999) raises InvalidDate.
"""
from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from timephrase.core.errors import InvalidDate


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def max_days_in_month(month: int) -> int:
    """Longest the month ever gets, in any year (29 for February)."""
    # 2000 is a leap year
    return days_in_month(2000, month)


def _shift(dt: datetime, delta: timedelta | relativedelta) -> datetime:
    try:
        return dt + delta
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(f"{dt.isoformat()} shifted by {delta!r} is out of range: {exc}") from exc


def add_days(dt: datetime, days: int) -> datetime:
    try:
        delta = timedelta(days=days)
    except OverflowError as exc:
        raise InvalidDate(f"{days} days is out of range") from exc
    return _shift(dt, delta)


def add_months(dt: datetime, months: int) -> datetime:
    return _shift(dt, relativedelta(months=months))


def add_duration(dt: datetime, amount: int, unit: str) -> datetime:
    """Add `amount` of a unit named like DurationUnit values ("minute", "month", ...)."""
    try:
        delta = relativedelta(**{f"{unit}s": amount})
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(f"{amount} {unit}s is out of range") from exc
    return _shift(dt, delta)


def is_after(moment: datetime, now: datetime) -> bool:
    """
    moment > now on the real timeline.
    Aware values compare in UTC so the repeated hour after a DST fall-back
    (fold=1) orders correctly; same-zone comparison would use wall time.
    """
    if moment.tzinfo is not None and now.tzinfo is not None:
        return moment.astimezone(timezone.utc) > now.astimezone(timezone.utc)
    return moment > now


def weekday_of(dt: datetime) -> int:
    return dt.weekday()
