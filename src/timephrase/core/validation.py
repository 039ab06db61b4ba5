"""
Timephrase — Validation Layer

Checks the grammar cannot express on its own:
  - clock range (hour 0-23, minute 0-59)
  - day of month against the month's length, leap years included
  - year inference for "on the DAY of MONTH", which never names a year

Year inference is a policy. All policies live in _YEAR_POLICIES below so a
different one can be plugged in without touching any decoder or resolver.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Literal

from timephrase.core import gregorian
from timephrase.core.errors import InvalidDate, InvalidTime

logger = logging.getLogger(__name__)

YearPolicy = Literal["nearest_future", "current_year"]

# Longest gap between two Gregorian leap years (2096 → 2104)
_MAX_YEAR_ROLL = 8


@dataclass(frozen=True)
class ClockTime:
    hour: int
    minute: int

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


MIDNIGHT = ClockTime(0, 0)


@dataclass(frozen=True)
class CalendarDate:
    """Day and month as matched; the year comes from infer_year()."""
    day: int
    month: int


# ── Range checks ──────────────────────────────────────────────────────────────

def validate_clock(hour: int, minute: int) -> ClockTime:
    if not 0 <= hour <= 23:
        raise InvalidTime(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise InvalidTime(f"minute out of range: {minute}")
    return ClockTime(hour, minute)


def validate_date(year: int, month: int, day: int) -> date:
    if not 1 <= month <= 12:
        raise InvalidDate(f"month out of range: {month}")
    last = gregorian.days_in_month(year, month)
    if not 1 <= day <= last:
        raise InvalidDate(f"{year}-{month:02d} has {last} days, got day {day}")
    return date(year, month, day)


def check_day_exists(cal: CalendarDate) -> None:
    """Reject days no year can hold for this month ("31st of april")."""
    if not 1 <= cal.month <= 12:
        raise InvalidDate(f"month out of range: {cal.month}")
    longest = gregorian.max_days_in_month(cal.month)
    if not 1 <= cal.day <= longest:
        raise InvalidDate(f"month {cal.month} never has a day {cal.day}")


# ── Year inference ────────────────────────────────────────────────────────────

def _moment(year: int, cal: CalendarDate, clock: ClockTime, now: datetime) -> datetime:
    return datetime(year, cal.month, cal.day, clock.hour, clock.minute, tzinfo=now.tzinfo)


def _nearest_future_year(cal: CalendarDate, now: datetime, clock: ClockTime) -> int:
    """
    First year, starting with the current one, in which the date exists and
    the moment (date + clock) is strictly after now.
    """
    for offset in range(_MAX_YEAR_ROLL + 1):
        year = now.year + offset
        if year > datetime.max.year:
            break
        if cal.day > gregorian.days_in_month(year, cal.month):
            continue
        if gregorian.is_after(_moment(year, cal, clock, now), now):
            if offset:
                logger.debug("Year rolled forward %d → %d for %s", now.year, year, cal)
            return year
    raise InvalidDate(f"no year within {_MAX_YEAR_ROLL} of {now.year} holds {cal}")


def _current_year(cal: CalendarDate, now: datetime, clock: ClockTime) -> int:
    validate_date(now.year, cal.month, cal.day)
    return now.year


_YEAR_POLICIES: dict[str, Callable[[CalendarDate, datetime, ClockTime], int]] = {
    "nearest_future": _nearest_future_year,
    "current_year":   _current_year,
}


def infer_year(
    cal: CalendarDate,
    now: datetime,
    clock: ClockTime = MIDNIGHT,
    policy: YearPolicy = "nearest_future",
) -> int:
    """
    Pick the year for a day/month pair.
    Raises InvalidDate when the day can never exist in that month, or when
    the policy finds no valid year.
    """
    check_day_exists(cal)
    try:
        pick = _YEAR_POLICIES[policy]
    except KeyError:
        raise ValueError(f"unknown year policy: {policy!r}") from None
    year = pick(cal, now, clock)
    validate_date(year, cal.month, cal.day)
    return year


def year_policies() -> list[str]:
    return list(_YEAR_POLICIES)
