"""
Timephrase — Lexical Primitives
Decoders for the atomic tokens a matched sentence carries.

Every decoder is pure. The grammar has already accepted each token, so a
token that fails to decode means the matcher and this table disagree and
raises InternalInvariantViolation.

Usage:
    from timephrase.core.lexicon import decode_ordinal_day, decode_weekday
    decode_ordinal_day("23rd")     # → 23
    decode_weekday("Monday")       # → Weekday.MONDAY
"""
from __future__ import annotations

import re
from enum import Enum, IntEnum

from timephrase.core.errors import InternalInvariantViolation


class DurationUnit(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Weekday(IntEnum):
    """Values match datetime.weekday() (Monday=0 .. Sunday=6)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# English weekday names → Weekday
_WEEKDAYS: dict[str, Weekday] = {
    "monday":    Weekday.MONDAY,
    "tuesday":   Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "thursday":  Weekday.THURSDAY,
    "friday":    Weekday.FRIDAY,
    "saturday":  Weekday.SATURDAY,
    "sunday":    Weekday.SUNDAY,
}

# English month names → month number
_MONTHS: dict[str, int] = {
    "january":   1,
    "february":  2,
    "march":     3,
    "april":     4,
    "may":       5,
    "june":      6,
    "july":      7,
    "august":    8,
    "september": 9,
    "october":   10,
    "november":  11,
    "december":  12,
}

# Only two..nine: "in one day" / "in ten days" go through the numeric IN shape
_CARDINALS: dict[str, int] = {
    "two":   2,
    "three": 3,
    "four":  4,
    "five":  5,
    "six":   6,
    "seven": 7,
    "eight": 8,
    "nine":  9,
}

_UNITS: dict[str, DurationUnit] = {u.value: u for u in DurationUnit}


def _ordinal_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


# "1st" → 1 .. "31st" → 31
_ORDINAL_DAYS: dict[str, int] = {
    f"{day}{_ordinal_suffix(day)}": day for day in range(1, 32)
}

_NUMBER_RE = re.compile(r"[1-9][0-9]*")
_CLOCK_NUMBER_RE = re.compile(r"[0-9]{1,2}")


# ── Numbers ───────────────────────────────────────────────────────────────────

def decode_number(text: str) -> int:
    """
    Digit run of an IN amount → int.
    A leading zero never matches upstream, so "0" and "05" are rejected here.
    """
    if not _NUMBER_RE.fullmatch(text):
        raise InternalInvariantViolation(f"not an IN amount: {text!r}")
    return int(text)


def decode_clock_number(text: str) -> int:
    """One or two digits of a clock field; "05" is fine. Range is checked later."""
    if not _CLOCK_NUMBER_RE.fullmatch(text):
        raise InternalInvariantViolation(f"not a clock number: {text!r}")
    return int(text)


def decode_cardinal(word: str) -> int:
    try:
        return _CARDINALS[word.lower()]
    except KeyError:
        raise InternalInvariantViolation(f"unknown cardinal: {word!r}") from None


# ── Calendar words ────────────────────────────────────────────────────────────

def decode_ordinal_day(token: str) -> int:
    """
    "1st".."31st" → 1..31.
    Only checks the token itself; day vs month length is the validation layer's job.
    """
    try:
        return _ORDINAL_DAYS[token.lower()]
    except KeyError:
        raise InternalInvariantViolation(f"unknown ordinal day: {token!r}") from None


def decode_month(word: str) -> int:
    try:
        return _MONTHS[word.lower()]
    except KeyError:
        raise InternalInvariantViolation(f"unknown month: {word!r}") from None


def decode_weekday(word: str) -> Weekday:
    try:
        return _WEEKDAYS[word.lower()]
    except KeyError:
        raise InternalInvariantViolation(f"unknown weekday: {word!r}") from None


def decode_unit(word: str) -> DurationUnit:
    """'minute' and 'minutes' both map to DurationUnit.MINUTE."""
    key = word.lower()
    if key not in _UNITS and key.endswith("s"):
        key = key[:-1]
    try:
        return _UNITS[key]
    except KeyError:
        raise InternalInvariantViolation(f"unknown duration unit: {word!r}") from None
