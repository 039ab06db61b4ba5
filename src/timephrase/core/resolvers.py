"""
Timephrase — Sentence Resolvers
One resolver per sentence shape, each a pure function of (sentence, context).

    IN        "in 5 minutes"               → Relative(5, MINUTE)
    IN_ALT    "in three days [at 08:00]"   → Relative(3, DAY) | Absolute
    AT        "at 14:30 [on the 3rd of june]"
    ON        "on the 3rd of june [at 10:15]"
    NEXT      "next monday|week|month [at 09:00]"
    TOMORROW  "tomorrow [at 8:00]"

Date-shaped results without an AT clause land on 00:00; "next week" without
one stays a plain 7-day offset.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from timephrase.core import gregorian
from timephrase.core.compose import next_occurrence, overlay
from timephrase.core.errors import InternalInvariantViolation
from timephrase.core.lexicon import (
    DurationUnit,
    Weekday,
    decode_cardinal,
    decode_clock_number,
    decode_month,
    decode_number,
    decode_ordinal_day,
    decode_unit,
    decode_weekday,
)
from timephrase.core.sentence import (
    At,
    AtClause,
    In,
    InAlt,
    Next,
    On,
    OnClause,
    ParsedSentence,
    Tomorrow,
)
from timephrase.core.timespec import Absolute, Relative, TimeSpec
from timephrase.core.validation import (
    MIDNIGHT,
    CalendarDate,
    ClockTime,
    YearPolicy,
    infer_year,
    validate_clock,
)


@dataclass(frozen=True)
class Context:
    """Everything a resolver may look at besides the sentence itself."""
    now: datetime
    roll_past_times: bool = True
    year_policy: YearPolicy = "nearest_future"


# ── Clause helpers ────────────────────────────────────────────────────────────

def _clock(clause: AtClause) -> ClockTime:
    return validate_clock(decode_clock_number(clause.hour), decode_clock_number(clause.minute))


def _optional_clock(clause: Optional[AtClause]) -> Optional[ClockTime]:
    return _clock(clause) if clause is not None else None


def _on_date(clause: OnClause, ctx: Context, clock: Optional[ClockTime]) -> Absolute:
    cal = CalendarDate(decode_ordinal_day(clause.day), decode_month(clause.month))
    clock = clock or MIDNIGHT
    year = infer_year(cal, ctx.now, clock, ctx.year_policy)
    return overlay(datetime(year, cal.month, cal.day, tzinfo=ctx.now.tzinfo), clock)


def _next_weekday(today: datetime, target: Weekday) -> datetime:
    """
    Next occurrence of target strictly after today.
    If today IS that weekday, a full week ahead.
    """
    delta = (target - gregorian.weekday_of(today)) % 7 or 7
    return gregorian.add_days(today, delta)


# ── Resolvers ─────────────────────────────────────────────────────────────────

def resolve_in(sentence: In, ctx: Context) -> TimeSpec:
    return Relative(decode_number(sentence.amount), decode_unit(sentence.unit))


def resolve_in_alt(sentence: InAlt, ctx: Context) -> TimeSpec:
    days = decode_cardinal(sentence.cardinal)
    if sentence.at is None:
        return Relative(days, DurationUnit.DAY)
    return overlay(gregorian.add_days(ctx.now, days), _clock(sentence.at))


def resolve_at(sentence: At, ctx: Context) -> TimeSpec:
    clock = _clock(sentence.clock)
    if sentence.on is not None:
        return _on_date(sentence.on, ctx, clock)
    return next_occurrence(ctx.now, clock, roll_past=ctx.roll_past_times)


def resolve_on(sentence: On, ctx: Context) -> TimeSpec:
    return _on_date(sentence.date, ctx, _optional_clock(sentence.at))


def resolve_next(sentence: Next, ctx: Context) -> TimeSpec:
    target = sentence.target.lower()
    clock = _optional_clock(sentence.at)

    if target == "week":
        if clock is None:
            return Relative(7, DurationUnit.DAY)
        return overlay(gregorian.add_days(ctx.now, 7), clock)

    if target == "month":
        return overlay(gregorian.add_months(ctx.now, 1), clock)

    return overlay(_next_weekday(ctx.now, decode_weekday(target)), clock)


def resolve_tomorrow(sentence: Tomorrow, ctx: Context) -> TimeSpec:
    return overlay(gregorian.add_days(ctx.now, 1), _optional_clock(sentence.at))


# ── Dispatch ──────────────────────────────────────────────────────────────────

RESOLVERS: dict[type, Callable[..., TimeSpec]] = {
    In:       resolve_in,
    InAlt:    resolve_in_alt,
    At:       resolve_at,
    On:       resolve_on,
    Next:     resolve_next,
    Tomorrow: resolve_tomorrow,
}


def resolve_sentence(sentence: ParsedSentence, ctx: Context) -> TimeSpec:
    try:
        handler = RESOLVERS[type(sentence)]
    except KeyError:
        raise InternalInvariantViolation(
            f"no resolver for sentence shape {type(sentence).__name__}"
        ) from None
    return handler(sentence, ctx)
