"""
Timephrase — Parse Tree

Typed output of the external grammar matcher. Six sentence shapes, each a
frozen dataclass holding the matched sub-fields as plain strings:

    in 5 minutes                 → In(amount="5", unit="minutes")
    in three days at 08:00       → InAlt(cardinal="three", at=AtClause("08", "00"))
    at 14:30 on the 3rd of june  → At(clock=AtClause("14", "30"), on=OnClause("3rd", "june"))
    on the 3rd of june at 10:15  → On(date=OnClause("3rd", "june"), at=AtClause("10", "15"))
    next monday at 09:00         → Next(target="monday", at=AtClause("09", "00"))
    tomorrow                     → Tomorrow()

The set of shapes is closed: ParsedSentence is the union of all six.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


# ── Clauses ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AtClause:
    hour: str
    minute: str


@dataclass(frozen=True)
class OnClause:
    day: str      # ordinal token, "3rd"
    month: str    # month name, "june"


# ── Sentence shapes ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class In:
    amount: str
    unit: str     # as matched, trailing "s" included


@dataclass(frozen=True)
class InAlt:
    cardinal: str
    at: Optional[AtClause] = None


@dataclass(frozen=True)
class At:
    clock: AtClause
    on: Optional[OnClause] = None


@dataclass(frozen=True)
class On:
    date: OnClause
    at: Optional[AtClause] = None


@dataclass(frozen=True)
class Next:
    target: str   # weekday name | "week" | "month"
    at: Optional[AtClause] = None


@dataclass(frozen=True)
class Tomorrow:
    at: Optional[AtClause] = None


ParsedSentence = Union[In, InAlt, At, On, Next, Tomorrow]
