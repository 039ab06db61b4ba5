"""
Timephrase — Composition
Merges a date produced by ON / NEXT / TOMORROW / IN_ALT with an optional
trailing AT clause.

Date and time are independent: the date part comes from the date resolver,
the time part from the clock clause (00:00 when absent), and neither is
checked against the other.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from timephrase.core import gregorian
from timephrase.core.timespec import Absolute
from timephrase.core.validation import MIDNIGHT, ClockTime

logger = logging.getLogger(__name__)


def overlay(day: datetime, clock: Optional[ClockTime] = None) -> Absolute:
    """Keep the date (and tzinfo) of `day`, replace its time of day."""
    clock = clock or MIDNIGHT
    return Absolute(day.replace(hour=clock.hour, minute=clock.minute, second=0, microsecond=0))


def next_occurrence(now: datetime, clock: ClockTime, roll_past: bool = True) -> Absolute:
    """
    Bare "at HH:MM": today at that time.

    With roll_past on (config.roll_past_times), a time that is not after now
    moves to tomorrow, so "at 08:00" said at 09:00 means tomorrow morning.
    With it off, the result stays on today's date even if already past.
    """
    today = overlay(now, clock)
    if roll_past and not gregorian.is_after(today.at, now):
        logger.debug("%s already passed at %s, rolling to tomorrow", clock, now.isoformat())
        return overlay(gregorian.add_days(now, 1), clock)
    return today
