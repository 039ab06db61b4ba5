"""
Timephrase — Resolution Engine
Turns a matched sentence into a TimeSpec against a reference clock.

The clock is read once at the start of each call and that single reading is
used for the whole resolution. The engine keeps no state between calls, so
one instance can serve concurrent callers.

Usage:
    from timephrase.core.engine import resolver
    spec = resolver.resolve(Tomorrow(at=AtClause("09", "30")))   # raises on bad input
    result = resolver.try_resolve(sentence)                       # never raises
    if result.success:
        print(result.spec.to_dict())
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from timephrase.core.clock import SystemClock
from timephrase.core.errors import InternalInvariantViolation, ResolutionError
from timephrase.core.resolvers import Context, resolve_sentence
from timephrase.core.sentence import ParsedSentence
from timephrase.core.timespec import TimeSpec
from timephrase.core.validation import YearPolicy, year_policies

log = logging.getLogger("timephrase.engine")


@dataclass
class Resolution:
    success: bool
    spec: Optional[TimeSpec] = None
    error: str = ""                # message for the end user / logs
    kind: str = ""                 # ResolutionError.kind when failed


class TimeResolver:
    """
    Policies default to the global config:
      roll_past_times  bare "at HH:MM" rolls to tomorrow once the time has passed
      year_policy      how "on the DAY of MONTH" picks its year

    An unknown year_policy raises ValueError here, before any sentence is seen.
    """

    def __init__(
        self,
        clock=None,
        *,
        roll_past_times: bool | None = None,
        year_policy: YearPolicy | None = None,
    ) -> None:
        from timephrase.config import config

        self._clock = clock or SystemClock()
        self.roll_past_times = (
            config.roll_past_times if roll_past_times is None else roll_past_times
        )
        if year_policy is None:
            year_policy = config.year_policy
        if year_policy not in year_policies():
            raise ValueError(
                f"unknown year policy: {year_policy!r} (expected one of {year_policies()})"
            )
        self.year_policy: YearPolicy = year_policy

    def resolve(self, sentence: ParsedSentence) -> TimeSpec:
        """Resolve one sentence. Raises InvalidTime / InvalidDate / InternalInvariantViolation."""
        ctx = Context(
            now=self._clock.now(),
            roll_past_times=self.roll_past_times,
            year_policy=self.year_policy,
        )
        spec = resolve_sentence(sentence, ctx)
        log.debug("Resolved %r at %s → %r", sentence, ctx.now.isoformat(), spec)
        return spec

    def try_resolve(self, sentence: ParsedSentence) -> Resolution:
        """Same as resolve(), with the error returned instead of raised."""
        try:
            return Resolution(success=True, spec=self.resolve(sentence))
        except InternalInvariantViolation as exc:
            log.error("Matcher/resolver mismatch on %r: %s", sentence, exc)
            return Resolution(success=False, error=str(exc), kind=exc.kind)
        except ResolutionError as exc:
            log.debug("Rejected %r: %s", sentence, exc)
            return Resolution(success=False, error=str(exc), kind=exc.kind)


# Singleton
resolver = TimeResolver()
