"""
Timephrase — TimeSpec
Result of one resolution: a relative offset or an absolute moment.

Usage:
    spec = resolver.resolve(In(amount="5", unit="minutes"))
    spec                       # Relative(amount=5, unit=<DurationUnit.MINUTE>)
    spec.to_datetime(now)      # now + 5 minutes
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from timephrase.core import gregorian
from timephrase.core.lexicon import DurationUnit


@dataclass(frozen=True)
class Relative:
    amount: int
    unit: DurationUnit

    def to_datetime(self, now: datetime) -> datetime:
        """
        Apply the offset to `now`; months and years clamp to the last valid day.
        Raises InvalidDate when the result falls outside years 1..9999.
        """
        return gregorian.add_duration(now, self.amount, self.unit.value)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "relative", "amount": self.amount, "unit": self.unit.value}


@dataclass(frozen=True)
class Absolute:
    at: datetime

    def to_datetime(self, now: datetime | None = None) -> datetime:
        return self.at

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "absolute", "at": self.at.isoformat()}


TimeSpec = Union[Relative, Absolute]
