"""
Timephrase — Reference Clock
Supplies "now". The engine reads it exactly once per resolution.

    SystemClock()                         → wall clock, config.timezone if set
    FixedClock(datetime(2024, 1, 1))      → frozen, for tests
"""
from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo


class SystemClock:
    def __init__(self, timezone: str | None = None) -> None:
        if timezone is None:
            from timephrase.config import config
            timezone = config.timezone
        # Empty string → naive local time
        self._tz = ZoneInfo(timezone) if timezone else None

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now
