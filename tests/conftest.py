"""
Pytest configuration and fixtures
"""
from datetime import datetime

import pytest

from timephrase.core.clock import FixedClock
from timephrase.core.engine import TimeResolver
from timephrase.core.resolvers import Context


# Wednesday
NOW = datetime(2023, 6, 14, 10, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def ctx():
    return Context(now=NOW)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def make_resolver():
    """Build a resolver frozen at a given moment, default policies pinned."""
    def _make(now=NOW, roll_past_times=True, year_policy="nearest_future"):
        return TimeResolver(
            FixedClock(now),
            roll_past_times=roll_past_times,
            year_policy=year_policy,
        )
    return _make
