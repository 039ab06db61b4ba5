"""
Tests for the resolution engine: clock handling, policies and error wrapping
"""
import logging
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from timephrase.core.clock import FixedClock, SystemClock
from timephrase.core.engine import Resolution, TimeResolver
from timephrase.core.errors import InvalidDate
from timephrase.core.lexicon import DurationUnit
from timephrase.core.sentence import At, AtClause, In, InAlt, Next, On, OnClause, Tomorrow
from timephrase.core.timespec import Absolute, Relative


class CountingClock:
    def __init__(self, now):
        self._now = now
        self.reads = 0

    def now(self):
        self.reads += 1
        return self._now


class TestResolve:

    def test_in(self, make_resolver):
        assert make_resolver().resolve(In("5", "minutes")) == Relative(5, DurationUnit.MINUTE)

    def test_tomorrow_at(self, make_resolver):
        r = make_resolver(datetime(2023, 6, 14, 22, 0))
        assert r.resolve(Tomorrow(AtClause("09", "30"))) == Absolute(datetime(2023, 6, 15, 9, 30))

    def test_in_alt_at(self, make_resolver):
        r = make_resolver(datetime(2023, 6, 14, 10, 0))
        assert r.resolve(InAlt("three", AtClause("08", "00"))) == Absolute(datetime(2023, 6, 17, 8, 0))

    def test_leap_day_against_fixed_clock(self, make_resolver):
        sentence = On(OnClause("29th", "february"))
        assert make_resolver(datetime(2024, 1, 1)).resolve(sentence) == Absolute(datetime(2024, 2, 29))
        assert make_resolver(datetime(2024, 3, 1)).resolve(sentence) == Absolute(datetime(2028, 2, 29))

    def test_clock_read_once_per_call(self):
        clock = CountingClock(datetime(2023, 6, 14, 10, 0))
        r = TimeResolver(clock, roll_past_times=True, year_policy="nearest_future")
        r.resolve(At(AtClause("09", "00"), OnClause("3rd", "june")))
        assert clock.reads == 1
        r.resolve(Next("friday", AtClause("09", "00")))
        assert clock.reads == 2

    def test_follows_moving_clock(self):
        clock = FixedClock(datetime(2023, 6, 14, 10, 0))
        r = TimeResolver(clock, roll_past_times=True, year_policy="nearest_future")
        assert r.resolve(Tomorrow()) == Absolute(datetime(2023, 6, 15))
        clock.set(datetime(2023, 6, 20, 10, 0))
        assert r.resolve(Tomorrow()) == Absolute(datetime(2023, 6, 21))

    def test_rollover_policy_is_per_resolver(self, make_resolver):
        sentence = At(AtClause("08", "00"))
        now = datetime(2023, 6, 14, 10, 0)
        assert make_resolver(now).resolve(sentence).at.day == 15
        assert make_resolver(now, roll_past_times=False).resolve(sentence).at.day == 14

    def test_year_policy_is_per_resolver(self, make_resolver):
        sentence = On(OnClause("3rd", "june"))
        now = datetime(2023, 6, 14, 10, 0)
        assert make_resolver(now).resolve(sentence).at.year == 2024
        assert make_resolver(now, year_policy="current_year").resolve(sentence).at.year == 2023

    def test_timezone_aware_now(self, make_resolver):
        tz = ZoneInfo("Europe/Istanbul")
        r = make_resolver(datetime(2023, 6, 14, 22, 0, tzinfo=tz))
        spec = r.resolve(Tomorrow(AtClause("09", "30")))
        assert spec.at == datetime(2023, 6, 15, 9, 30, tzinfo=tz)
        assert spec.at.tzinfo is tz


class TestTryResolve:

    def test_success(self, make_resolver):
        result = make_resolver().try_resolve(In("2", "hours"))
        assert result == Resolution(success=True, spec=Relative(2, DurationUnit.HOUR))

    def test_invalid_time(self, make_resolver):
        result = make_resolver().try_resolve(At(AtClause("24", "00")))
        assert not result.success
        assert result.spec is None
        assert result.kind == "invalid_time"
        assert "hour" in result.error

    def test_invalid_date(self, make_resolver):
        result = make_resolver().try_resolve(On(OnClause("31st", "april")))
        assert not result.success
        assert result.kind == "invalid_date"

    def test_defect_is_logged_as_error(self, make_resolver, caplog):
        with caplog.at_level(logging.DEBUG, logger="timephrase.engine"):
            result = make_resolver().try_resolve(InAlt("one"))
        assert result.kind == "internal_invariant_violation"
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "mismatch" in errors[0].getMessage()

    def test_user_error_is_not_logged_as_error(self, make_resolver, caplog):
        with caplog.at_level(logging.DEBUG, logger="timephrase.engine"):
            make_resolver().try_resolve(At(AtClause("10", "60")))
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestSystemClock:

    def test_naive_by_default(self):
        assert SystemClock(timezone="").now().tzinfo is None

    def test_timezone(self):
        assert SystemClock(timezone="UTC").now().tzinfo == ZoneInfo("UTC")


class TestPolicyValidation:

    def test_unknown_year_policy_rejected_at_construction(self):
        with pytest.raises(ValueError, match="nearest_past"):
            TimeResolver(FixedClock(datetime(2023, 6, 14)), year_policy="nearest_past")

    def test_empty_year_policy_is_not_replaced_by_default(self):
        with pytest.raises(ValueError):
            TimeResolver(FixedClock(datetime(2023, 6, 14)), year_policy="")

    def test_explicit_policies_accepted(self):
        for policy in ("nearest_future", "current_year"):
            r = TimeResolver(FixedClock(datetime(2023, 6, 14)), year_policy=policy)
            assert r.try_resolve(On(OnClause("3rd", "june"))).success


class TestOutOfRange:

    def test_tomorrow_past_year_9999(self, make_resolver):
        result = make_resolver(datetime(9999, 12, 31, 10, 0)).try_resolve(Tomorrow())
        assert not result.success
        assert result.kind == "invalid_date"

    def test_huge_relative_offset_to_datetime(self, make_resolver):
        spec = make_resolver(datetime(2023, 6, 14)).resolve(In("99999", "years"))
        with pytest.raises(InvalidDate):
            spec.to_datetime(datetime(2023, 6, 14))
