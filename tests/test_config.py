"""
Tests for configuration loading
"""
import pytest
from pydantic import ValidationError

from timephrase.config import Config
from timephrase.core.clock import FixedClock
from timephrase.core.engine import TimeResolver


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("TIMEPHRASE_TIMEZONE", "TIMEPHRASE_ROLL_PAST_TIMES", "TIMEPHRASE_YEAR_POLICY"):
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of the way
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    cfg = Config()
    assert cfg.timezone == ""
    assert cfg.roll_past_times is True
    assert cfg.year_policy == "nearest_future"


def test_from_environment(clean_env):
    clean_env.setenv("TIMEPHRASE_TIMEZONE", "Europe/Istanbul")
    clean_env.setenv("TIMEPHRASE_ROLL_PAST_TIMES", "false")
    clean_env.setenv("TIMEPHRASE_YEAR_POLICY", "current_year")
    cfg = Config()
    assert cfg.timezone == "Europe/Istanbul"
    assert cfg.roll_past_times is False
    assert cfg.year_policy == "current_year"


def test_from_env_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text("TIMEPHRASE_YEAR_POLICY=current_year\n", encoding="utf-8")
    assert Config().year_policy == "current_year"


def test_unknown_year_policy_rejected(clean_env):
    clean_env.setenv("TIMEPHRASE_YEAR_POLICY", "nearest_past")
    with pytest.raises(ValidationError):
        Config()


def test_by_field_name(clean_env):
    assert Config(roll_past_times=False).roll_past_times is False


def test_resolver_picks_up_global_config(monkeypatch):
    from timephrase import config as config_module

    monkeypatch.setattr(config_module.config, "roll_past_times", False)
    monkeypatch.setattr(config_module.config, "year_policy", "current_year")
    r = TimeResolver(FixedClock(None))
    assert r.roll_past_times is False
    assert r.year_policy == "current_year"
