"""
Timephrase — Configuration
Reads from environment variables / .env file.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from timephrase.core.validation import YearPolicy


class Config(BaseSettings):
    # ── Reference clock ───────────────────────────────────────────────────
    # IANA name ("Europe/Istanbul"); empty → naive local time
    timezone: str = Field("", alias="TIMEPHRASE_TIMEZONE")

    # ── Resolution policies ───────────────────────────────────────────────
    # Bare "at HH:MM" whose time already passed today → tomorrow
    roll_past_times: bool = Field(True, alias="TIMEPHRASE_ROLL_PAST_TIMES")
    # Year picked for "on the DAY of MONTH"
    year_policy: YearPolicy = Field("nearest_future", alias="TIMEPHRASE_YEAR_POLICY")

    model_config = {"env_file": ".env", "extra": "ignore", "populate_by_name": True}


config = Config()
