"""Runtime options for date rendering and the liturgical lookups.

Values come from the environment (prefix ``HEBREW_DATES_``) or a ``.env`` file
in the working directory, and can be overridden in-process with
:func:`configure`.
"""
from __future__ import annotations

import logging
from datetime import time
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import DEFAULT_PREFERENCE, LANG_EN

_LOGGER = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HEBREW_DATES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    date_preference: Literal["hebrew", "gregorian"] = DEFAULT_PREFERENCE
    include_weekday: bool = False
    # vocabulary for sentinels, relative phrases and Gregorian names
    language: Literal["en", "he"] = LANG_EN
    # Israel festival/parsha schedule (one day of Yom Tov)
    israel: bool = True
    hebrew_names: bool = True
    time_zone: Optional[str] = None
    # local time after which "today" rolls to the next Hebrew date
    nightfall: Optional[time] = None
    cache_max_entries: Optional[int] = Field(default=None, ge=1)
    year_options_span: int = Field(default=10, ge=1)

    @field_validator("time_zone")
    @classmethod
    def _check_time_zone(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone {v!r}") from exc
        return v

    def tzinfo(self) -> Optional[ZoneInfo]:
        return ZoneInfo(self.time_zone) if self.time_zone else None


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def configure(**overrides) -> Settings:
    """Rebuild the process-wide settings and reset the resolver cache.

    Keyword arguments take precedence over the environment. Calling with no
    arguments reloads from the environment alone.
    """
    from . import liturgy

    global _SETTINGS
    _SETTINGS = Settings(**overrides)
    _LOGGER.debug("settings configured: %s", _SETTINGS.model_dump())
    liturgy.reset_resolver()
    return _SETTINGS
