"""Display strings for dates under the Hebrew or Gregorian regime.

Every public function here is total: bad input comes back as one of the
sentinel phrases (or an empty string for the relative labels), never as an
exception.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from .config import get_settings
from .const import (
    GREGORIAN_MONTHS, GREGORIAN_WEEKDAYS, LANG_EN, PREF_GREGORIAN, PREF_HEBREW,
    phrase,
)
from .converter import hebrew_month_name, hebrew_weekday_name, parse_date, to_hebrew
from .converter import today as local_today
from .gematria import GERESH, encode

_LOGGER = logging.getLogger(__name__)


def _language() -> str:
    return get_settings().language


def _day_numeral(day: int) -> str:
    text = encode(day)
    return text + GERESH if len(text) == 1 else text


def hebrew_string(g: date, include_weekday: bool = False) -> str:
    h = to_hebrew(g)
    text = f"{_day_numeral(h.day)} {hebrew_month_name(h.month, h.year)} {encode(h.year)}"
    if include_weekday:
        text = f"יום {hebrew_weekday_name(g)}, {text}"
    return text


def gregorian_string(g: date, include_weekday: bool = False, language: Optional[str] = None) -> str:
    lang = language or _language()
    if lang not in GREGORIAN_MONTHS:
        lang = LANG_EN
    text = f"{g.day} {GREGORIAN_MONTHS[lang][g.month - 1]} {g.year}"
    if include_weekday:
        text = f"{GREGORIAN_WEEKDAYS[lang][g.weekday()]} {text}"
    return text


def format_date(value: Any, preference: Optional[str] = None, include_weekday: Optional[bool] = None) -> str:
    """Render ``value`` for display.

    ``preference`` and ``include_weekday`` default to the configured values.
    Missing input gives "no date available", unparseable input "invalid
    date", and a conversion failure "date error".
    """
    settings = get_settings()
    lang = settings.language
    if preference is None:
        preference = settings.date_preference
    if include_weekday is None:
        include_weekday = settings.include_weekday

    if value is None or value == "":
        return phrase("no_date", lang)
    g = parse_date(value)
    if g is None:
        return phrase("invalid_date", lang)

    try:
        if preference == PREF_GREGORIAN:
            return gregorian_string(g, include_weekday, lang)
        if preference != PREF_HEBREW:
            _LOGGER.debug("unknown date preference %r, using hebrew", preference)
        return hebrew_string(g, include_weekday)
    except Exception as exc:
        _LOGGER.warning("failed to format %r: %s", value, exc, exc_info=True)
        return phrase("date_error", lang)


def today_string(preference: Optional[str] = None, include_weekday: Optional[bool] = None) -> str:
    return format_date(local_today(), preference, include_weekday)


def relative_label(value: Any, today: Optional[date] = None) -> str:
    """Today/tomorrow/day after/"in N days"; empty for past or bad input."""
    target = parse_date(value)
    if target is None:
        return ""
    if today is None:
        today = local_today()
    delta = (target - today).days
    lang = _language()
    if delta < 0:
        return ""
    if delta == 0:
        return phrase("today", lang)
    if delta == 1:
        return phrase("tomorrow", lang)
    if delta == 2:
        return phrase("day_after", lang)
    return phrase("in_days", lang, n=delta)


def label_with_relative(value: Any, preference: Optional[str] = None, today: Optional[date] = None) -> str:
    """Formatted date followed by the relative label in parentheses, if any."""
    text = format_date(value, preference)
    relative = relative_label(value, today)
    return f"{text} ({relative})" if relative else text


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_timestamp(value: Any) -> Optional[datetime]:
    tz = get_settings().tzinfo()
    if isinstance(value, datetime):
        stamp = value
    elif isinstance(value, date):
        stamp = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            stamp = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            _LOGGER.debug("unparseable timestamp %r", value)
            return None
    else:
        return None
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone(tz).replace(tzinfo=None)
    return stamp


def _local_now(now: Optional[datetime]) -> datetime:
    if now is None:
        now = datetime.now(get_settings().tzinfo())
    if now.tzinfo is not None:
        now = now.astimezone(get_settings().tzinfo()).replace(tzinfo=None)
    return now


def _hours(n: int, lang: str) -> str:
    return phrase("hour", lang) if n == 1 else phrase("hours", lang, n=n)


def relative_posted(timestamp: Any, preference: Optional[str] = None, now: Optional[datetime] = None) -> str:
    """Coarse "time ago" label for activity timestamps.

    Breakpoints are 60 seconds, one hour and one day; one and two whole days
    read as yesterday and the day before, anything older as the full date.
    """
    lang = _language()
    if _is_missing(timestamp):
        return phrase("no_date", lang)
    stamp = _parse_timestamp(timestamp)
    if stamp is None:
        return phrase("invalid_date", lang)
    seconds = int((_local_now(now) - stamp).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if seconds < 60:
        return phrase("seconds_ago", lang)
    if minutes < 60:
        return phrase("ago", lang, what=phrase("minutes", lang, n=minutes))
    if hours < 24:
        return phrase("ago", lang, what=_hours(hours, lang))
    if days == 1:
        return phrase("yesterday", lang)
    if days == 2:
        return phrase("day_before", lang)
    return phrase("on_date", lang, date=format_date(stamp.date(), preference, False))


def posted_details(timestamp: Any, now: Optional[datetime] = None) -> str:
    """Calendar-day based variant of :func:`relative_posted` that shows the clock time."""
    lang = _language()
    if _is_missing(timestamp):
        return phrase("no_date", lang)
    stamp = _parse_timestamp(timestamp)
    if stamp is None:
        return phrase("invalid_date", lang)
    current = _local_now(now)
    clock = stamp.strftime("%H:%M")
    day_gap = (current.date() - stamp.date()).days

    if day_gap <= 0:
        seconds = int((current - stamp).total_seconds())
        if seconds < 60:
            return phrase("seconds_ago", lang)
        if seconds < 3600:
            return phrase("ago", lang, what=phrase("minutes", lang, n=seconds // 60))
        hours, rest = divmod(seconds, 3600)
        what = _hours(hours, lang)
        if rest // 60:
            what = phrase("and", lang, a=what, b=phrase("minutes", lang, n=rest // 60))
        return phrase("ago", lang, what=what)
    if day_gap == 1:
        return phrase("at_time", lang, day=phrase("yesterday", lang), time=clock)
    if day_gap == 2:
        return phrase("at_time", lang, day=phrase("day_before", lang), time=clock)
    return phrase("at_time", lang, day=stamp.strftime("%d.%m.%Y"), time=clock)

