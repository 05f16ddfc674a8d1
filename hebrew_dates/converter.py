"""Conversion between Gregorian dates and Hebrew (year, month, day) triples.

Day counting is delegated to pyluach; this module owns the value types, the
clamping policy for structurally invalid Hebrew dates, month naming and the
round-trip definition of month length.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Dict, List, Optional, Tuple

from pyluach.dates import HebrewDate as PHebrewDate

from .config import get_settings
from .const import (
    ADAR_ALEPH, ADAR_BET, HEBREW_MONTH_NAMES, HEBREW_WEEKDAYS, INVALID_MONTH_NAME,
    LEAP_CYCLE_POSITIONS, YEAR_MONTH_ORDER,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class HebrewDate:
    year: int
    month: int
    day: int

    def as_dict(self) -> Dict[str, int]:
        return {"day": self.day, "month": self.month, "year": self.year}


@dataclass(frozen=True)
class MonthDescriptor:
    value: int
    name: str


def is_leap(year: int) -> bool:
    """Leap when the year sits at cycle position 3, 6, 8, 11, 14, 17 or 19.

    Position 19 is residue 0, so the test is ``year % 19``, not
    ``(year - 1) % 19``; year 5784 (residue 8) is leap, 5785 is not.
    """
    return year % 19 in LEAP_CYCLE_POSITIONS


def last_month(year: int) -> int:
    return 13 if is_leap(year) else 12


def hebrew_month_name(month: int, year: int) -> str:
    if month == 12:
        return ADAR_ALEPH if is_leap(year) else HEBREW_MONTH_NAMES[12]
    if month == 13:
        # Adar II only exists in leap years
        return ADAR_BET if is_leap(year) else INVALID_MONTH_NAME
    return HEBREW_MONTH_NAMES.get(month, INVALID_MONTH_NAME)


def hebrew_weekday_name(day: date) -> str:
    return HEBREW_WEEKDAYS[day.weekday()]


def months_for_year(year: int) -> List[MonthDescriptor]:
    """Months of ``year`` in calendar-grid order, Tishrei first."""
    leap = is_leap(year)
    return [
        MonthDescriptor(m, hebrew_month_name(m, year))
        for m in YEAR_MONTH_ORDER
        if m != 13 or leap
    ]


def _clamp_year_month(year: int, month: int) -> Tuple[int, int]:
    y = max(1, int(year))
    m = min(max(1, int(month)), last_month(y))
    if (y, m) != (year, month):
        _LOGGER.warning("clamped Hebrew year/month %s/%s to %s/%s", year, month, y, m)
    return y, m


def days_in_month(month: int, year: int) -> int:
    """Return 29 or 30.

    Day 30 is probed through a Hebrew -> Gregorian -> Hebrew round trip: the
    Gregorian date 29 days after the 1st is converted back, and the month has
    30 days only if that date still belongs to the requested month. Heshvan
    and Kislev change length from year to year, so there is no fixed table.
    """
    year, month = _clamp_year_month(year, month)
    probe = PHebrewDate(year, month, 1).to_greg() + 29
    back = probe.to_heb()
    return 30 if (back.year, back.month) == (year, month) else 29


def clamp(h: HebrewDate) -> HebrewDate:
    """Pull an out-of-range Hebrew date to the nearest valid one."""
    year, month = _clamp_year_month(h.year, h.month)
    day = min(max(1, int(h.day)), days_in_month(month, year))
    out = HebrewDate(year, month, day)
    if out != h:
        _LOGGER.warning("clamped invalid Hebrew date %s to %s", h, out)
    return out


def to_hebrew(g: date) -> HebrewDate:
    h = PHebrewDate.from_pydate(g)
    return HebrewDate(h.year, h.month, h.day)


def to_gregorian(h: HebrewDate) -> date:
    """Inverse of :func:`to_hebrew`.

    Invalid calendar values are clamped rather than rejected. Raises
    ``ValueError`` only when the result falls outside ``datetime.date``.
    """
    valid = clamp(h)
    return PHebrewDate(valid.year, valid.month, valid.day).to_pydate()


def parse_date(value: Any, tz: Optional[tzinfo] = None) -> Optional[date]:
    """Coerce a date, datetime or ISO string to a civil date, or None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz or get_settings().tzinfo())
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        head = value.strip().split("T", 1)[0].split(" ", 1)[0]
        try:
            return date.fromisoformat(head)
        except ValueError:
            _LOGGER.debug("unparseable date string %r", value)
            return None
    _LOGGER.debug("unsupported date input %r", value)
    return None


def today(tz: Optional[tzinfo] = None) -> date:
    return datetime.now(tz or get_settings().tzinfo()).date()


def today_iso() -> str:
    return today().isoformat()


def hebrew_today(now: Optional[datetime] = None, nightfall: Optional[time] = None) -> HebrewDate:
    """Hebrew date of the current moment.

    With a nightfall time (argument or setting) the Hebrew date rolls over
    once the local clock reaches it, instead of at midnight.
    """
    settings = get_settings()
    if now is None:
        now = datetime.now(settings.tzinfo())
    if nightfall is None:
        nightfall = settings.nightfall
    day = now.date()
    if nightfall is not None and now.time() >= nightfall:
        day += timedelta(days=1)
    return to_hebrew(day)


def gregorian_to_hebrew_parts(value: Any) -> Optional[Dict[str, Any]]:
    g = parse_date(value)
    if g is None:
        return None
    try:
        h = to_hebrew(g)
    except (ValueError, OverflowError) as exc:
        _LOGGER.warning("cannot convert %s to a Hebrew date: %s", g, exc)
        return None
    parts: Dict[str, Any] = h.as_dict()
    parts["month_name"] = hebrew_month_name(h.month, h.year)
    parts["day_of_week"] = (g.weekday() + 1) % 7  # Sunday is 0
    return parts


def hebrew_parts_to_gregorian_iso(day: int, month: int, year: int) -> Optional[str]:
    try:
        return to_gregorian(HebrewDate(int(year), int(month), int(day))).isoformat()
    except (TypeError, ValueError, OverflowError) as exc:
        _LOGGER.warning("cannot convert Hebrew date %s/%s/%s: %s", day, month, year, exc)
        return None
