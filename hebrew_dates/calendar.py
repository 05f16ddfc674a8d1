"""Hebrew month grid and day titles for a calendar picker.

Nothing here renders; the objects describe what a picker shows for one
Hebrew month (Sunday-first grid) and the per-day titles of a date window.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional, Tuple

from .config import get_settings
from .converter import (
    HebrewDate, clamp, days_in_month, hebrew_month_name, is_leap, months_for_year,
    to_gregorian,
)
from .converter import today as local_today
from .formatting import hebrew_string
from .gematria import encode
from .liturgy import LiturgicalResolver, get_resolver

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayCell:
    day: int
    numeral: str
    iso: str
    weekday: int  # Sunday is 0
    is_today: bool = False
    is_past: bool = False


@dataclass
class MonthView:
    year: int
    month: int
    title: str
    leading_blanks: int
    days: List[DayCell] = field(default_factory=list)


def build_month_view(year: int, month: int, today: Optional[date] = None) -> MonthView:
    first_heb = clamp(HebrewDate(year, month, 1))
    year, month = first_heb.year, first_heb.month
    if today is None:
        today = local_today()

    first = to_gregorian(first_heb)
    cells: List[DayCell] = []
    for n in range(1, days_in_month(month, year) + 1):
        g = first + timedelta(days=n - 1)
        cells.append(DayCell(
            day=n,
            numeral=encode(n),
            iso=g.isoformat(),
            weekday=(g.weekday() + 1) % 7,
            is_today=g == today,
            is_past=g < today,
        ))
    return MonthView(
        year=year,
        month=month,
        title=f"{hebrew_month_name(month, year)} {encode(year)}",
        leading_blanks=(first.weekday() + 1) % 7,
        days=cells,
    )


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months through the Tishrei-first order, crossing years after Elul."""
    h = clamp(HebrewDate(year, month, 1))
    year, month = h.year, h.month
    step = 1 if delta > 0 else -1
    for _ in range(abs(delta)):
        order = [m.value for m in months_for_year(year)]
        idx = order.index(month) + step
        if idx >= len(order):
            year += 1
            month = 7
        elif idx < 0:
            if year <= 1:
                _LOGGER.debug("cannot move before Tishrei of year 1")
                break
            year -= 1
            month = 6
        else:
            month = order[idx]
    return year, month


def shift_year(year: int, month: int, delta: int) -> Tuple[int, int]:
    year = max(1, year + delta)
    if month == 13 and not is_leap(year):
        month = 12
    return year, month


def year_options(center: int, span: Optional[int] = None) -> List[Tuple[int, str]]:
    if span is None:
        span = get_settings().year_options_span
    return [(y, encode(y)) for y in range(max(1, center - span), center + span + 1)]


def quick_select(offset: int, today: Optional[date] = None) -> str:
    """ISO date for the today / tomorrow / day-after shortcuts."""
    if today is None:
        today = local_today()
    return (today + timedelta(days=offset)).isoformat()


def _title(day: date, holiday: Optional[str]) -> str:
    title = hebrew_string(day)
    if holiday:
        title = f"{title} — {holiday}"
    return title


def _window(start: date, end: date) -> List[date]:
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def day_titles(start: date, end: date, resolver: Optional[LiturgicalResolver] = None) -> List[Tuple[date, str]]:
    """One title per civil day from ``start`` to ``end`` inclusive."""
    resolver = resolver or get_resolver()
    return [(d, _title(d, resolver.holiday(d))) for d in _window(start, end)]


async def async_day_titles(
    start: date, end: date, resolver: Optional[LiturgicalResolver] = None
) -> List[Tuple[date, str]]:
    resolver = resolver or get_resolver()
    days = _window(start, end)
    labels = await resolver.async_prefetch(days)
    return [(d, _title(d, labels[d.isoformat()]["holiday"])) for d in days]
