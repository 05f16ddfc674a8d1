"""Weekly Torah portion and holiday labels for Gregorian dates.

Labels come from pyluach's festival and parsha schedule (Israel variant by
default) and are memoized per ISO date. Calendar facts never change, so the
cache is append-only and unbounded unless ``cache_max_entries`` is set.
"""
from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from datetime import date, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional

from pyluach import parshios
from pyluach.dates import GregorianDate as PGregorianDate, HebrewDate as PHebrewDate

from .config import Settings, get_settings
from .const import (
    DOUBLE_PARASHA_SEPARATOR, HOLIDAY_SEPARATOR, PARASHA_BESHALACH, ROSH_CHODESH,
    special_shabbat_name,
)
from .converter import HebrewDate, days_in_month, hebrew_month_name, parse_date, to_gregorian

_LOGGER = logging.getLogger(__name__)

SATURDAY = 5  # date.weekday()

_MISSING = object()


class DateCache:
    """ISO-date keyed mapping; least recently used entries go first when bounded."""

    def __init__(self, max_entries: Optional[int] = None):
        self.max_entries = max_entries
        self._data: "OrderedDict[str, Optional[str]]" = OrderedDict()

    def get(self, key: str) -> Any:
        if key not in self._data:
            return _MISSING
        if self.max_entries:
            self._data.move_to_end(key)
        return self._data[key]

    def set(self, key: str, value: Optional[str]) -> None:
        self._data[key] = value
        if self.max_entries:
            self._data.move_to_end(key)
            while len(self._data) > self.max_entries:
                self._data.popitem(last=False)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class LiturgicalResolver:
    def __init__(self, israel: bool = True, hebrew: bool = True, cache_max_entries: Optional[int] = None):
        self.israel = israel
        self.hebrew = hebrew
        self.parasha_cache = DateCache(cache_max_entries)
        self.holiday_cache = DateCache(cache_max_entries)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LiturgicalResolver":
        s = settings or get_settings()
        return cls(israel=s.israel, hebrew=s.hebrew_names, cache_max_entries=s.cache_max_entries)

    def clear(self) -> None:
        self.parasha_cache.clear()
        self.holiday_cache.clear()

    # ——— lookups ———

    def parasha(self, value: Any) -> Optional[str]:
        """Portion read on the given Saturday; None on any other day."""
        return self._cached(value, self.parasha_cache, self._compute_parasha, "parasha")

    def holiday(self, value: Any) -> Optional[str]:
        return self._cached(value, self.holiday_cache, self._compute_holiday, "holiday")

    async def async_parasha(self, value: Any) -> Optional[str]:
        return self.parasha(value)

    async def async_holiday(self, value: Any) -> Optional[str]:
        return self.holiday(value)

    async def async_prefetch(self, values: Iterable[Any]) -> Dict[str, Dict[str, Optional[str]]]:
        """Resolve many dates concurrently; the mapping is returned after one join."""
        days: List[date] = []
        for v in values:
            d = parse_date(v)
            if d is not None and d not in days:
                days.append(d)

        async def _one(d: date) -> Dict[str, Optional[str]]:
            parasha, holiday = await asyncio.gather(self.async_parasha(d), self.async_holiday(d))
            return {"parasha": parasha, "holiday": holiday}

        results = await asyncio.gather(*(_one(d) for d in days))
        return {d.isoformat(): r for d, r in zip(days, results)}

    async def async_prefetch_month(
        self, year: int, month: int, *, saturdays_only: bool = True
    ) -> Dict[str, Dict[str, Optional[str]]]:
        """Prefetch the days of one Hebrew month (Saturdays only by default)."""
        first = to_gregorian(HebrewDate(year, month, 1))
        days = [first + timedelta(days=i) for i in range(days_in_month(month, year))]
        if saturdays_only:
            days = [d for d in days if d.weekday() == SATURDAY]
        return await self.async_prefetch(days)

    def _cached(self, value: Any, cache: DateCache, compute: Callable[[date], Optional[str]], kind: str) -> Optional[str]:
        day = parse_date(value)
        if day is None:
            _LOGGER.debug("%s lookup skipped, unparseable date %r", kind, value)
            return None
        key = day.isoformat()
        hit = cache.get(key)
        if hit is not _MISSING:
            _LOGGER.debug("%s cache hit for %s", kind, key)
            return hit
        try:
            result = compute(day)
        except Exception as exc:
            # nothing is stored, a later call retries
            _LOGGER.warning("%s lookup failed for %s: %s", kind, key, exc, exc_info=True)
            return None
        cache.set(key, result)
        return result

    # ——— parasha ———

    def _portion_name(self, number: int) -> str:
        names = parshios.PARSHIOS_HEBREW if self.hebrew else parshios.PARSHIOS
        return names[number]

    def _single_portion(self, shabbos: PGregorianDate) -> Optional[str]:
        numbers = parshios.getparsha(shabbos, israel=self.israel)
        if numbers and len(numbers) == 1:
            return self._portion_name(numbers[0])
        return None

    def _portion_from_year_table(self, shabbos: PGregorianDate) -> Optional[str]:
        heb = shabbos.to_heb()
        numbers = parshios.parshatable(heb.year, israel=self.israel).get(heb)
        if not numbers:
            return None
        return DOUBLE_PARASHA_SEPARATOR.join(self._portion_name(n) for n in numbers)

    def _compute_parasha(self, day: date) -> Optional[str]:
        if day.weekday() != SATURDAY:
            return None
        shabbos = PGregorianDate.from_pydate(day)
        try:
            single = self._single_portion(shabbos)
        except Exception as exc:
            _LOGGER.debug("weekly portion lookup failed for %s, trying year table: %s", day, exc)
            single = None
        if single is not None:
            return single
        # double portions and festival Shabbatot
        return self._portion_from_year_table(shabbos)

    # ——— holidays ———

    @staticmethod
    def _is_rosh_chodesh(heb: PHebrewDate) -> bool:
        return heb.day == 30 or (heb.day == 1 and heb.month != 7)

    def _rosh_chodesh(self, heb: PHebrewDate) -> Optional[str]:
        if not self._is_rosh_chodesh(heb):
            return None
        month = heb + 1 if heb.day == 30 else heb
        if self.hebrew:
            return f"{ROSH_CHODESH[0]} {hebrew_month_name(month.month, month.year)}"
        return f"{ROSH_CHODESH[1]} {month.month_name(False)}"

    def _special_shabbat_keys(self, heb: PHebrewDate) -> List[str]:
        keys: List[str] = []
        four = parshios.four_parshios(heb)
        if four:
            keys.append(four.lower())
        if heb.month == 1 and 8 <= heb.day <= 14:
            keys.append("hagadol")
        if heb.month == 7 and 3 <= heb.day <= 9:
            keys.append("shuva")
        if heb.month == 5 and 3 <= heb.day <= 9:
            keys.append("chazon")
        if heb.month == 5 and 10 <= heb.day <= 16:
            keys.append("nachamu")
        numbers = parshios.getparsha(heb, israel=self.israel)
        if numbers and PARASHA_BESHALACH in numbers:
            keys.append("shira")
        if not self._is_rosh_chodesh(heb) and any(
            self._is_rosh_chodesh(heb + offset) for offset in range(1, 8)
        ):
            keys.append("mevarchim")
        return keys

    def _compute_holiday(self, day: date) -> Optional[str]:
        heb = PGregorianDate.from_pydate(day).to_heb()
        labels: List[str] = []
        name = heb.holiday(israel=self.israel, hebrew=self.hebrew, prefix_day=True)
        if name:
            labels.append(name)
        rosh_chodesh = self._rosh_chodesh(heb)
        if rosh_chodesh:
            labels.append(rosh_chodesh)
        if day.weekday() == SATURDAY:
            labels.extend(special_shabbat_name(k, self.hebrew) for k in self._special_shabbat_keys(heb))
        return HOLIDAY_SEPARATOR.join(labels) if labels else None


_RESOLVER: Optional[LiturgicalResolver] = None


def get_resolver() -> LiturgicalResolver:
    global _RESOLVER
    if _RESOLVER is None:
        _RESOLVER = LiturgicalResolver.from_settings()
    return _RESOLVER


def reset_resolver() -> None:
    global _RESOLVER
    _RESOLVER = None


def clear_cache() -> None:
    get_resolver().clear()


def resolve_parasha(value: Any) -> Optional[str]:
    return get_resolver().parasha(value)


def resolve_holiday(value: Any) -> Optional[str]:
    return get_resolver().holiday(value)


async def async_resolve_parasha(value: Any) -> Optional[str]:
    return await get_resolver().async_parasha(value)


async def async_resolve_holiday(value: Any) -> Optional[str]:
    return await get_resolver().async_holiday(value)


async def async_prefetch(values: Iterable[Any]) -> Dict[str, Dict[str, Optional[str]]]:
    return await get_resolver().async_prefetch(values)


async def async_prefetch_month(year: int, month: int, *, saturdays_only: bool = True) -> Dict[str, Dict[str, Optional[str]]]:
    return await get_resolver().async_prefetch_month(year, month, saturdays_only=saturdays_only)
