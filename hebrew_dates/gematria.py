"""Hebrew letter numerals (gematriya) for calendar days and years."""
from __future__ import annotations

import logging
import math
from numbers import Real

_LOGGER = logging.getLogger(__name__)

GERESH = "׳"
GERSHAYIM = "״"

FALLBACK = "א"

# calendar-day numerals; 15/16 avoid the divine-name spellings
_DAY_NUMERALS = (
    "",
    "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט", "י",
    "י״א", "י״ב", "י״ג", "י״ד", "ט״ו", "ט״ז", "י״ז", "י״ח", "י״ט", "כ",
    "כ״א", "כ״ב", "כ״ג", "כ״ד", "כ״ה", "כ״ו", "כ״ז", "כ״ח", "כ״ט", "ל",
)

_UNITS = {1: "א", 2: "ב", 3: "ג", 4: "ד", 5: "ה", 6: "ו", 7: "ז", 8: "ח", 9: "ט"}
_TENS = {1: "י", 2: "כ", 3: "ל", 4: "מ", 5: "נ", 6: "ס", 7: "ע", 8: "פ", 9: "צ"}
_HUNDREDS = {1: "ק", 2: "ר", 3: "ש", 4: "ת"}


def _below_hundred(n: int) -> str:
    if n == 15:
        return "טו"
    if n == 16:
        return "טז"
    return _TENS.get(n // 10, "") + _UNITS.get(n % 10, "")


def _letters(n: int) -> str:
    """Raw letters for 1..4999 without punctuation."""
    hundreds = n // 100
    out = "ת" * (hundreds // 4) + _HUNDREDS.get(hundreds % 4, "")
    return out + _below_hundred(n % 100)


def _punctuate(letters: str, *, single_geresh: bool) -> str:
    if len(letters) >= 2:
        return letters[:-1] + GERSHAYIM + letters[-1]
    if len(letters) == 1 and single_geresh:
        return letters + GERESH
    return letters


def _coerce(n) -> int | None:
    if isinstance(n, bool) or not isinstance(n, Real):
        return None
    if isinstance(n, float) and not math.isfinite(n):
        return None
    return int(n)


def encode(n) -> str:
    """Return the gematriya for ``n``.

    Values up to 30 come from the calendar-day table, values up to 4999 are
    composed letter by letter, and year-shaped values (5000 and above) drop
    the thousands and carry a geresh or gershayim. Anything that is not a
    positive finite number degrades to the numeral for 1.
    """
    value = _coerce(n)
    if value is None or value <= 0:
        _LOGGER.debug("gematriya fallback for %r", n)
        return FALLBACK

    if value <= 30:
        return _DAY_NUMERALS[value]

    if value < 5000:
        return _punctuate(_letters(value), single_geresh=False)

    remainder = value % 1000
    if remainder == 0:
        thousands = _UNITS.get((value // 1000) % 10)
        if not thousands:
            _LOGGER.debug("gematriya fallback for round value %r", n)
            return FALLBACK
        return thousands + GERESH
    return _punctuate(_letters(remainder), single_geresh=True)

