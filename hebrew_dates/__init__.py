from __future__ import annotations
from typing import Final

from .config import Settings, configure, get_settings
from .converter import (
    HebrewDate, MonthDescriptor, days_in_month, gregorian_to_hebrew_parts, hebrew_month_name,
    hebrew_parts_to_gregorian_iso, hebrew_today, is_leap, months_for_year, parse_date,
    to_gregorian, to_hebrew, today_iso,
)
from .formatting import (
    format_date, label_with_relative, posted_details, relative_label, relative_posted,
    today_string,
)
from .gematria import encode
from .liturgy import (
    LiturgicalResolver, async_prefetch, async_prefetch_month, async_resolve_holiday,
    async_resolve_parasha, clear_cache, resolve_holiday, resolve_parasha,
)

__version__: Final = "0.1.0"

__all__ = [
    "HebrewDate",
    "LiturgicalResolver",
    "MonthDescriptor",
    "Settings",
    "async_prefetch",
    "async_prefetch_month",
    "async_resolve_holiday",
    "async_resolve_parasha",
    "clear_cache",
    "configure",
    "days_in_month",
    "encode",
    "format_date",
    "get_settings",
    "gregorian_to_hebrew_parts",
    "hebrew_month_name",
    "hebrew_parts_to_gregorian_iso",
    "hebrew_today",
    "is_leap",
    "label_with_relative",
    "months_for_year",
    "parse_date",
    "posted_details",
    "relative_label",
    "relative_posted",
    "resolve_holiday",
    "resolve_parasha",
    "to_gregorian",
    "to_hebrew",
    "today_iso",
    "today_string",
]
