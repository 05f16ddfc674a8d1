from __future__ import annotations

import pytest

from hebrew_dates.config import configure


@pytest.fixture(autouse=True)
def default_settings():
    """Fresh settings and an empty resolver cache for every test."""
    settings = configure(
        date_preference="hebrew",
        include_weekday=False,
        language="en",
        israel=True,
        hebrew_names=True,
        time_zone=None,
        nightfall=None,
        cache_max_entries=None,
    )
    yield settings
    configure()
