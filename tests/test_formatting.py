"""Tests for display strings and relative labels."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from hebrew_dates.config import configure
from hebrew_dates.formatting import (
    format_date, label_with_relative, posted_details, relative_label, relative_posted,
    today_string,
)


class TestHebrewRenderer:
    def test_plain(self):
        assert format_date("2024-01-01", "hebrew", False) == "כ׳ טבת תשפ״ד"

    def test_with_weekday(self):
        assert format_date("2024-01-01", "hebrew", True) == "יום שני, כ׳ טבת תשפ״ד"

    def test_adar_two(self):
        assert format_date(date(2024, 3, 24), "hebrew", False) == "י״ד אדר ב׳ תשפ״ד"

    def test_plain_adar(self):
        assert format_date(date(2025, 3, 14), "hebrew", False) == "י״ד אדר תשפ״ה"

    def test_first_of_year(self):
        assert format_date("2023-09-16", "hebrew", True) == "יום שבת, א׳ תשרי תשפ״ד"

    def test_fifteenth(self):
        assert format_date("2024-04-23", "hebrew", False) == "ט״ו ניסן תשפ״ד"


class TestGregorianRenderer:
    def test_plain(self):
        assert format_date("2024-01-01", "gregorian", False) == "1 January 2024"

    def test_with_weekday(self):
        assert format_date("2024-01-01", "gregorian", True) == "Monday 1 January 2024"

    def test_hebrew_vocabulary(self):
        configure(language="he")
        assert format_date("2024-01-01", "gregorian", False) == "1 בינואר 2024"

    def test_never_has_a_comma(self):
        day = date(2024, 1, 1)
        for i in range(0, 366, 5):
            for weekday in (False, True):
                assert "," not in format_date(day + timedelta(days=i), "gregorian", weekday)

    def test_long_month_names(self):
        assert "September" in format_date("2024-09-05", "gregorian", False)


class TestSentinels:
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        assert format_date(value, "hebrew", False) == "no date available"

    def test_unparseable(self):
        assert format_date("31/12/2024", "gregorian", False) == "invalid date"

    def test_conversion_failure(self):
        with patch("hebrew_dates.formatting.to_hebrew", side_effect=RuntimeError("boom")):
            assert format_date("2024-01-01", "hebrew", False) == "date error"

    def test_hebrew_vocabulary(self):
        configure(language="he")
        assert format_date(None) == "תאריך לא זמין"
        assert format_date("garbage") == "תאריך לא תקין"


class TestDefaultsFromSettings:
    def test_preference_and_weekday(self):
        configure(date_preference="gregorian", include_weekday=True)
        assert format_date("2024-01-01") == "Monday 1 January 2024"

    def test_today_string(self):
        with patch("hebrew_dates.formatting.local_today", return_value=date(2024, 1, 1)):
            assert today_string() == "כ׳ טבת תשפ״ד"
            assert today_string("gregorian", False) == "1 January 2024"


class TestRelativeLabel:
    today = date(2024, 1, 1)

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-01-01", "today"),
            ("2024-01-02", "tomorrow"),
            ("2024-01-03", "day after tomorrow"),
            ("2024-01-06", "in 5 days from now"),
            ("2023-12-31", ""),
            ("garbage", ""),
            (None, ""),
        ],
    )
    def test_english(self, value, expected):
        assert relative_label(value, self.today) == expected

    def test_hebrew(self):
        configure(language="he")
        assert relative_label("2024-01-01", self.today) == "היום"
        assert relative_label("2024-01-02", self.today) == "מחר"
        assert relative_label("2024-01-03", self.today) == "מחרתיים"
        assert relative_label("2024-01-06", self.today) == "עוד 5 ימים מעכשיו"

    def test_defaults_to_local_today(self):
        with patch("hebrew_dates.formatting.local_today", return_value=self.today):
            assert relative_label("2024-01-02") == "tomorrow"

    def test_label_with_relative(self):
        assert label_with_relative("2024-01-02", "gregorian", self.today) == "2 January 2024 (tomorrow)"
        assert label_with_relative("2023-12-31", "gregorian", self.today) == "31 December 2023"


class TestRelativePosted:
    now = datetime(2024, 1, 10, 12, 0)

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(seconds=30), "a few seconds ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(minutes=59, seconds=59), "59 minutes ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(hours=3, minutes=20), "3 hours ago"),
            (timedelta(hours=25), "yesterday"),
            (timedelta(hours=49), "day before yesterday"),
        ],
    )
    def test_thresholds(self, delta, expected):
        assert relative_posted(self.now - delta, "hebrew", now=self.now) == expected

    def test_older_falls_back_to_full_date(self):
        stamp = self.now - timedelta(days=5)
        assert relative_posted(stamp, "gregorian", now=self.now) == "on 5 January 2024"
        assert relative_posted(stamp, "hebrew", now=self.now) == "on כ״ד טבת תשפ״ד"

    def test_hebrew_vocabulary(self):
        configure(language="he")
        assert relative_posted(self.now - timedelta(minutes=5), now=self.now) == "לפני 5 דקות"
        assert relative_posted(self.now - timedelta(hours=25), now=self.now) == "אתמול"
        assert relative_posted(self.now - timedelta(days=5), "hebrew", now=self.now) == "ב-כ״ד טבת תשפ״ד"

    def test_iso_string_input(self):
        assert relative_posted("2024-01-10T11:55:00", now=self.now) == "5 minutes ago"

    def test_invalid(self):
        assert relative_posted("yesterday-ish", now=self.now) == "invalid date"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value):
        assert relative_posted(value, now=self.now) == "no date available"
        assert posted_details(value, now=self.now) == "no date available"

    def test_missing_hebrew_vocabulary(self):
        configure(language="he")
        assert relative_posted(None, now=self.now) == "תאריך לא זמין"
        assert posted_details("", now=self.now) == "תאריך לא זמין"


class TestPostedDetails:
    now = datetime(2024, 1, 10, 15, 30)

    def test_same_day(self):
        assert posted_details(datetime(2024, 1, 10, 15, 29, 30), now=self.now) == "a few seconds ago"
        assert posted_details(datetime(2024, 1, 10, 15, 10), now=self.now) == "20 minutes ago"
        assert posted_details(datetime(2024, 1, 10, 14, 5), now=self.now) == "1 hour and 25 minutes ago"
        assert posted_details(datetime(2024, 1, 10, 13, 30), now=self.now) == "2 hours ago"

    def test_previous_days(self):
        assert posted_details(datetime(2024, 1, 9, 14, 5), now=self.now) == "yesterday at 14:05"
        assert posted_details(datetime(2024, 1, 8, 14, 5), now=self.now) == "day before yesterday at 14:05"
        assert posted_details(datetime(2024, 1, 1, 9, 7), now=self.now) == "01.01.2024 at 09:07"

    def test_calendar_day_not_elapsed_hours(self):
        # 16 hours ago but on the previous calendar day
        assert posted_details(datetime(2024, 1, 9, 23, 30), now=self.now) == "yesterday at 23:30"

    def test_hebrew_vocabulary(self):
        configure(language="he")
        assert posted_details(datetime(2024, 1, 10, 14, 5), now=self.now) == "לפני שעה ו-25 דקות"
        assert posted_details(datetime(2024, 1, 9, 14, 5), now=self.now) == "אתמול בשעה 14:05"
        assert posted_details(datetime(2024, 1, 1, 9, 7), now=self.now) == "01.01.2024 בשעה 09:07"

    def test_aware_timestamps_use_configured_zone(self):
        configure(time_zone="Asia/Jerusalem")
        now = datetime(2024, 1, 10, 15, 0, tzinfo=ZoneInfo("Asia/Jerusalem"))
        assert posted_details("2024-01-10T12:00:00Z", now=now) == "1 hour ago"
