"""Tests for Hebrew letter numerals."""
from __future__ import annotations

import math

import pytest

from hebrew_dates.gematria import FALLBACK, GERESH, GERSHAYIM, encode


class TestDayNumerals:
    def test_single_letters_are_bare(self):
        assert encode(1) == "א"
        assert encode(9) == "ט"
        assert encode(10) == "י"
        assert encode(20) == "כ"
        assert encode(30) == "ל"

    def test_fifteen_and_sixteen(self):
        assert encode(15) == "ט״ו"
        assert encode(16) == "ט״ז"

    def test_compound_days_carry_gershayim(self):
        assert encode(11) == "י״א"
        assert encode(29) == "כ״ט"


class TestComposedValues:
    def test_tens_and_units(self):
        assert encode(31) == "ל״א"
        assert encode(40) == "מ"
        assert encode(99) == "צ״ט"

    def test_hundreds(self):
        assert encode(100) == "ק"
        assert encode(115) == "קט״ו"
        assert encode(400) == "ת"
        assert encode(900) == "תת״ק"

    def test_single_letter_below_5000_has_no_geresh(self):
        assert GERESH not in encode(400)


class TestYears:
    @pytest.mark.parametrize(
        "year, expected",
        [
            (5784, "תשפ״ד"),
            (5785, "תשפ״ה"),
            (5775, "תשע״ה"),
            (5715, "תשט״ו"),
        ],
    )
    def test_year_values(self, year, expected):
        assert encode(year) == expected

    def test_year_drops_thousands(self):
        out = encode(5785)
        assert not out.startswith("ה")
        assert out[-2] == GERSHAYIM

    def test_round_year_remainder_gets_geresh(self):
        assert encode(5400) == "ת׳"

    def test_round_thousand(self):
        assert encode(5000) == "ה׳"


class TestFallback:
    @pytest.mark.parametrize("value", [0, -1, -5785, math.inf, -math.inf, math.nan, "5785", None, True])
    def test_invalid_input_degrades(self, value):
        assert encode(value) == FALLBACK

    def test_float_is_truncated(self):
        assert encode(15.7) == "ט״ו"
