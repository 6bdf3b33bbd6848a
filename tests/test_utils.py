"""Unit tests for cell and number helpers."""
from datetime import date

import pytest
from workout_plan_importer.utils import (
    cell_text,
    clamp_rest,
    leading_int,
    parse_number,
    parse_rest_time,
)


class TestCellText:
    """Test cases for cell_text."""

    def test_integral_float_drops_decimal(self):
        assert cell_text(3.0) == "3"
        assert cell_text(2.5) == "2.5"

    def test_empty_values(self):
        assert cell_text(None) == ""
        assert cell_text("   ") == ""

    def test_strings_are_trimmed(self):
        assert cell_text("  Squat ") == "Squat"

    def test_dates_use_iso_format(self):
        assert cell_text(date(2024, 1, 15)) == "2024-01-15"


class TestParseNumber:
    """Test cases for parse_number."""

    def test_native_numbers_pass_through(self):
        assert parse_number(60) == 60
        assert parse_number(62.5) == 62.5

    def test_comma_decimal_separator(self):
        assert parse_number("62,5") == 62.5

    def test_leading_number_with_unit(self):
        assert parse_number("80 kg") == 80

    def test_absent_is_none_not_zero(self):
        assert parse_number(None) is None
        assert parse_number("") is None
        assert parse_number("abc") is None
        assert parse_number("0") == 0

    @pytest.mark.parametrize("cell", ["1e400", "-1e400", float("inf"), float("nan"), 10 ** 400])
    def test_overflowing_values_are_none(self, cell):
        assert parse_number(cell) is None


class TestParseRestTime:
    """Test cases for parse_rest_time."""

    @pytest.mark.parametrize("cell,expected", [
        ("90", 90),
        (90, 90),
        ("90s", 90),
        ("90 sec", 90),
        ("2 min", 120),
        ("2m", 120),
        ("1.5 min", 90),
    ])
    def test_units(self, cell, expected):
        assert parse_rest_time(cell) == expected

    def test_missing(self):
        assert parse_rest_time(None) is None
        assert parse_rest_time("") is None
        assert parse_rest_time("n/a") is None

    def test_overflowing_values_are_none(self):
        assert parse_rest_time(float("inf")) is None
        assert parse_rest_time("9" * 400) is None


class TestClampRest:
    """Test cases for clamp_rest."""

    @pytest.mark.parametrize("value", [30, 45, 90, 180, 300])
    def test_values_in_range_are_kept(self, value):
        assert clamp_rest(value) == value

    @pytest.mark.parametrize("value", [1, 29, 301, 600, 1000])
    def test_values_out_of_range_become_default(self, value):
        assert clamp_rest(value) == 90

    def test_missing_becomes_default(self):
        assert clamp_rest(None) == 90
        assert clamp_rest(0) == 90


def test_leading_int():
    assert leading_int("45") == 45
    assert leading_int("45-60") == 45
    assert leading_int("max") is None
    assert leading_int(None) is None
