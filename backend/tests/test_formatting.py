"""
Unit tests for the shared formatting helpers.
"""

import logging
from datetime import date, datetime

import pytest

from agreement_mapper.mappers.formatting import (
    calculate_age,
    current_time,
    format_aadhaar,
    format_date,
)


class TestFormatDate:
    """Tests for DD-MM-YYYY rendering."""

    def test_zero_pads_day_and_month(self):
        assert format_date(datetime(2024, 3, 5, 23, 59)) == "05-03-2024"

    def test_accepts_plain_date(self):
        assert format_date(date(2024, 12, 31)) == "31-12-2024"


class TestCalculateAge:
    """Tests for age from an Aadhaar date of birth."""

    def test_day_before_birthday(self):
        assert calculate_age("15-06-1990", today=date(2024, 6, 14)) == "33"

    def test_on_birthday(self):
        assert calculate_age("15-06-1990", today=date(2024, 6, 15)) == "34"

    def test_earlier_month_not_reached(self):
        assert calculate_age("01-12-2000", today=date(2024, 6, 15)) == "23"

    def test_accepts_datetime_today(self):
        assert calculate_age("15-06-1990", today=datetime(2024, 6, 15, 8, 0)) == "34"

    def test_two_digit_year_is_nineteen_hundreds(self):
        assert calculate_age("15-06-90", today=date(2024, 6, 14)) == "33"
        assert calculate_age("15-06-05", today=date(2024, 6, 14)) == "118"

    @pytest.mark.parametrize("dob", ["1_5-06-1990", " 15-06-1990", "15-06-1990 ", "١٥-06-1990", "+5-06-1990"])
    def test_non_digit_parts_return_empty(self, dob):
        assert calculate_age(dob, today=date(2024, 6, 14)) == ""

    def test_zero_part_is_logged(self, caplog):
        caplog.set_level(logging.WARNING)
        assert calculate_age("15-00-1990", today=date(2024, 6, 14)) == ""
        assert any("zero day, month or year" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize("dob", ["not-a-date", "", "1-2", None, "00-06-1990", "15-13-1990", "31-02-1990"])
    def test_malformed_returns_empty(self, dob):
        assert calculate_age(dob, today=date(2024, 6, 15)) == ""

    def test_future_dob_returns_empty(self):
        assert calculate_age("01-01-2030", today=date(2024, 6, 15)) == ""

    def test_born_today_is_zero(self):
        assert calculate_age("15-06-2024", today=date(2024, 6, 15)) == "0"


class TestFormatAadhaar:
    """Tests for Aadhaar spacing."""

    def test_twelve_digits(self):
        assert format_aadhaar("123456789012") == "1234 5678 9012"

    def test_existing_separators(self):
        assert format_aadhaar("1234-5678 9012") == "1234 5678 9012"
        assert format_aadhaar("1234 5678 9012") == "1234 5678 9012"

    def test_masked_value_unchanged(self):
        assert format_aadhaar("XXXX5678XXXX") == "XXXX5678XXXX"
        assert format_aadhaar("XXXX XXXX 9012") == "XXXX XXXX 9012"

    def test_empty_unchanged(self):
        assert format_aadhaar("") == ""


class TestCurrentTime:
    """Tests for the document clock."""

    def test_local_time_when_no_zone(self):
        assert current_time("").tzinfo is None

    def test_configured_zone(self):
        now = current_time("Asia/Kolkata")
        assert now.utcoffset().total_seconds() == 5.5 * 3600

    def test_unknown_zone_falls_back_to_local(self):
        assert current_time("Not/AZone").tzinfo is None
