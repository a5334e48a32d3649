"""
Unit tests for phone and date formatting helpers.

Normalization output goes only into the outbound URL, display formatting
only into the page, so both are covered separately.
"""

from datetime import date

import pytest

from registration_app.form_data import BirthDateParts
from registration_app.formatting import (
    clean_phone_number,
    format_date,
    format_phone_number,
    normalize_phone,
    split_birth_date,
)


class TestNormalizePhone:
    @pytest.mark.parametrize(
        "phone, country_code, expected",
        [
            ("0541234567", "+972", "972541234567"),
            ("541234567", "+1", "1541234567"),
            ("054-123-4567", "+972", "972541234567"),
            ("(054) 123 4567", "+972", "972541234567"),
            ("00541234567", "+972", "9720541234567"),  # only one trunk zero is dropped
            ("7911123456", "+44", "447911123456"),
            ("", "+33", "33"),
        ],
    )
    def test_normalize(self, phone, country_code, expected):
        assert normalize_phone(phone, country_code) == expected

    def test_output_is_digits_only(self):
        assert normalize_phone("+1 (555) 123-4567", "+1").isdigit()


class TestDisplayFormatting:
    def test_clean_phone_number(self):
        assert clean_phone_number("+972-54-123 4567") == "972541234567"

    @pytest.mark.parametrize(
        "phone, country_code, expected",
        [
            ("0541234567", "+972", "+972-54-1234567"),
            ("541234567", "+972", "+972-54-1234567"),
            ("02123456", "+972", "+972-02123456"),
            ("5551234567", "+1", "+1-5551234567"),
        ],
    )
    def test_format_phone_number(self, phone, country_code, expected):
        assert format_phone_number(phone, country_code) == expected

    def test_format_date(self):
        assert format_date(date(2010, 7, 4)) == "2010-07-04"
        assert format_date("2010-07-04") == "2010-07-04"

    def test_format_date_rejects_garbage(self):
        with pytest.raises(ValueError):
            format_date("04/07/2010")


class TestSplitBirthDate:
    def test_keeps_zero_padding(self):
        assert split_birth_date("2010-07-04") == BirthDateParts(day="04", month="07", year="2010")

    def test_reassembles_to_iso(self):
        parts = split_birth_date(date(1985, 12, 31))
        assert f"{parts.year}-{parts.month}-{parts.day}" == "1985-12-31"
