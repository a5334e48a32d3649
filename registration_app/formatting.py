from datetime import date
from typing import Union
from registration_app.form_data import BirthDateParts
from registration_app.validation import NON_DIGITS, parse_birth_date


def clean_phone_number(phone: str) -> str:
    return NON_DIGITS.sub("", phone or "")


def _strip_trunk_prefix(digits: str) -> str:
    # local numbers are dialed with a single leading 0
    return digits[1:] if digits.startswith("0") else digits


def normalize_phone(phone: str, country_code: str) -> str:
    """
    Digits-only international number for the outbound URL,
    e.g. ("054-123-4567", "+972") -> "972541234567".
    """
    number = _strip_trunk_prefix(clean_phone_number(phone))
    return clean_phone_number(country_code) + number


def format_phone_number(phone: str, country_code: str) -> str:
    """Display format, e.g. "+972-54-1234567"."""
    cleaned = clean_phone_number(phone)

    if country_code == "+972":
        number = _strip_trunk_prefix(cleaned)
        if len(number) == 9:
            return f"{country_code}-{number[:2]}-{number[2:]}"

    return f"{country_code}-{cleaned}"


def format_date(value: Union[date, str]) -> str:
    parsed = parse_birth_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return parsed.isoformat()


def split_birth_date(value: Union[date, str]) -> BirthDateParts:
    year, month, day = format_date(value).split("-")
    return BirthDateParts(day=day, month=month, year=year)
