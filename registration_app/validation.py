import re
from datetime import date
from typing import Optional, Union
from registration_app.config import Config

ID_PATTERN = re.compile(r"[0-9]{9}")
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# Hebrew block, Latin letters, whitespace and hyphen
NAME_PATTERN = re.compile(r"[\u0590-\u05FFa-zA-Z\s-]+")
NON_DIGITS = re.compile(r"[^0-9]")

DateLike = Union[date, str]


def validate_national_id(id_number: str) -> bool:
    """
    Israeli ID checksum: weights 1,2,1,2,... and products above 9 are
    folded into the sum of their digits. Valid when the total divides by 10.
    """
    if not ID_PATTERN.fullmatch(id_number or ""):
        return False

    total = 0
    for i, char in enumerate(id_number):
        weighted = int(char) * (1 if i % 2 == 0 else 2)
        if weighted > 9:
            weighted -= 9
        total += weighted

    return total % 10 == 0


def validate_name(name: str) -> bool:
    name = name or ""
    trimmed_len = len(name.strip())
    if not Config.NAME_MIN_LEN <= trimmed_len <= Config.NAME_MAX_LEN:
        return False
    return bool(NAME_PATTERN.fullmatch(name))


def name_error_key(name: str) -> Optional[str]:
    trimmed = (name or "").strip()
    if not trimmed:
        return "required"
    if validate_name(name):
        return None
    if len(trimmed) < Config.NAME_MIN_LEN:
        return "nameTooShort"
    if len(trimmed) > Config.NAME_MAX_LEN:
        return "nameTooLong"
    return "invalidName"


def parse_birth_date(value: DateLike) -> Optional[date]:
    """Strict YYYY-MM-DD parsing. Returns None for anything else."""
    if isinstance(value, date):
        return value
    value = (value or "").strip()
    if not ISO_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def calculate_age(birth_date: DateLike, today: Optional[date] = None) -> int:
    birth = parse_birth_date(birth_date)
    if birth is None:
        raise ValueError(f"Invalid birth date: {birth_date!r}")
    today = today or date.today()

    age = today.year - birth.year
    # birthday not reached yet this year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def validate_birth_date(birth_date: DateLike, today: Optional[date] = None) -> bool:
    birth = parse_birth_date(birth_date)
    if birth is None:
        return False

    today = today or date.today()
    if birth > today:
        return False

    age = calculate_age(birth, today)
    return Config.MIN_AGE <= age <= Config.MAX_AGE


def birth_date_error_key(birth_date: DateLike, today: Optional[date] = None) -> Optional[str]:
    if not str(birth_date or "").strip():
        return "required"
    today = today or date.today()
    if validate_birth_date(birth_date, today):
        return None

    birth = parse_birth_date(birth_date)
    if birth is None:
        return "invalidDate"

    age = calculate_age(birth, today)
    if age < Config.MIN_AGE:
        return "ageTooYoung"
    if age > Config.MAX_AGE:
        return "ageTooOld"
    return "invalidDate"


def validate_phone(phone: str) -> bool:
    digits = NON_DIGITS.sub("", phone or "")
    return Config.PHONE_MIN_DIGITS <= len(digits) <= Config.PHONE_MAX_DIGITS
