import os
from dataclasses import dataclass
from typing import List
from dotenv import load_dotenv

# Load .env from the project root (one level above this package)
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
env_path = os.path.join(project_root, ".env")
load_dotenv(dotenv_path=env_path)

SUPPORTED_LANGUAGES = ("he", "en")


@dataclass(frozen=True)
class CountryCode:
    """קידומת בינלאומית שמוצגת ליד שדה הטלפון"""
    code: str
    name: str
    flag: str
    dial_code: str


COUNTRY_CODES: List[CountryCode] = [
    CountryCode("IL", "Israel", "🇮🇱", "+972"),
    CountryCode("US", "United States", "🇺🇸", "+1"),
    CountryCode("GB", "United Kingdom", "🇬🇧", "+44"),
    CountryCode("FR", "France", "🇫🇷", "+33"),
    CountryCode("DE", "Germany", "🇩🇪", "+49"),
]


def _read_language(value: str) -> str:
    value = (value or "").strip().lower()
    return value if value in SUPPORTED_LANGUAGES else "he"


class Config:
    FORM_BASE_URL = os.getenv("FORM_BASE_URL", "https://form.jotform.com/YOUR_FORM_ID")
    DEFAULT_LANGUAGE = _read_language(os.getenv("DEFAULT_LANGUAGE", "he"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    DEFAULT_COUNTRY_CODE = "+972"

    NAME_MIN_LEN = 2
    NAME_MAX_LEN = 50
    ID_LENGTH = 9
    MIN_AGE = 10
    MAX_AGE = 120
    ADULT_AGE = 18
    PHONE_MIN_DIGITS = 7
    PHONE_MAX_DIGITS = 15
