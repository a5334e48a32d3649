from typing import Optional
from urllib.parse import quote_plus, urlencode
from registration_app.config import Config
from registration_app.form_data import FormFields
from registration_app.formatting import normalize_phone, split_birth_date
from registration_app.i18n import localize_gender


def build_destination_url(
    fields: FormFields,
    age: int,
    is_minor: bool,
    session_token: str,
    language: str,
    base_url: Optional[str] = None,
) -> str:
    """
    Builds the Jotform URL with all form parameters.

    The birth date goes last as birthDate[day], birthDate[month] and
    birthDate[year]; Jotform reads date fields only with literal brackets,
    so those keys are appended by hand instead of through urlencode.
    """
    base_url = base_url or Config.FORM_BASE_URL

    query = urlencode([
        ("firstName", fields.first_name),
        ("lastName", fields.last_name),
        ("idNumber", fields.id_number),
        ("gender", localize_gender(fields.gender, language)),
        ("phone", normalize_phone(fields.phone, fields.country_code)),
        ("age", str(age)),
        ("isMinor", "true" if is_minor else "false"),
        ("sessionToken", session_token),
        ("language", language),
    ])

    parts = split_birth_date(fields.birth_date)
    birth_date_query = "&".join(
        f"birthDate[{key}]={quote_plus(value)}"
        for key, value in (("day", parts.day), ("month", parts.month), ("year", parts.year))
    )

    return f"{base_url}?{query}&{birth_date_query}"
