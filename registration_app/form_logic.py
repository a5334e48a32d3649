import logging
from datetime import date
from typing import Any, Optional
from pydantic import ValidationError
from registration_app.config import Config
from registration_app.form_data import (
    DerivedSubmission,
    FormFields,
    Gender,
    SubmissionResult,
    ValidationResult,
)
from registration_app.formatting import normalize_phone, split_birth_date
from registration_app.i18n import localize_gender, translate
from registration_app.redirect import build_destination_url
from registration_app.session_token import RandomBytes, generate_session_token
from registration_app.validation import (
    ID_PATTERN,
    birth_date_error_key,
    calculate_age,
    name_error_key,
    validate_national_id,
    validate_phone,
)

logger = logging.getLogger(__name__)


def update_field(fields: FormFields, name: str, value: Any) -> FormFields:
    """Returns a new FormFields with one field replaced; the input is left untouched."""
    if name not in FormFields.model_fields:
        raise ValueError(f"Unknown form field: {name!r}")
    data = fields.model_dump()
    data[name] = value
    try:
        return FormFields(**data)
    except ValidationError:
        logger.warning(f"Rejected value for field '{name}'")
        return fields


def _id_number_error_key(id_number: str) -> Optional[str]:
    if not id_number.strip():
        return "required"
    if not ID_PATTERN.fullmatch(id_number):
        return "idLength"
    if not validate_national_id(id_number):
        return "invalidId"
    return None


def validate_form(
    fields: FormFields,
    language: str = Config.DEFAULT_LANGUAGE,
    today: Optional[date] = None,
) -> ValidationResult:
    """
    Computes every error of the form from scratch. An empty dict means
    the form can be submitted.
    """
    error_keys = {
        "first_name": name_error_key(fields.first_name),
        "last_name": name_error_key(fields.last_name),
        "id_number": _id_number_error_key(fields.id_number),
        "birth_date": birth_date_error_key(fields.birth_date, today),
        "gender": "invalidGender" if fields.gender == Gender.UNSET else None,
        "phone": (
            "required" if not fields.phone.strip()
            else None if validate_phone(fields.phone)
            else "invalidPhone"
        ),
    }

    errors = {
        field: translate(f"errors.{key}", language)
        for field, key in error_keys.items()
        if key is not None
    }
    if errors:
        logger.info(f"Form validation failed for fields: {', '.join(errors)}")
    return errors


def prepare_submission(
    fields: FormFields,
    language: str,
    today: Optional[date] = None,
    random_bytes: Optional[RandomBytes] = None,
) -> DerivedSubmission:
    age = calculate_age(fields.birth_date, today)
    return DerivedSubmission(
        age=age,
        is_minor=age < Config.ADULT_AGE,
        session_token=generate_session_token(random_bytes),
        localized_gender=localize_gender(fields.gender, language),
        normalized_phone=normalize_phone(fields.phone, fields.country_code),
        birth_date_parts=split_birth_date(fields.birth_date),
    )


def submit_form(
    fields: FormFields,
    language: str,
    today: Optional[date] = None,
    random_bytes: Optional[RandomBytes] = None,
    base_url: Optional[str] = None,
) -> SubmissionResult:
    errors = validate_form(fields, language, today)
    if errors:
        return SubmissionResult(errors=errors)

    submission = prepare_submission(fields, language, today, random_bytes)
    url = build_destination_url(
        fields,
        age=submission.age,
        is_minor=submission.is_minor,
        session_token=submission.session_token,
        language=language,
        base_url=base_url,
    )
    logger.info(f"Submission ready, session token {submission.session_token}")
    return SubmissionResult(redirect_url=url, submission=submission)
