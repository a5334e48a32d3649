from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from registration_app.config import Config


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNSET = ""


class FormFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    id_number: str = ""      # 9 digits, e.g. "123456782"
    birth_date: str = ""     # "YYYY-MM-DD"
    gender: Gender = Gender.UNSET
    phone: str = ""
    country_code: str = Config.DEFAULT_COUNTRY_CODE


class BirthDateParts(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: str
    month: str
    year: str


class DerivedSubmission(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int = Field(ge=0)
    is_minor: bool
    session_token: str
    localized_gender: str
    normalized_phone: str
    birth_date_parts: BirthDateParts


# field name -> localized error message; a valid field has no key
ValidationResult = Dict[str, str]


class SubmissionResult(BaseModel):
    redirect_url: Optional[str] = None
    errors: ValidationResult = Field(default_factory=dict)
    submission: Optional[DerivedSubmission] = None

    @property
    def ok(self) -> bool:
        return not self.errors and self.redirect_url is not None
