from typing import Union
from registration_app.config import Config
from registration_app.form_data import Gender

FALLBACK_LANGUAGE = "en"

TRANSLATIONS = {
    "he": {
        "title": "טופס הרשמה",
        "subtitle": "אנא מלאו את הפרטים הבאים",
        "switchLanguage": "English",
        "firstName": "שם פרטי",
        "firstNamePlaceholder": "הזינו שם פרטי",
        "lastName": "שם משפחה",
        "lastNamePlaceholder": "הזינו שם משפחה",
        "idNumber": "מספר תעודת זהות",
        "idNumberPlaceholder": "9 ספרות",
        "birthDate": "תאריך לידה",
        "gender": "מגדר",
        "genderPlaceholder": "בחרו מגדר",
        "male": "זכר",
        "female": "נקבה",
        "phone": "מספר טלפון",
        "phonePlaceholder": "050-1234567",
        "countryCode": "קידומת",
        "submit": "המשך",
        "redirecting": "מעבירים אתכם לטופס...",
        "redirectLink": "לחצו כאן אם המעבר לא התבצע",
        "errors": {
            "required": "שדה חובה",
            "nameTooShort": "השם חייב להכיל לפחות 2 תווים",
            "nameTooLong": "השם יכול להכיל עד 50 תווים",
            "invalidName": "השם יכול להכיל אותיות בעברית או באנגלית בלבד",
            "idLength": "מספר תעודת זהות חייב להכיל 9 ספרות",
            "invalidId": "מספר תעודת זהות אינו תקין",
            "invalidDate": "תאריך לא תקין",
            "ageTooYoung": "הגיל המינימלי הוא 10",
            "ageTooOld": "הגיל המקסימלי הוא 120",
            "invalidGender": "יש לבחור מגדר",
            "invalidPhone": "מספר הטלפון אינו תקין",
        },
    },
    "en": {
        "title": "Registration Form",
        "subtitle": "Please fill in the following details",
        "switchLanguage": "עברית",
        "firstName": "First name",
        "firstNamePlaceholder": "Enter first name",
        "lastName": "Last name",
        "lastNamePlaceholder": "Enter last name",
        "idNumber": "ID number",
        "idNumberPlaceholder": "9 digits",
        "birthDate": "Birth date",
        "gender": "Gender",
        "genderPlaceholder": "Select gender",
        "male": "Male",
        "female": "Female",
        "phone": "Phone number",
        "phonePlaceholder": "050-1234567",
        "countryCode": "Code",
        "submit": "Continue",
        "redirecting": "Redirecting you to the form...",
        "redirectLink": "Click here if you are not redirected",
        "errors": {
            "required": "This field is required",
            "nameTooShort": "Name must be at least 2 characters",
            "nameTooLong": "Name must be at most 50 characters",
            "invalidName": "Name may contain Hebrew or English letters only",
            "idLength": "ID number must be exactly 9 digits",
            "invalidId": "Invalid ID number",
            "invalidDate": "Invalid date",
            "ageTooYoung": "Minimum age is 10",
            "ageTooOld": "Maximum age is 120",
            "invalidGender": "Please select a gender",
            "invalidPhone": "Invalid phone number",
        },
    },
}

HEBREW_GENDER = {Gender.MALE.value: "זכר", Gender.FEMALE.value: "נקבה"}


def _lookup(table: dict, key: str):
    node = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, language: str = Config.DEFAULT_LANGUAGE) -> str:
    """
    מחזיר מחרוזת לפי מפתח ושפה, e.g. translate("errors.required", "en").
    Falls back to English and finally to the key itself.
    """
    for lang in (language, FALLBACK_LANGUAGE):
        value = _lookup(TRANSLATIONS.get(lang, {}), key)
        if value is not None:
            return value
    return key


def is_rtl(language: str) -> bool:
    return language == "he"


def localize_gender(gender: Union[Gender, str], language: str) -> str:
    code = gender.value if isinstance(gender, Gender) else gender
    if language == "he":
        return HEBREW_GENDER.get(code, code)
    return code
