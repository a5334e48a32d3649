"""
Tests for string lookup and gender localization.
"""

import pytest

from registration_app.form_data import Gender
from registration_app.i18n import TRANSLATIONS, is_rtl, localize_gender, translate


class TestTranslate:
    def test_hebrew_and_english(self):
        assert translate("errors.required", "he") == "שדה חובה"
        assert translate("errors.required", "en") == "This field is required"

    def test_unknown_language_falls_back_to_english(self):
        assert translate("firstName", "fr") == "First name"

    def test_unknown_key_returns_key(self):
        assert translate("errors.nope", "he") == "errors.nope"

    def test_partial_key_is_not_a_string(self):
        assert translate("errors", "en") == "errors"

    def test_tables_have_same_keys(self):
        assert TRANSLATIONS["he"].keys() == TRANSLATIONS["en"].keys()
        assert TRANSLATIONS["he"]["errors"].keys() == TRANSLATIONS["en"]["errors"].keys()

    def test_rtl(self):
        assert is_rtl("he")
        assert not is_rtl("en")


class TestLocalizeGender:
    @pytest.mark.parametrize(
        "gender, language, expected",
        [
            (Gender.MALE, "he", "זכר"),
            (Gender.FEMALE, "he", "נקבה"),
            ("male", "he", "זכר"),
            (Gender.MALE, "en", "male"),
            ("female", "en", "female"),
            ("female", "fr", "female"),
        ],
    )
    def test_localize(self, gender, language, expected):
        assert localize_gender(gender, language) == expected
