import json
import logging
from datetime import date
import streamlit as st
from registration_app.config import COUNTRY_CODES, Config
from registration_app.form_data import FormFields, Gender
from registration_app.form_logic import submit_form, update_field
from registration_app.formatting import clean_phone_number, format_phone_number
from registration_app.i18n import is_rtl, translate

logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="טופס הרשמה",
    page_icon="📝",
    layout="centered",
    initial_sidebar_state="collapsed"
)

GENDER_OPTIONS = [Gender.UNSET.value, Gender.MALE.value, Gender.FEMALE.value]
DIAL_CODES = [country.dial_code for country in COUNTRY_CODES]
FLAGS = {country.dial_code: country.flag for country in COUNTRY_CODES}


def initialize_session_state():
    """Initialize session state variables"""
    if "language" not in st.session_state:
        st.session_state.language = Config.DEFAULT_LANGUAGE
    if "errors" not in st.session_state:
        st.session_state.errors = {}
    if "redirect_url" not in st.session_state:
        st.session_state.redirect_url = None


def apply_direction(language: str):
    direction = "rtl" if is_rtl(language) else "ltr"
    align = "right" if is_rtl(language) else "left"
    st.markdown(f"""
    <style>
    .main > div, .stTextInput, .stSelectbox, .stDateInput {{
        direction: {direction};
        text-align: {align};
    }}
    .field-error {{
        color: #e02424;
        font-size: 0.875rem;
        margin-top: -0.5rem;
    }}
    </style>
    """, unsafe_allow_html=True)


def toggle_language():
    st.session_state.language = "en" if st.session_state.language == "he" else "he"
    # messages were rendered in the previous language
    st.session_state.errors = {}


def read_fields() -> FormFields:
    fields = FormFields()
    for name in FormFields.model_fields:
        value = st.session_state.get(name)
        if value is None:
            continue
        if name == "birth_date":
            value = value.isoformat()
        fields = update_field(fields, name, value)
    return fields


def handle_submit():
    result = submit_form(read_fields(), st.session_state.language)
    st.session_state.errors = result.errors
    st.session_state.redirect_url = result.redirect_url


def show_error(field: str):
    message = st.session_state.errors.get(field)
    if message:
        st.markdown(f'<p class="field-error">{message}</p>', unsafe_allow_html=True)


def redirect(url: str, language: str):
    logger.info("Redirecting to the destination form.")
    st.info(translate("redirecting", language))
    st.iframe(f"<script>window.top.location.href = {json.dumps(url)};</script>")
    st.link_button(translate("redirectLink", language), url)


def main():
    """Main application function"""
    initialize_session_state()
    language = st.session_state.language
    apply_direction(language)

    col1, col2 = st.columns([4, 1])
    with col1:
        st.title(translate("title", language))
        st.caption(translate("subtitle", language))
    with col2:
        st.button(translate("switchLanguage", language), key="language_toggle", on_click=toggle_language)

    st.text_input(translate("firstName", language), key="first_name",
                  placeholder=translate("firstNamePlaceholder", language))
    show_error("first_name")

    st.text_input(translate("lastName", language), key="last_name",
                  placeholder=translate("lastNamePlaceholder", language))
    show_error("last_name")

    st.text_input(translate("idNumber", language), key="id_number", max_chars=Config.ID_LENGTH,
                  placeholder=translate("idNumberPlaceholder", language))
    show_error("id_number")

    today = date.today()
    st.date_input(translate("birthDate", language), key="birth_date", value=None,
                  min_value=date(today.year - Config.MAX_AGE - 1, 1, 1), max_value=today,
                  format="YYYY-MM-DD")
    show_error("birth_date")

    st.selectbox(
        translate("gender", language),
        GENDER_OPTIONS,
        key="gender",
        format_func=lambda g: translate(g, language) if g else translate("genderPlaceholder", language),
    )
    show_error("gender")

    code_col, phone_col = st.columns([1, 3])
    with code_col:
        st.selectbox(translate("countryCode", language), DIAL_CODES, key="country_code",
                     format_func=lambda code: f"{FLAGS[code]} {code}")
    with phone_col:
        st.text_input(translate("phone", language), key="phone",
                      placeholder=translate("phonePlaceholder", language))
        if clean_phone_number(st.session_state.get("phone", "")):
            st.caption(format_phone_number(st.session_state.phone, st.session_state.country_code))
    show_error("phone")

    st.button(translate("submit", language), key="submit", type="primary",
              width="stretch", on_click=handle_submit)

    if st.session_state.redirect_url:
        redirect(st.session_state.redirect_url, language)


if __name__ == "__main__":
    main()
