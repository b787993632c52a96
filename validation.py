"""
Registration form checks
Pure functions: values in, ValidationState out. Nothing here touches the page.
"""
import re
from datetime import date, datetime

from models import RegistrationForm, RegistrationVariant, ValidationState
from utils import age_in_years

MINIMUM_AGE = 13

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}")
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
# Finnish numbers: +358 and 8-12 digits, or a leading 0 and 7-10 digits
PHONE_PATTERNS = (
    re.compile(r"\+358\d{8,12}", re.ASCII),
    re.compile(r"0\d{7,10}", re.ASCII),
)

PHONE_MESSAGE = "Use +358XXXXXXXX (8–12 digits) or 0XXXXXXXX (7–10 digits)."
BIRTH_DATE_MISSING = "Select your birth date."
BIRTH_DATE_INVALID = "Birth date is invalid."
BIRTH_DATE_FUTURE = "Birth date cannot be in the future."
BIRTH_DATE_TOO_YOUNG = f"You must be at least {MINIMUM_AGE} years old."
TERMS_MESSAGE = "You must accept the terms to continue."


def is_full_name(value: str) -> bool:
    parts = value.strip().split()
    return len(parts) >= 2 and all(len(part) >= 2 for part in parts)


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def is_phone(value: str) -> bool:
    phone = value.strip()
    return any(pattern.fullmatch(phone) for pattern in PHONE_PATTERNS)


def parse_birth_date(value: str):
    """Parse a date input value ('YYYY-MM-DD'); None when it isn't a real date"""
    # strptime alone would take unpadded parts like '2000-5-7'
    if DATE_PATTERN.fullmatch(value) is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def birth_date_errors(value: str, today: date):
    """Every message that applies to the birth date, in check order"""
    if not value:
        return [BIRTH_DATE_MISSING]

    birth = parse_birth_date(value)
    if birth is None:
        return [BIRTH_DATE_INVALID]

    messages = []
    if birth > today:
        messages.append(BIRTH_DATE_FUTURE)
    if age_in_years(birth, today) < MINIMUM_AGE:
        messages.append(BIRTH_DATE_TOO_YOUNG)
    return messages


def validate_registration(
    form: RegistrationForm, variant: RegistrationVariant, now: datetime
) -> ValidationState:
    """Run every check and collect all failures; never short-circuits"""
    state = ValidationState()

    if not is_full_name(form.full_name):
        state.errors["fullName"] = variant.full_name_message

    if not is_email(form.email):
        state.errors["email"] = variant.email_message

    if not is_phone(form.phone):
        state.errors["phone"] = PHONE_MESSAGE

    # One slot per field: the last failing date check is the one shown
    for message in birth_date_errors(form.birth_date, now.date()):
        state.errors["birthDate"] = message

    if not form.terms:
        state.errors["terms"] = TERMS_MESSAGE

    return state
