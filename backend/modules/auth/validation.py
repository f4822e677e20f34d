"""Client-side checks run before any auth call reaches Supabase."""

import re
from datetime import date
from typing import Optional

from .models import SignInRequest, SignUpRequest

MIN_PASSWORD_LENGTH = 6
NATIONAL_ID_PATTERN = re.compile(r"^[0-9]{12}$")
PHONE_PATTERN = re.compile(r"^[0-9]{10,15}$")


def validate_sign_in(request: SignInRequest) -> dict[str, str]:
    """Only presence is checked; the provider validates the email format."""
    errors: dict[str, str] = {}
    if not request.email.strip():
        errors["email"] = "Email is required."
    if not request.password:
        errors["password"] = "Password is required."
    return errors


def parse_date_of_birth(value: str) -> Optional[date]:
    """Parse an ISO date string, returning None for blank input."""
    value = value.strip()
    if not value:
        return None
    return date.fromisoformat(value)


def validate_signup(request: SignUpRequest, today: Optional[date] = None) -> dict[str, str]:
    """
    Validate sign-up fields.

    Returns a field -> message map in form order; empty when valid.
    """
    today = today or date.today()
    errors: dict[str, str] = {}

    if not request.full_name.strip():
        errors["full_name"] = "Full name is required."

    if not request.email.strip():
        errors["email"] = "Email is required."

    if len(request.password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."

    phone = re.sub(r"\s+", "", request.phone)
    if phone and not PHONE_PATTERN.match(phone):
        errors["phone"] = "Please enter a valid phone number (10-15 digits)."

    try:
        dob = parse_date_of_birth(request.date_of_birth)
    except ValueError:
        errors["date_of_birth"] = "Please enter a valid date of birth (YYYY-MM-DD)."
    else:
        if dob is not None and dob > today:
            errors["date_of_birth"] = "Date of birth cannot be in the future."

    if not request.national_id.strip():
        errors["national_id"] = "National ID is required."
    elif not NATIONAL_ID_PATTERN.match(request.national_id.strip()):
        errors["national_id"] = "National ID must be exactly 12 digits."

    return errors
