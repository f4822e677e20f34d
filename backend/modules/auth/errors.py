"""
Supabase error classification.

This is the only place that inspects provider error codes and message
text. Everything downstream (feedback mapper, form controllers, HTTP
routes) switches on ``AuthErrorCode``.
"""

from enum import Enum
from typing import Optional


class AuthErrorCode(str, Enum):
    """Closed set of failure categories surfaced to the UI."""

    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_TAKEN = "email_taken"
    WEAK_PASSWORD = "weak_password"
    INVALID_EMAIL = "invalid_email"
    RATE_LIMITED = "rate_limited"
    MISSING_PROFILE_FIELD = "missing_profile_field"
    DUPLICATE_PROFILE = "duplicate_profile"
    INVALID_NATIONAL_ID = "invalid_national_id"
    PROVIDER_ERROR = "provider_error"  # provider answered with something we don't recognise
    UNEXPECTED = "unexpected"  # network failure or a bug, no provider message


# Supabase Auth (GoTrue) error codes
_AUTH_CODES: dict[str, AuthErrorCode] = {
    "invalid_credentials": AuthErrorCode.INVALID_CREDENTIALS,
    "user_already_exists": AuthErrorCode.EMAIL_TAKEN,
    "email_exists": AuthErrorCode.EMAIL_TAKEN,
    "weak_password": AuthErrorCode.WEAK_PASSWORD,
    "email_address_invalid": AuthErrorCode.INVALID_EMAIL,
    "validation_failed": AuthErrorCode.INVALID_EMAIL,
    "over_request_rate_limit": AuthErrorCode.RATE_LIMITED,
    "over_email_send_rate_limit": AuthErrorCode.RATE_LIMITED,
}

# Older GoTrue releases only return a message
_AUTH_MESSAGES: list[tuple[str, AuthErrorCode]] = [
    ("invalid login credentials", AuthErrorCode.INVALID_CREDENTIALS),
    ("user already registered", AuthErrorCode.EMAIL_TAKEN),
    ("already exists", AuthErrorCode.EMAIL_TAKEN),
    ("password should be at least", AuthErrorCode.WEAK_PASSWORD),
    ("unable to validate email address", AuthErrorCode.INVALID_EMAIL),
    ("rate limit", AuthErrorCode.RATE_LIMITED),
    ("too many requests", AuthErrorCode.RATE_LIMITED),
    # The profile trigger rejected the row. Format and required fields are
    # checked before sign-up, which leaves a duplicate national ID.
    ("database error saving new user", AuthErrorCode.DUPLICATE_PROFILE),
]

# Postgres SQLSTATE codes returned by PostgREST
_SQLSTATE_CODES: dict[str, AuthErrorCode] = {
    "23505": AuthErrorCode.DUPLICATE_PROFILE,  # unique_violation
    "23502": AuthErrorCode.MISSING_PROFILE_FIELD,  # not_null_violation
    "23514": AuthErrorCode.INVALID_NATIONAL_ID,  # check_violation
    "22P02": AuthErrorCode.INVALID_NATIONAL_ID,  # invalid_text_representation
}

_DATA_MESSAGES: list[tuple[str, AuthErrorCode]] = [
    ("duplicate key", AuthErrorCode.DUPLICATE_PROFILE),
    ("not-null constraint", AuthErrorCode.MISSING_PROFILE_FIELD),
    ("national_id", AuthErrorCode.INVALID_NATIONAL_ID),
]


def provider_message(exc: BaseException) -> Optional[str]:
    """
    Message text attached by the Supabase SDK, if any.

    Both ``AuthApiError`` and PostgREST's ``APIError`` carry a ``message``
    attribute; plain network exceptions do not.
    """
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return None


def _match(exc: BaseException, codes: dict[str, AuthErrorCode], messages: list[tuple[str, AuthErrorCode]]) -> AuthErrorCode:
    message = provider_message(exc)
    if message is None:
        return AuthErrorCode.UNEXPECTED

    code = getattr(exc, "code", None)
    if isinstance(code, str) and code in codes:
        return codes[code]

    lowered = message.lower()
    for needle, reason in messages:
        if needle in lowered:
            return reason
    return AuthErrorCode.PROVIDER_ERROR


def classify_auth_error(exc: BaseException) -> AuthErrorCode:
    """Classify an exception raised by ``client.auth``."""
    return _match(exc, _AUTH_CODES, _AUTH_MESSAGES)


def classify_data_error(exc: BaseException) -> AuthErrorCode:
    """Classify an exception raised by a table insert."""
    return _match(exc, _SQLSTATE_CODES, _DATA_MESSAGES)
