"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers or form controllers.
"""

from shared.exceptions import AuthenticationError, FieldValidationError

from .errors import AuthErrorCode


class AuthProviderError(AuthenticationError):
    """
    Raised when Supabase rejects an auth or profile call.

    ``reason`` is the classified category; ``provider_message`` keeps the raw
    text for logging and for the pass-through fallback.
    """

    def __init__(self, reason: AuthErrorCode, provider_message: str = ""):
        super().__init__(
            provider_message or reason.value,
            code=reason.value.upper(),
            details={"reason": reason.value},
        )
        self.reason = reason
        self.provider_message = provider_message


class SignUpValidationError(FieldValidationError):
    """Raised when sign-up fields fail client-side validation."""

    def __init__(self, field_errors: dict[str, str]):
        super().__init__(
            field_errors,
            message=next(iter(field_errors.values()), "Invalid sign-up details."),
            code="SIGNUP_VALIDATION_FAILED",
        )
