"""
Bookings module exceptions.
"""

from shared.exceptions import (
    AuthenticationError,
    ExternalServiceError,
    FieldValidationError,
)


class BookingValidationError(FieldValidationError):
    """Raised when a booking draft fails validation."""

    def __init__(self, field_errors: dict[str, str]):
        super().__init__(
            field_errors,
            message="Please correct the highlighted fields.",
            code="BOOKING_VALIDATION_FAILED",
        )


class MissingUserError(AuthenticationError):
    """Raised when a booking is submitted without a signed-in user."""

    def __init__(self):
        super().__init__(
            "Please log in to make a booking.",
            code="BOOKING_REQUIRES_LOGIN",
        )


class BookingSubmissionError(ExternalServiceError):
    """Raised when Supabase rejects the booking insert."""

    def __init__(self, message: str, reason: str):
        super().__init__(
            message,
            service="supabase",
            code="BOOKING_SUBMISSION_FAILED",
            details={"reason": reason},
        )
        self.reason = reason


class BookingLookupError(ExternalServiceError):
    """Raised when the user's bookings cannot be read."""

    def __init__(self, reason: str):
        super().__init__(
            "Could not load your bookings. Please try again later.",
            service="supabase",
            code="BOOKING_LOOKUP_FAILED",
            details={"reason": reason},
        )
        self.reason = reason
