"""
Contacts module exceptions.
"""

from shared.exceptions import ExternalServiceError

GENERIC_FAILURE_MESSAGE = "Failed to send message. Please try again later."


class ContactSubmissionError(ExternalServiceError):
    """Raised when the Contacts insert fails for any reason."""

    def __init__(self, reason: str):
        super().__init__(
            GENERIC_FAILURE_MESSAGE,
            service="supabase",
            code="CONTACT_SUBMISSION_FAILED",
            details={"reason": reason},
        )
