"""
Base exception classes for the BagEase backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class BagEaseError(Exception):
    """
    Base exception for all BagEase errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(BagEaseError):
    """Resource not found."""

    pass


class ValidationError(BagEaseError):
    """Input validation failed."""

    pass


class FieldValidationError(ValidationError):
    """
    Form validation failed on one or more named fields.

    ``field_errors`` maps field name to a user-facing message, in form order,
    so the first key is the field a client should focus.
    """

    def __init__(
        self,
        field_errors: dict[str, str],
        message: str = "Please correct the highlighted fields.",
        code: Optional[str] = None,
    ):
        super().__init__(message, code=code, details={"fields": dict(field_errors)})
        self.field_errors = dict(field_errors)

    @property
    def first_field(self) -> Optional[str]:
        """Name of the first invalid field, if any."""
        return next(iter(self.field_errors), None)


class AuthenticationError(BagEaseError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(BagEaseError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(BagEaseError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
