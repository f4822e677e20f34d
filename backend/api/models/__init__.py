"""API models package."""

from .errors import ErrorResponse, FieldErrorsDetail, ProviderErrorDetail

__all__ = [
    "ErrorResponse",
    "FieldErrorsDetail",
    "ProviderErrorDetail",
]
