"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Body produced by ``BagEaseError.to_dict()``."""

    error: str
    message: str
    details: dict[str, Any] = {}


class ProviderErrorDetail(BaseModel):
    """``detail`` of a 4xx/5xx raised after a Supabase call failed."""

    code: str
    message: str


class FieldErrorsDetail(BaseModel):
    """``detail`` of a 422 raised for form validation."""

    code: str = "validation_failed"
    fields: dict[str, str]
