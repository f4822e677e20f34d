"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: EmailStr = Field(..., description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    # The raw bearer token, kept so routes can open an RLS-scoped client
    access_token: Optional[str] = Field(None, exclude=True, repr=False)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class FeedbackKind(str, Enum):
    """Severity of a user-facing feedback message."""

    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


class Feedback(BaseModel):
    """A single transient advisory message shown to the user."""

    kind: FeedbackKind
    text: str

    model_config = {"frozen": True}

    @classmethod
    def error(cls, text: str) -> "Feedback":
        return cls(kind=FeedbackKind.ERROR, text=text)

    @classmethod
    def info(cls, text: str) -> "Feedback":
        return cls(kind=FeedbackKind.INFO, text=text)

    @classmethod
    def success(cls, text: str) -> "Feedback":
        return cls(kind=FeedbackKind.SUCCESS, text=text)
