"""
Authentication module data models.

These mirror the objects returned by the Supabase Auth SDK. They are
read-only snapshots: the provider owns the session lifecycle.
"""

import re
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class AuthMode(str, Enum):
    """Which form the auth panel is showing."""

    LOGIN = "login"
    SIGNUP = "signup"


class AuthUser(BaseModel):
    """Supabase auth user."""

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[str] = Field(None, description="User's email")
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_sdk(cls, user: Any) -> Optional["AuthUser"]:
        """Build from a supabase ``User`` object (or None)."""
        if user is None:
            return None
        return cls(
            id=str(user.id),
            email=getattr(user, "email", None),
            user_metadata=dict(getattr(user, "user_metadata", None) or {}),
        )


class AuthSession(BaseModel):
    """Supabase session: tokens plus the embedded user."""

    access_token: str
    refresh_token: str = ""
    expires_at: Optional[int] = None
    user: AuthUser

    model_config = {"frozen": True}

    @classmethod
    def from_sdk(cls, session: Any) -> Optional["AuthSession"]:
        """Build from a supabase ``Session`` object (or None)."""
        if session is None or getattr(session, "user", None) is None:
            return None
        return cls(
            access_token=session.access_token,
            refresh_token=getattr(session, "refresh_token", None) or "",
            expires_at=getattr(session, "expires_at", None),
            user=AuthUser.from_sdk(session.user),
        )


class AuthResult(BaseModel):
    """Outcome of a successful sign-in or sign-up call."""

    user: Optional[AuthUser] = None
    session: Optional[AuthSession] = None

    @property
    def confirmation_required(self) -> bool:
        """Sign-up succeeded but the provider wants the email confirmed first."""
        return self.user is not None and self.session is None


class SignInRequest(BaseModel):
    """Email/password sign-in."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class SignUpRequest(BaseModel):
    """
    Sign-up with the extended profile fields.

    Values are raw form strings; ``validate_signup`` checks them before
    anything is sent to the provider.
    """

    email: str = ""
    password: str = ""
    full_name: str = ""
    phone: str = ""
    date_of_birth: str = Field("", description="ISO date, YYYY-MM-DD")
    national_id: str = Field("", description="12-digit national identity number")

    def profile_metadata(self) -> dict[str, str]:
        """
        User metadata sent with the sign-up call.

        The ``on_auth_user_created`` database trigger copies these keys into
        the new ``profiles`` row.
        """
        return {
            "full_name": self.full_name.strip(),
            "phone": re.sub(r"\s+", "", self.phone),
            "date_of_birth": self.date_of_birth.strip(),
            "national_id": self.national_id.strip(),
        }


class SessionResponse(BaseModel):
    """API response for sign-in and sign-up."""

    user: Optional[AuthUser] = None
    session: Optional[AuthSession] = None
    confirmation_required: bool = False
    message: Optional[str] = None
