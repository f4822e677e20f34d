"""
Authentication module.

Adapter over Supabase Auth: sign-in, sign-up (with profile creation),
sign-out and the current session, plus the closed error taxonomy used
to turn provider failures into user-facing feedback.

Public API:
- IAuthService: Interface for auth operations
- AuthUser / AuthSession / AuthResult: Snapshots of SDK objects
- AuthMode, SignInRequest, SignUpRequest
- AuthErrorCode, classify_auth_error, classify_data_error
- describe_auth_error: Feedback mapper
- validate_signup: Client-side sign-up checks
- Auth exceptions: AuthProviderError, SignUpValidationError
"""

from .interfaces import IAuthService
from .models import (
    AuthMode,
    AuthUser,
    AuthSession,
    AuthResult,
    SignInRequest,
    SignUpRequest,
    SessionResponse,
)
from .errors import AuthErrorCode, classify_auth_error, classify_data_error
from .exceptions import (
    AuthProviderError,
    SignUpValidationError,
)
from .feedback import FeedbackDecision, describe_auth_error
from .validation import validate_sign_in, validate_signup

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthMode",
    "AuthUser",
    "AuthSession",
    "AuthResult",
    "SignInRequest",
    "SignUpRequest",
    "SessionResponse",
    # Errors
    "AuthErrorCode",
    "classify_auth_error",
    "classify_data_error",
    "FeedbackDecision",
    "describe_auth_error",
    "validate_sign_in",
    "validate_signup",
    # Exceptions
    "AuthProviderError",
    "SignUpValidationError",
]
