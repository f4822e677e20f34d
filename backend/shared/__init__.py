"""
Shared infrastructure for BagEase backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Authenticated user and feedback models

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_supabase_client,
    get_supabase_anon_client,
    get_supabase_user_client,
    reset_client_cache,
)
from .exceptions import (
    BagEaseError,
    NotFoundError,
    ValidationError,
    FieldValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, Feedback, FeedbackKind

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_anon_client",
    "get_supabase_user_client",
    "reset_client_cache",
    "BagEaseError",
    "NotFoundError",
    "ValidationError",
    "FieldValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "Feedback",
    "FeedbackKind",
]
