"""
Authentication module interface.

The account panel, booking form and HTTP routes depend on IAuthService,
not the concrete implementation. This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthResult, AuthSession, SignUpRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    Every method raises ``AuthProviderError`` (carrying an ``AuthErrorCode``)
    when Supabase rejects the call or cannot be reached.
    """

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """
        Sign in with email and password.

        Returns:
            AuthResult with the user and session
        """
        ...

    async def sign_up(self, request: SignUpRequest) -> AuthResult:
        """
        Create the auth user with its profile fields as user metadata.

        The database creates the profile row from that metadata; if the row
        is rejected the auth user is not created either.

        Raises:
            SignUpValidationError: If the fields fail validation (no network call made)
            AuthProviderError: If Supabase rejects the sign-up

        Returns:
            AuthResult; ``session`` is None when email confirmation is required
        """
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...

    async def get_session(self) -> Optional[AuthSession]:
        """Return the current session, or None when signed out."""
        ...

    async def get_current_user_id(self) -> Optional[str]:
        """Return the signed-in user's id, or None."""
        ...
