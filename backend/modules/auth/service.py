"""
Authentication service implementation.

Thin adapter over ``client.auth`` from the Supabase SDK. Provider failures
are classified into ``AuthErrorCode`` here so callers never look at
message text.
"""

import logging
from typing import Any, Callable, Optional

from supabase import Client

from .errors import AuthErrorCode, classify_auth_error, provider_message
from .exceptions import AuthProviderError, SignUpValidationError
from .interfaces import IAuthService
from .models import AuthResult, AuthSession, AuthUser, SignUpRequest
from .validation import validate_signup

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Args:
        client: Supabase client whose ``auth`` session this service drives
    """

    def __init__(self, client: Client):
        self._client = client

    async def sign_in(self, email: str, password: str) -> AuthResult:
        response = self._call(
            "sign_in",
            self._client.auth.sign_in_with_password,
            {"email": email.strip(), "password": password},
        )
        return self._to_result(response)

    async def sign_up(self, request: SignUpRequest) -> AuthResult:
        errors = validate_signup(request)
        if errors:
            raise SignUpValidationError(errors)

        # The profiles row is written by the on_auth_user_created trigger,
        # in the same transaction as the auth user.
        response = self._call(
            "sign_up",
            self._client.auth.sign_up,
            {
                "email": request.email.strip(),
                "password": request.password,
                "options": {"data": request.profile_metadata()},
            },
        )
        result = self._to_result(response)
        if result.user is None:
            raise AuthProviderError(
                AuthErrorCode.PROVIDER_ERROR,
                "Sign-up did not return a user",
            )

        logger.info(
            f"Signed up user {result.user.id} "
            f"(confirmation required: {result.confirmation_required})"
        )
        return result

    async def sign_out(self) -> None:
        self._call("sign_out", self._client.auth.sign_out)

    async def get_session(self) -> Optional[AuthSession]:
        session = self._call("get_session", self._client.auth.get_session)
        return AuthSession.from_sdk(session)

    async def get_current_user_id(self) -> Optional[str]:
        session = await self.get_session()
        return session.user.id if session else None

    def _call(self, operation: str, fn: Callable[..., Any], *args: Any) -> Any:
        """Run an SDK call, converting any failure into AuthProviderError."""
        try:
            return fn(*args)
        except Exception as e:
            reason = classify_auth_error(e)
            message = provider_message(e) or ""
            if message:
                logger.warning(f"Supabase {operation} rejected ({reason.value}): {message}")
            else:
                logger.exception(f"Supabase {operation} failed unexpectedly")
            raise AuthProviderError(reason, message) from e

    @staticmethod
    def _to_result(response: Any) -> AuthResult:
        return AuthResult(
            user=AuthUser.from_sdk(getattr(response, "user", None)),
            session=AuthSession.from_sdk(getattr(response, "session", None)),
        )
