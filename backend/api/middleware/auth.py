"""
JWT Authentication middleware.

Validates Supabase JWT tokens and extracts user information.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from datetime import datetime, timezone
from pydantic import BaseModel

from shared.config import get_settings
from shared.models import AuthenticatedUser

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class TokenPayload(BaseModel):
    """Claims we read from a Supabase access token."""
    sub: str  # User ID
    email: str
    email_confirmed_at: Optional[str] = None
    aud: str
    exp: int
    iat: int


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a Supabase JWT token.

    Raises:
        AuthError: If token is invalid or expired
    """
    settings = get_settings()

    if not settings.supabase_jwt_secret:
        raise AuthError("Server authentication not configured")

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            audience="authenticated",
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except JWTError as e:
        raise AuthError(f"Invalid token: {str(e)}")


def get_user_from_payload(payload: TokenPayload, token: Optional[str] = None) -> AuthenticatedUser:
    """Convert JWT claims to an AuthenticatedUser, keeping the raw token."""
    return AuthenticatedUser(
        id=payload.sub,
        email=payload.email,
        email_verified=payload.email_confirmed_at is not None,
        last_sign_in=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
        access_token=token,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.post("/bookings")
        async def create(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    payload = decode_token(credentials.credentials)
    return get_user_from_payload(payload, credentials.credentials)

