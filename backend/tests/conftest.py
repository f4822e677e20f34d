"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock

from jose import jwt

from api.dependencies import reset_container
from shared.config import Settings, get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


class ProviderError(Exception):
    """Stand-in for supabase ``AuthApiError`` / postgrest ``APIError``."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code


def sdk_user(user_id: str = "test-user-123", email: str = "test@example.com"):
    """Object shaped like a supabase ``User``."""
    return SimpleNamespace(id=user_id, email=email, user_metadata={})


def sdk_session(user_id: str = "test-user-123", email: str = "test@example.com"):
    """Object shaped like a supabase ``Session``."""
    return SimpleNamespace(
        access_token=f"access-{user_id}",
        refresh_token=f"refresh-{user_id}",
        expires_at=1_900_000_000,
        user=sdk_user(user_id, email),
    )


def mock_table_client(data: list = None) -> MagicMock:
    """Supabase client whose query chains all end in ``execute()`` returning ``data``."""
    client = MagicMock()
    result = MagicMock()
    result.data = data if data is not None else []
    query = client.table.return_value
    for method in ("select", "insert", "eq", "order", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = result
    return client


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services around each test."""
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings with a JWT secret and no .env file."""
    return Settings(_env_file=None, supabase_jwt_secret=TEST_JWT_SECRET)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
