"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Services that act on behalf of a visitor or a signed-in user (auth,
bookings) are built per request because the Supabase client they hold
carries that caller's session. Everything else is cached in the container.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from api.middleware.auth import get_current_user
from shared.config import get_settings
from shared.models import AuthenticatedUser

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.bookings.interfaces import IBookingService
    from modules.bookings.pricing import PricingRates
    from modules.contacts.interfaces import IContactService
    from modules.profiles.interfaces import IProfileService


class ServiceContainer:
    """
    Container for the shared service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._profile_service: "IProfileService | None" = None
        self._contact_service: "IContactService | None" = None
        self._pricing_rates: "PricingRates | None" = None

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service (service-role client)."""
        if self._profile_service is None:
            from modules.profiles.repository import ProfileRepository
            from modules.profiles.service import ProfileService
            from shared.database import get_supabase_client
            self._profile_service = ProfileService(ProfileRepository(get_supabase_client()))
        return self._profile_service

    @property
    def contacts(self) -> "IContactService":
        """Get the contact service (anon client, public insert policy)."""
        if self._contact_service is None:
            from modules.contacts.repository import ContactRepository
            from modules.contacts.service import ContactService
            from shared.database import get_supabase_anon_client
            self._contact_service = ContactService(ContactRepository(get_supabase_anon_client()))
        return self._contact_service

    @property
    def pricing_rates(self) -> "PricingRates":
        """Get the booking price table from settings."""
        if self._pricing_rates is None:
            from modules.bookings.pricing import PricingRates
            self._pricing_rates = PricingRates.from_settings(get_settings())
        return self._pricing_rates

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._profile_service = None
        self._contact_service = None
        self._pricing_rates = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for an auth service on a fresh anonymous client."""
    from modules.auth.service import AuthService
    from shared.database import get_supabase_anon_client
    return AuthService(get_supabase_anon_client())


def get_user_auth_service(
    user: AuthenticatedUser = Depends(get_current_user),
) -> "IAuthService":
    """FastAPI dependency for an auth service bound to the caller's session."""
    from modules.auth.service import AuthService
    from shared.database import get_supabase_user_client
    return AuthService(get_supabase_user_client(user.access_token or ""))


def get_booking_service(
    user: AuthenticatedUser = Depends(get_current_user),
) -> "IBookingService":
    """FastAPI dependency for a booking service that writes as the caller (RLS)."""
    from modules.bookings.repository import BookingRepository
    from modules.bookings.service import BookingService
    from shared.database import get_supabase_user_client
    container = get_container()
    return BookingService(
        BookingRepository(get_supabase_user_client(user.access_token or "")),
        rates=container.pricing_rates,
    )


def get_contact_service() -> "IContactService":
    """FastAPI dependency for contact service."""
    return get_container().contacts


def get_pricing_rates() -> "PricingRates":
    """FastAPI dependency for the booking price table."""
    return get_container().pricing_rates
