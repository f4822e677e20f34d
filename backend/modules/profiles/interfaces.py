"""
Profiles module interface.

The session mirror and the users route depend on IProfileService,
not on the Supabase-backed implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Profile


@runtime_checkable
class IProfileService(Protocol):
    """Interface for profile operations."""

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """
        Get a profile by its user id.

        Returns:
            Profile if found, None otherwise
        """
        ...
