"""
Profile service implementation.
"""

from typing import Optional

from .interfaces import IProfileService
from .models import Profile
from .repository import ProfileRepository


class ProfileService(IProfileService):
    """Profile service backed by the Supabase profiles table."""

    def __init__(self, repository: ProfileRepository):
        self._repo = repository

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """Fetch a profile. Provider failures propagate to the caller."""
        return self._repo.get_by_id(user_id)
