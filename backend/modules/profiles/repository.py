"""
Profile repository for database access.

Encapsulates the Supabase queries for the ``profiles`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Profile


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for the profiles table.

    Read-only: rows are inserted by the on_auth_user_created trigger.
    Provider errors propagate to the caller.
    """

    table = "profiles"

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """Get the profile keyed by ``user_id``, or None."""
        return self._select_one("id", user_id)

    def _map_row(self, row: dict[str, Any]) -> Profile:
        return Profile(
            id=str(row["id"]),
            email=row.get("email"),
            full_name=row.get("full_name"),
            phone=row.get("phone"),
            date_of_birth=row.get("date_of_birth"),
            national_id=row.get("national_id"),
            created_at=row.get("created_at"),
        )
