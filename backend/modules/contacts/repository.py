"""
Contact repository.

The ``Contacts`` table only grants INSERT to the public role, so inserts
must not ask PostgREST to return the new row, and nothing is read back.
"""

from shared.repository import BaseRepository
from .models import ContactMessage


class ContactRepository(BaseRepository[ContactMessage]):
    """Write-only access to the Contacts table."""

    table = "Contacts"

    def add(self, message: ContactMessage) -> None:
        self._db.table(self.table).insert(
            message.model_dump(),
            returning="minimal",
        ).execute()
