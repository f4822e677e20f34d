"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the row-to-model mapping conventions.
"""

from typing import Any, Generic, Optional, TypeVar
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses set ``table`` and implement ``_map_row`` to turn a Supabase
    row dict into their pydantic model.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            table = "profiles"

            def _map_row(self, row):
                return Profile(**row)
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _insert_one(self, data: dict[str, Any]) -> T:
        """Insert a single row and return it mapped to the model."""
        result = self._db.table(self.table).insert(data).execute()
        return self._map_row(result.data[0])

    def _select_one(self, column: str, value: Any) -> Optional[T]:
        """Select the first row where ``column`` equals ``value``."""
        result = self._db.table(self.table).select("*").eq(column, value).limit(1).execute()
        if not result.data:
            return None
        return self._map_row(result.data[0])

    def _map_row(self, row: dict[str, Any]) -> T:
        raise NotImplementedError
