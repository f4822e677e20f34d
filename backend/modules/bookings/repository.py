"""
Booking repository for database access.

Encapsulates the Supabase queries for the ``bookings`` table.
"""

from decimal import Decimal
from typing import Any

from shared.repository import BaseRepository
from .models import Booking


class BookingRepository(BaseRepository[Booking]):
    """
    Repository for the bookings table.

    Note: This repository does NOT perform authorization checks. Row level
    security on the table restricts rows to their owner.
    """

    table = "bookings"

    def create(self, row: dict[str, Any]) -> Booking:
        """Insert one denormalized booking row."""
        return self._insert_one(row)

    def list_for_user(self, user_id: str) -> list[Booking]:
        """All bookings of a user, most recent first."""
        result = (
            self._db.table(self.table)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_row(row) for row in result.data]

    def _map_row(self, row: dict[str, Any]) -> Booking:
        data = dict(row)
        data["id"] = str(data["id"])
        data["user_id"] = str(data["user_id"])
        data["estimated_cost"] = Decimal(str(data.get("estimated_cost", 0)))
        return Booking(**data)
