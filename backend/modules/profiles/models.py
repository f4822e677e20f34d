"""
Profile module data models.

A profile is one-to-one with a Supabase auth user and shares its id.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel


class Profile(BaseModel):
    """A stored profile row."""

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    national_id: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def masked_national_id(self) -> Optional[str]:
        """National ID with all but the last four digits hidden."""
        if not self.national_id:
            return None
        return "XXXX-XXXX-" + self.national_id[-4:]
