"""
Profiles module.

Reads the application-level record extending a Supabase auth user with
BagEase fields (name, phone, date of birth, national ID). Rows are created
by the database when the auth user signs up.

Public API:
- IProfileService: Interface for profile lookups
- Profile: Stored profile row
"""

from .interfaces import IProfileService
from .models import Profile

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "Profile",
]
