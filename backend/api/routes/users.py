"""
User-related endpoints.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from modules.profiles.interfaces import IProfileService
from modules.profiles.models import Profile
from shared.models import AuthenticatedUser

from ..dependencies import get_profile_service
from ..middleware.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """The caller's identity and, when one exists, their profile row."""

    id: str
    email: EmailStr
    email_verified: bool
    profile: Optional[Profile] = None
    profile_missing: bool = False


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    profiles: IProfileService = Depends(get_profile_service),
) -> CurrentUserResponse:
    """
    Get the current user and their profile.

    A missing profile is not an error: ``profile`` is null and
    ``profile_missing`` is true.
    """
    profile = await profiles.get_profile(user.id)
    if profile is None:
        logger.info(f"No profile row for user {user.id}")
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        profile=profile,
        profile_missing=profile is None,
    )
