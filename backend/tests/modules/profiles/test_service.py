"""Tests for the profile service."""

import pytest
from unittest.mock import MagicMock

from modules.profiles.interfaces import IProfileService
from modules.profiles.models import Profile
from modules.profiles.service import ProfileService


@pytest.fixture
def repository() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(repository) -> ProfileService:
    return ProfileService(repository)


class TestProfileService:
    def test_implements_interface(self, service):
        assert isinstance(service, IProfileService)

    @pytest.mark.asyncio
    async def test_get_profile(self, service, repository):
        repository.get_by_id.return_value = Profile(id="user-123")
        profile = await service.get_profile("user-123")
        assert profile.id == "user-123"
        repository.get_by_id.assert_called_once_with("user-123")

    @pytest.mark.asyncio
    async def test_missing_profile(self, service, repository):
        repository.get_by_id.return_value = None
        assert await service.get_profile("user-123") is None

    @pytest.mark.asyncio
    async def test_get_profile_propagates_errors(self, service, repository):
        repository.get_by_id.side_effect = ConnectionError("offline")
        with pytest.raises(ConnectionError):
            await service.get_profile("user-123")
