"""Tests for the session mirror."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.account.mirror import SessionMirror, SessionPhase
from modules.auth.models import AuthSession
from modules.profiles.models import Profile

from tests.conftest import sdk_session


def session(user_id: str = "user-a") -> AuthSession:
    return AuthSession.from_sdk(sdk_session(user_id))


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock()
    client.auth.get_session.return_value = None
    return client


@pytest.fixture
def profiles() -> AsyncMock:
    profiles = AsyncMock()
    profiles.get_profile.side_effect = lambda user_id: Profile(id=user_id, full_name=f"Name {user_id}")
    return profiles


@pytest.fixture
def mirror(client, profiles) -> SessionMirror:
    return SessionMirror(client, profiles)


class TestApply:
    def test_starts_initializing(self, mirror):
        assert mirror.phase == SessionPhase.INITIALIZING

    def test_initial_signed_out(self, mirror):
        changes = []
        mirror.add_listener(changes.append)

        request = mirror.apply("INITIAL_SESSION", None)

        assert request is None
        assert mirror.phase == SessionPhase.UNAUTHENTICATED
        assert changes[0].identity_changed is True
        assert changes[0].previous_phase == SessionPhase.INITIALIZING

    def test_sign_in_requests_profile(self, mirror):
        mirror.apply("INITIAL_SESSION", None)

        request = mirror.apply("SIGNED_IN", session("user-a"))

        assert request.user_id == "user-a"
        assert request.token == mirror.identity_token
        assert mirror.phase == SessionPhase.AUTHENTICATED
        assert mirror.profile_loading is True

    @pytest.mark.asyncio
    async def test_token_refresh_keeps_profile(self, mirror):
        request = mirror.apply("SIGNED_IN", session("user-a"))
        await mirror.load_profile(request)
        token = mirror.identity_token
        changes = []
        mirror.add_listener(changes.append)

        assert mirror.apply("TOKEN_REFRESHED", session("user-a")) is None

        assert mirror.identity_token == token
        assert mirror.profile.id == "user-a"
        assert changes[0].identity_changed is False

    def test_sign_out_clears_state(self, mirror):
        mirror.apply("SIGNED_IN", session("user-a"))

        mirror.apply("SIGNED_OUT", None)

        assert mirror.phase == SessionPhase.UNAUTHENTICATED
        assert mirror.user is None
        assert mirror.profile is None
        assert mirror.profile_loading is False


class TestLoadProfile:
    @pytest.mark.asyncio
    async def test_applies_current_result(self, mirror):
        request = mirror.apply("SIGNED_IN", session("user-a"))

        assert await mirror.load_profile(request) is True

        assert mirror.profile.full_name == "Name user-a"
        assert mirror.profile_loading is False
        assert mirror.profile_missing is False

    @pytest.mark.asyncio
    async def test_discards_result_after_sign_out(self, mirror):
        request = mirror.apply("SIGNED_IN", session("user-a"))
        mirror.apply("SIGNED_OUT", None)

        assert await mirror.load_profile(request) is False

        assert mirror.profile is None

    @pytest.mark.asyncio
    async def test_discards_result_for_previous_user(self, mirror):
        first = mirror.apply("SIGNED_IN", session("user-a"))
        second = mirror.apply("SIGNED_IN", session("user-b"))

        assert await mirror.load_profile(second) is True
        assert await mirror.load_profile(first) is False

        assert mirror.profile.id == "user-b"

    @pytest.mark.asyncio
    async def test_missing_profile(self, mirror, profiles):
        profiles.get_profile.side_effect = None
        profiles.get_profile.return_value = None
        request = mirror.apply("SIGNED_IN", session("user-a"))

        assert await mirror.load_profile(request) is True

        assert mirror.profile is None
        assert mirror.profile_missing is True

    @pytest.mark.asyncio
    async def test_fetch_failure_leaves_profile_empty(self, mirror, profiles):
        profiles.get_profile.side_effect = ConnectionError("offline")
        request = mirror.apply("SIGNED_IN", session("user-a"))

        assert await mirror.load_profile(request) is False

        assert mirror.profile is None
        assert mirror.profile_loading is False
        assert mirror.phase == SessionPhase.AUTHENTICATED


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_start_reads_initial_session(self, mirror, client):
        client.auth.get_session.return_value = sdk_session("user-a")

        await mirror.start()
        await mirror.wait_idle()

        assert mirror.phase == SessionPhase.AUTHENTICATED
        assert mirror.profile.id == "user-a"
        client.auth.on_auth_state_change.assert_called_once()
        await mirror.stop()

    @pytest.mark.asyncio
    async def test_initial_session_failure_means_signed_out(self, mirror, client):
        client.auth.get_session.side_effect = ConnectionError("offline")

        await mirror.start()

        assert mirror.phase == SessionPhase.UNAUTHENTICATED
        await mirror.stop()

    @pytest.mark.asyncio
    async def test_provider_events_are_applied(self, mirror, client):
        await mirror.start()
        callback = client.auth.on_auth_state_change.call_args.args[0]

        callback("SIGNED_IN", sdk_session("user-b"))
        await asyncio.sleep(0)
        await mirror.wait_idle()

        assert mirror.user.id == "user-b"
        assert mirror.profile.id == "user-b"
        await mirror.stop()

    @pytest.mark.asyncio
    async def test_stop_unsubscribes(self, mirror, client):
        subscription = MagicMock()
        client.auth.on_auth_state_change.return_value = subscription

        await mirror.start()
        await mirror.stop()

        subscription.unsubscribe.assert_called_once_with()
