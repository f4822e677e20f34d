"""
Session mirror.

Keeps a local, read-only copy of the Supabase auth session and the
matching profile row. The provider owns the session; this object only
follows its change stream.

Profile loads are tagged with the identity token that was current when the
load started. A result whose token no longer matches (the user signed out,
or a different user signed in meanwhile) is dropped.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional

from supabase import Client

from modules.auth.models import AuthSession, AuthUser
from modules.profiles.interfaces import IProfileService
from modules.profiles.models import Profile

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    INITIALIZING = "initializing"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class ProfileRequest(NamedTuple):
    """A pending profile load, bound to the identity it was started for."""

    token: int
    user_id: str


class SessionChange(NamedTuple):
    """What listeners receive after every applied auth event."""

    event: str
    phase: SessionPhase
    previous_phase: SessionPhase
    identity_changed: bool


SessionListener = Callable[[SessionChange], None]


class SessionMirror:
    """
    Mirrors auth state from a Supabase client.

    Attributes:
        phase: initializing until the first session lookup completes
        session: Current session snapshot, or None
        user: Current user, or None
        profile: Profile of the current user once loaded, or None
        profile_loading: A profile load for the current user is in flight
        profile_missing: The load finished and no profile row exists
    """

    def __init__(self, client: Client, profiles: IProfileService):
        self._client = client
        self._profiles = profiles

        self.phase = SessionPhase.INITIALIZING
        self.session: Optional[AuthSession] = None
        self.user: Optional[AuthUser] = None
        self.profile: Optional[Profile] = None
        self.profile_loading = False
        self.profile_missing = False

        self._token = 0
        self._listeners: list[SessionListener] = []
        self._subscription: Any = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def identity_token(self) -> int:
        return self._token

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    async def start(self) -> None:
        """Read the current session once, then follow the provider's change stream."""
        self._loop = asyncio.get_running_loop()

        try:
            raw = self._client.auth.get_session()
        except Exception as e:
            logger.warning(f"Could not read the initial session: {e}")
            raw = None

        self._handle("INITIAL_SESSION", AuthSession.from_sdk(raw))
        self._subscription = self._client.auth.on_auth_state_change(self._on_provider_event)

    async def stop(self) -> None:
        """Unsubscribe from the provider and cancel in-flight profile loads."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    async def wait_idle(self) -> None:
        """Wait for scheduled profile loads to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def apply(self, event: str, session: Optional[AuthSession]) -> Optional[ProfileRequest]:
        """
        Apply one auth event.

        Returns a ProfileRequest when the profile of a newly present user
        must be loaded.
        """
        previous_phase = self.phase
        previous_id = self.user.id if self.user else None
        user = session.user if session else None
        new_id = user.id if user else None

        identity_changed = previous_phase == SessionPhase.INITIALIZING or previous_id != new_id

        self.session = session
        self.user = user
        self.phase = SessionPhase.AUTHENTICATED if user else SessionPhase.UNAUTHENTICATED

        request = None
        if identity_changed:
            self._token += 1
            self.profile = None
            self.profile_missing = False
            self.profile_loading = user is not None
            if user is not None:
                request = ProfileRequest(self._token, user.id)

        logger.debug(f"Auth event {event}: {previous_phase.value} -> {self.phase.value}")

        change = SessionChange(event, self.phase, previous_phase, identity_changed)
        for listener in list(self._listeners):
            listener(change)
        return request

    async def load_profile(self, request: ProfileRequest) -> bool:
        """
        Load the profile for ``request``.

        Returns True when the result was applied, False when it was stale
        or the fetch failed.
        """
        try:
            profile = await self._profiles.get_profile(request.user_id)
        except Exception as e:
            if request.token == self._token:
                self.profile_loading = False
            logger.warning(f"Profile fetch for {request.user_id} failed: {e}")
            return False

        if request.token != self._token:
            logger.debug(f"Discarding stale profile for {request.user_id}")
            return False

        self.profile = profile
        self.profile_loading = False
        self.profile_missing = profile is None
        if profile is None:
            logger.warning(f"No profile row for signed-in user {request.user_id}")
        return True

    def _on_provider_event(self, event: Any, session: Any) -> None:
        # The SDK may call back from its refresh thread
        if self._loop is None:
            return
        name = str(getattr(event, "value", event))
        self._loop.call_soon_threadsafe(self._handle, name, AuthSession.from_sdk(session))

    def _handle(self, event: str, session: Optional[AuthSession]) -> None:
        request = self.apply(event, session)
        if request is not None:
            task = asyncio.ensure_future(self.load_profile(request))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
