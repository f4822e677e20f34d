"""
Account side panel.

Shows a login or sign-up form while signed out and the account summary
while signed in. The panel never flips itself to the signed-in view: it
waits for the session mirror to report the new session.
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from modules.auth.exceptions import AuthProviderError, SignUpValidationError
from modules.auth.feedback import describe_auth_error
from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthMode, SignInRequest, SignUpRequest
from modules.auth.validation import validate_sign_in, validate_signup
from shared.config import Settings, get_settings
from shared.models import Feedback

from .mirror import SessionChange, SessionMirror, SessionPhase
from .shell import AppShell

logger = logging.getLogger(__name__)

SIGNUP_CONFIRMATION_MESSAGE = "Sign-up successful! Please check your email to confirm your account."
MISSING_PROFILE_MESSAGE = "We couldn't load your profile details. Some information may be missing."


class PanelView(str, Enum):
    LOADING = "loading"
    AUTH = "auth"
    ACCOUNT = "account"


class AuthForm(BaseModel):
    """Controlled inputs of the login and sign-up forms."""

    email: str = ""
    password: str = ""
    full_name: str = ""
    phone: str = ""
    date_of_birth: str = ""
    national_id: str = ""

    def to_sign_in(self) -> SignInRequest:
        return SignInRequest(email=self.email, password=self.password)

    def to_sign_up(self) -> SignUpRequest:
        return SignUpRequest(**self.model_dump())


class AccountPanel:
    """
    Auth form controller.

    Attributes:
        mode: Which form is showing while signed out
        form: Current input values
        feedback: The single active message, if any
        field_errors: Per-field validation messages from the last submit
        busy: An auth call is in flight
    """

    def __init__(
        self,
        auth: IAuthService,
        mirror: SessionMirror,
        shell: Optional[AppShell] = None,
        settings: Optional[Settings] = None,
    ):
        self._auth = auth
        self._mirror = mirror
        self._shell = shell
        self._settings = settings or get_settings()

        self.mode = AuthMode.LOGIN
        self.form = AuthForm()
        self.feedback: Optional[Feedback] = None
        self.field_errors: dict[str, str] = {}
        self.busy = False

        mirror.add_listener(self._on_session_change)

    @property
    def view(self) -> PanelView:
        if self._mirror.phase == SessionPhase.INITIALIZING:
            return PanelView.LOADING
        if self._mirror.phase == SessionPhase.AUTHENTICATED:
            return PanelView.ACCOUNT
        return PanelView.AUTH

    @property
    def mirror(self) -> SessionMirror:
        return self._mirror

    @property
    def account_notice(self) -> Optional[Feedback]:
        """Info shown on the account view when the profile row is missing."""
        if self._settings.surface_missing_profile and self._mirror.profile_missing:
            return Feedback.info(MISSING_PROFILE_MESSAGE)
        return None

    def update_field(self, name: str, value: str) -> None:
        if name not in AuthForm.model_fields:
            raise ValueError(f"Unknown auth form field: {name}")
        setattr(self.form, name, value)
        self.field_errors.pop(name, None)
        self.feedback = None

    def toggle_mode(self) -> None:
        self.mode = AuthMode.SIGNUP if self.mode == AuthMode.LOGIN else AuthMode.LOGIN
        self._clear_form()

    async def submit(self) -> bool:
        """
        Submit the form for the current mode.

        Returns True when the provider accepted the request.
        """
        if self.busy:
            return False

        self.feedback = None
        self.field_errors = {}
        if self.mode == AuthMode.LOGIN:
            return await self._sign_in()
        return await self._sign_up()

    async def sign_out(self) -> bool:
        self.busy = True
        try:
            await self._auth.sign_out()
        except AuthProviderError as e:
            self.feedback = describe_auth_error(e, self.mode).feedback
            return False
        finally:
            self.busy = False
        return True

    def close(self) -> None:
        if self._shell is not None:
            self._shell.close_auth_panel()

    async def _sign_in(self) -> bool:
        request = self.form.to_sign_in()
        errors = validate_sign_in(request)
        if errors:
            self._show_field_errors(errors)
            return False

        self.busy = True
        try:
            await self._auth.sign_in(request.email, request.password)
        except AuthProviderError as e:
            self._show_provider_error(e)
            return False
        finally:
            self.busy = False
        return True

    async def _sign_up(self) -> bool:
        request = self.form.to_sign_up()
        errors = validate_signup(request)
        if errors:
            self._show_field_errors(errors)
            return False

        self.busy = True
        try:
            result = await self._auth.sign_up(request)
        except SignUpValidationError as e:
            self._show_field_errors(e.field_errors)
            return False
        except AuthProviderError as e:
            self._show_provider_error(e)
            return False
        finally:
            self.busy = False

        if result.confirmation_required:
            self.mode = AuthMode.LOGIN
            self.form = AuthForm()
            self.feedback = Feedback.success(SIGNUP_CONFIRMATION_MESSAGE)
        return True

    def _show_field_errors(self, errors: dict[str, str]) -> None:
        self.field_errors = dict(errors)
        self.feedback = Feedback.error(next(iter(errors.values())))

    def _show_provider_error(self, error: AuthProviderError) -> None:
        decision = describe_auth_error(
            error,
            self.mode,
            suggest_signup=self._settings.suggest_signup_on_invalid_credentials,
        )
        if decision.next_mode is not None and decision.next_mode != self.mode:
            # Switching forms keeps only the email the user typed
            self.mode = decision.next_mode
            self.form = AuthForm(email=self.form.email)
        self.feedback = decision.feedback

    def _clear_form(self) -> None:
        self.form = AuthForm()
        self.feedback = None
        self.field_errors = {}

    def _on_session_change(self, change: SessionChange) -> None:
        if not change.identity_changed:
            return
        # Signed in, signed out, or a different user: start from a clean login form
        self.mode = AuthMode.LOGIN
        self._clear_form()
