"""Tests for the account side panel."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from modules.account.mirror import SessionMirror
from modules.account.panel import (
    MISSING_PROFILE_MESSAGE,
    SIGNUP_CONFIRMATION_MESSAGE,
    AccountPanel,
    AuthForm,
    PanelView,
)
from modules.account.shell import AppShell
from modules.auth.errors import AuthErrorCode
from modules.auth.exceptions import AuthProviderError
from modules.auth.models import AuthMode, AuthResult, AuthSession, AuthUser
from modules.auth.service import AuthService
from modules.profiles.models import Profile
from shared.config import Settings
from shared.models import Feedback, FeedbackKind

from tests.conftest import sdk_session, sdk_user

VALID_SIGNUP = {
    "email": "asha@example.com",
    "password": "secret123",
    "full_name": "Asha Verma",
    "phone": "9876543210",
    "date_of_birth": "1990-05-17",
    "national_id": "123456789012",
}


@pytest.fixture
def auth() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mirror() -> SessionMirror:
    profiles = AsyncMock()
    profiles.get_profile.return_value = None
    mirror = SessionMirror(MagicMock(), profiles)
    return mirror


@pytest.fixture
def shell() -> AppShell:
    return AppShell()


@pytest.fixture
def panel(auth, mirror, shell) -> AccountPanel:
    panel = AccountPanel(auth, mirror, shell, Settings(_env_file=None))
    mirror.apply("INITIAL_SESSION", None)
    return panel


def fill(panel: AccountPanel, values: dict) -> None:
    for name, value in values.items():
        panel.update_field(name, value)


class TestView:
    def test_loading_until_first_session(self, auth, mirror):
        panel = AccountPanel(auth, mirror, settings=Settings(_env_file=None))
        assert panel.view == PanelView.LOADING

    def test_signed_out(self, panel):
        assert panel.view == PanelView.AUTH
        assert panel.mode == AuthMode.LOGIN

    def test_signed_in(self, panel, mirror):
        mirror.apply("SIGNED_IN", AuthSession.from_sdk(sdk_session()))
        assert panel.view == PanelView.ACCOUNT


class TestForm:
    def test_update_field_clears_its_error(self, panel):
        panel.field_errors = {"email": "Email is required.", "password": "Password is required."}
        panel.update_field("email", "a@b.co")
        assert panel.field_errors == {"password": "Password is required."}

    def test_unknown_field(self, panel):
        with pytest.raises(ValueError):
            panel.update_field("age", "30")

    def test_toggle_mode_clears_form(self, panel):
        panel.update_field("email", "a@b.co")
        panel.toggle_mode()
        assert panel.mode == AuthMode.SIGNUP
        assert panel.form == AuthForm()


class TestLogin:
    @pytest.mark.asyncio
    async def test_missing_fields_block_submit(self, panel, auth):
        assert await panel.submit() is False
        assert panel.field_errors["email"] == "Email is required."
        auth.sign_in.assert_not_called()

    @pytest.mark.asyncio
    async def test_success_does_not_switch_view(self, panel, auth):
        auth.sign_in.return_value = AuthResult()
        fill(panel, {"email": "test@example.com", "password": "secret123"})

        assert await panel.submit() is True

        auth.sign_in.assert_awaited_once_with("test@example.com", "secret123")
        assert panel.view == PanelView.AUTH
        assert panel.busy is False

    @pytest.mark.asyncio
    async def test_unknown_account_suggests_signup(self, panel, auth):
        auth.sign_in.side_effect = AuthProviderError(AuthErrorCode.INVALID_CREDENTIALS, "Invalid login credentials")
        fill(panel, {"email": "new@example.com", "password": "secret123"})

        assert await panel.submit() is False

        assert panel.mode == AuthMode.SIGNUP
        assert panel.form.email == "new@example.com"
        assert panel.form.password == ""
        assert panel.feedback.kind == FeedbackKind.INFO

    @pytest.mark.asyncio
    async def test_suggestion_can_be_disabled(self, auth, mirror):
        panel = AccountPanel(
            auth, mirror, settings=Settings(_env_file=None, suggest_signup_on_invalid_credentials=False)
        )
        auth.sign_in.side_effect = AuthProviderError(AuthErrorCode.INVALID_CREDENTIALS)
        fill(panel, {"email": "new@example.com", "password": "secret123"})

        await panel.submit()

        assert panel.mode == AuthMode.LOGIN
        assert panel.feedback.text == "Invalid email or password."


class TestSignUp:
    @pytest.mark.asyncio
    async def test_validation_before_network(self, panel, auth):
        panel.toggle_mode()
        fill(panel, {**VALID_SIGNUP, "national_id": "12345"})

        assert await panel.submit() is False

        assert panel.field_errors == {"national_id": "National ID must be exactly 12 digits."}
        assert panel.feedback.text == "National ID must be exactly 12 digits."
        auth.sign_up.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_ascii_digits_rejected_before_network(self, panel, auth):
        panel.toggle_mode()
        fill(panel, {**VALID_SIGNUP, "national_id": "١٢٣٤٥٦٧٨٩٠١٢"})

        assert await panel.submit() is False

        assert "national_id" in panel.field_errors
        auth.sign_up.assert_not_called()

    @pytest.mark.asyncio
    async def test_confirmation_required(self, panel, auth):
        auth.sign_up.return_value = AuthResult(user=AuthUser(id="user-1"), session=None)
        panel.toggle_mode()
        fill(panel, VALID_SIGNUP)

        assert await panel.submit() is True

        assert panel.mode == AuthMode.LOGIN
        assert panel.form == AuthForm()
        assert panel.feedback.kind == FeedbackKind.SUCCESS
        assert panel.feedback.text == SIGNUP_CONFIRMATION_MESSAGE

    @pytest.mark.asyncio
    async def test_email_taken_switches_to_login(self, panel, auth):
        auth.sign_up.side_effect = AuthProviderError(AuthErrorCode.EMAIL_TAKEN, "User already registered")
        panel.toggle_mode()
        fill(panel, VALID_SIGNUP)

        await panel.submit()

        assert panel.mode == AuthMode.LOGIN
        assert panel.form.email == "asha@example.com"
        assert panel.form.national_id == ""

    @pytest.mark.asyncio
    async def test_profile_error_stays_on_signup(self, panel, auth):
        auth.sign_up.side_effect = AuthProviderError(AuthErrorCode.DUPLICATE_PROFILE, "duplicate key")
        panel.toggle_mode()
        fill(panel, VALID_SIGNUP)

        await panel.submit()

        assert panel.mode == AuthMode.SIGNUP
        assert panel.form.national_id == "123456789012"
        assert panel.feedback.text == "A profile with these details already exists."

    @pytest.mark.asyncio
    async def test_confirmation_path_with_supabase_client(self, mirror):
        client = MagicMock()
        client.auth.sign_up.return_value = SimpleNamespace(user=sdk_user("user-1"), session=None)
        panel = AccountPanel(AuthService(client), mirror, settings=Settings(_env_file=None))
        mirror.apply("INITIAL_SESSION", None)
        panel.toggle_mode()
        fill(panel, VALID_SIGNUP)

        assert await panel.submit() is True

        metadata = client.auth.sign_up.call_args.args[0]["options"]["data"]
        assert metadata["national_id"] == "123456789012"
        client.table.assert_not_called()
        assert panel.mode == AuthMode.LOGIN
        assert panel.form == AuthForm()
        assert panel.feedback.text == SIGNUP_CONFIRMATION_MESSAGE
        assert panel.view == PanelView.AUTH


class TestSessionChanges:
    def test_identity_change_resets_form(self, panel, mirror):
        panel.toggle_mode()
        fill(panel, {"email": "asha@example.com"})

        mirror.apply("SIGNED_IN", AuthSession.from_sdk(sdk_session()))

        assert panel.mode == AuthMode.LOGIN
        assert panel.form == AuthForm()
        assert panel.feedback is None

    @pytest.mark.asyncio
    async def test_sign_out(self, panel, auth):
        assert await panel.sign_out() is True
        auth.sign_out.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_signed_out_event_clears_everything(self, auth):
        profiles = AsyncMock()
        profiles.get_profile.return_value = Profile(id="test-user-123", full_name="Asha Verma")
        mirror = SessionMirror(MagicMock(), profiles)
        panel = AccountPanel(auth, mirror, settings=Settings(_env_file=None))
        request = mirror.apply("INITIAL_SESSION", AuthSession.from_sdk(sdk_session()))
        await mirror.load_profile(request)
        assert mirror.profile.full_name == "Asha Verma"

        panel.toggle_mode()
        fill(panel, VALID_SIGNUP)
        panel.feedback = Feedback.error("Something went wrong.")

        assert await panel.sign_out() is True
        mirror.apply("SIGNED_OUT", None)

        assert panel.mode == AuthMode.LOGIN
        assert panel.form == AuthForm()
        assert panel.feedback is None
        assert panel.field_errors == {}
        assert mirror.profile is None
        assert panel.view == PanelView.AUTH

    @pytest.mark.asyncio
    async def test_sign_out_failure(self, panel, auth):
        auth.sign_out.side_effect = AuthProviderError(AuthErrorCode.UNEXPECTED)
        assert await panel.sign_out() is False
        assert panel.feedback.kind == FeedbackKind.ERROR


class TestAccountNotice:
    @pytest.mark.asyncio
    async def test_hidden_by_default(self, panel, mirror):
        request = mirror.apply("SIGNED_IN", AuthSession.from_sdk(sdk_session()))
        await mirror.load_profile(request)
        assert mirror.profile_missing is True
        assert panel.account_notice is None

    @pytest.mark.asyncio
    async def test_shown_when_enabled(self, auth, mirror):
        panel = AccountPanel(auth, mirror, settings=Settings(_env_file=None, surface_missing_profile=True))
        request = mirror.apply("SIGNED_IN", AuthSession.from_sdk(sdk_session()))
        await mirror.load_profile(request)
        assert panel.account_notice.text == MISSING_PROFILE_MESSAGE


def test_close_closes_shell_panel(panel, shell):
    shell.open_auth_panel()
    panel.close()
    assert shell.auth_panel_open is False
