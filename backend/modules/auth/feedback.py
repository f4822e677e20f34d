"""
Maps classified auth failures to user-facing feedback.

Each entry decides the message, its severity, and whether the auth panel
should switch forms as a side effect.
"""

import logging
from typing import NamedTuple, Optional

from shared.models import Feedback

from .errors import AuthErrorCode
from .exceptions import AuthProviderError
from .models import AuthMode

logger = logging.getLogger(__name__)

UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."

_MESSAGES: dict[AuthErrorCode, str] = {
    AuthErrorCode.WEAK_PASSWORD: "Password must be at least 6 characters long.",
    AuthErrorCode.INVALID_EMAIL: "Please enter a valid email address.",
    AuthErrorCode.RATE_LIMITED: "Too many attempts. Please try again later.",
    AuthErrorCode.MISSING_PROFILE_FIELD: "Please fill in all required profile fields.",
    AuthErrorCode.DUPLICATE_PROFILE: "A profile with these details already exists.",
    AuthErrorCode.INVALID_NATIONAL_ID: "National ID must be exactly 12 digits.",
    AuthErrorCode.UNEXPECTED: UNEXPECTED_MESSAGE,
}


class FeedbackDecision(NamedTuple):
    feedback: Feedback
    next_mode: Optional[AuthMode] = None


def describe_auth_error(
    error: AuthProviderError,
    mode: AuthMode,
    suggest_signup: bool = True,
) -> FeedbackDecision:
    """
    Decide what to show for a failed auth action.

    Args:
        error: The classified provider error
        mode: The form the user submitted
        suggest_signup: Offer sign-up when a login is rejected

    Returns:
        The feedback to display and the mode to switch to, if any
    """
    reason = error.reason

    if reason == AuthErrorCode.INVALID_CREDENTIALS:
        if mode == AuthMode.LOGIN and suggest_signup:
            return FeedbackDecision(
                Feedback.info(
                    "Account not found with this email/password. "
                    "Would you like to sign up instead?"
                ),
                AuthMode.SIGNUP,
            )
        if mode == AuthMode.LOGIN:
            return FeedbackDecision(Feedback.error("Invalid email or password."))
        return FeedbackDecision(
            Feedback.error("Signup failed: Invalid credentials format or other issue.")
        )

    if reason == AuthErrorCode.EMAIL_TAKEN:
        return FeedbackDecision(
            Feedback.info("This email is already registered. Please log in."),
            AuthMode.LOGIN if mode == AuthMode.SIGNUP else None,
        )

    if reason in _MESSAGES:
        return FeedbackDecision(Feedback.error(_MESSAGES[reason]))

    # Unrecognised provider answer: show what the provider said
    logger.warning(f"Unclassified auth error passed through: {error.provider_message}")
    return FeedbackDecision(Feedback.error(error.provider_message or UNEXPECTED_MESSAGE))
