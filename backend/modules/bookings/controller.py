"""
Booking form controller.

Owns the draft, its validation messages, and the live cost estimate.
A successful submit shows a success overlay for a few seconds and then
clears the draft.
"""

import asyncio
import logging
from decimal import Decimal
from typing import Awaitable, Callable, Optional

from modules.account.shell import AppShell
from modules.auth.exceptions import AuthProviderError
from shared.config import Settings, get_settings
from shared.models import Feedback

from .exceptions import BookingSubmissionError, BookingValidationError, MissingUserError
from .interfaces import IBookingService
from .models import BOOKING_FIELDS, COST_FIELDS, Booking, BookingDraft
from .pricing import PricingRates, estimate_cost
from .validation import first_invalid_field, validate_booking

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Booking successful! We will contact you shortly."

UserIdProvider = Callable[[], Awaitable[Optional[str]]]


class BookingForm:
    """
    Booking form state.

    Attributes:
        draft: Current input values
        errors: Field -> message from the last submit
        focus_field: First invalid field after a failed submit
        estimate: Price for the current bag count / weight / tier, or None
        feedback: Form-level message (submission error or success)
        success_visible: The success overlay is showing
    """

    def __init__(
        self,
        bookings: IBookingService,
        current_user_id: UserIdProvider,
        shell: Optional[AppShell] = None,
        settings: Optional[Settings] = None,
        rates: Optional[PricingRates] = None,
    ):
        self._bookings = bookings
        self._current_user_id = current_user_id
        self._shell = shell
        self._settings = settings or get_settings()
        self._rates = rates or PricingRates.from_settings(self._settings)
        self._overlay_task: Optional[asyncio.Task] = None

        self.draft = BookingDraft()
        self.errors: dict[str, str] = {}
        self.focus_field: Optional[str] = None
        self.feedback: Optional[Feedback] = None
        self.submitting = False
        self.success_visible = False
        self.last_booking: Optional[Booking] = None
        self.estimate: Optional[Decimal] = self._compute_estimate()

    @property
    def can_submit(self) -> bool:
        return self.estimate is not None and not self.submitting and not self.success_visible

    def set_field(self, name: str, value: str) -> None:
        if name not in BOOKING_FIELDS:
            raise ValueError(f"Unknown booking field: {name}")

        setattr(self.draft, name, value)
        self.errors.pop(name, None)
        self.feedback = None

        if name == "delivery_preference" and not self.draft.needs_seat_details:
            self.errors.pop("coach_number", None)
            self.errors.pop("seat_number", None)

        if name in COST_FIELDS:
            self.estimate = self._compute_estimate()

    async def submit(self) -> Optional[Booking]:
        """
        Validate and submit the draft.

        Returns the stored booking, or None when the submission was blocked
        or failed (``errors`` / ``feedback`` say why).
        """
        if not self.can_submit:
            return None

        self.feedback = None
        errors = validate_booking(self.draft)
        if errors:
            self._show_errors(errors)
            return None

        self.errors = {}
        self.focus_field = None
        self.submitting = True
        try:
            user_id = await self._current_user_id()
            booking = await self._bookings.submit_booking(user_id, self.draft)
        except MissingUserError as e:
            self.feedback = Feedback.error(e.message)
            if self._shell is not None:
                self._shell.open_auth_panel()
            return None
        except BookingValidationError as e:
            self._show_errors(e.field_errors)
            return None
        except BookingSubmissionError as e:
            self.feedback = Feedback.error(e.message)
            return None
        except AuthProviderError as e:
            logger.warning(f"Could not read the current user: {e.message}")
            self.feedback = Feedback.error("An unexpected error occurred during submission.")
            return None
        finally:
            self.submitting = False

        self.last_booking = booking
        self.success_visible = True
        self.feedback = Feedback.success(SUCCESS_MESSAGE)
        self._overlay_task = asyncio.ensure_future(
            self._dismiss_after(self._settings.booking_success_overlay_seconds)
        )
        return booking

    async def wait_overlay(self) -> None:
        """Wait until the success overlay has been dismissed."""
        if self._overlay_task is not None:
            await self._overlay_task

    def reset(self) -> None:
        if self._overlay_task is not None and not self._overlay_task.done():
            self._overlay_task.cancel()
        self.draft = BookingDraft()
        self.errors = {}
        self.focus_field = None
        self.feedback = None
        self.success_visible = False
        self.estimate = self._compute_estimate()

    async def _dismiss_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self._overlay_task = None
        self.reset()

    def _show_errors(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        self.focus_field = first_invalid_field(errors)

    def _compute_estimate(self) -> Optional[Decimal]:
        return estimate_cost(
            self.draft.bag_count,
            self.draft.weight_category,
            self.draft.service_tier,
            self._rates,
        )
