"""
Booking service implementation with Supabase.
"""

import logging
import re
from typing import Any, Optional

from modules.auth.errors import AuthErrorCode, classify_data_error, provider_message
from shared.config import Settings, get_settings

from .exceptions import (
    BookingLookupError,
    BookingSubmissionError,
    BookingValidationError,
    MissingUserError,
)
from .interfaces import IBookingService
from .models import Booking, BookingDraft
from .pricing import PricingRates, estimate_cost
from .repository import BookingRepository
from .validation import validate_booking

logger = logging.getLogger(__name__)

UNEXPECTED_SUBMISSION_MESSAGE = "An unexpected error occurred during submission."

_SUBMISSION_MESSAGES: dict[AuthErrorCode, str] = {
    AuthErrorCode.DUPLICATE_PROFILE: "This booking has already been submitted.",
    AuthErrorCode.MISSING_PROFILE_FIELD: "Some required booking details are missing. Please review the form.",
    AuthErrorCode.UNEXPECTED: UNEXPECTED_SUBMISSION_MESSAGE,
}


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


class BookingService(IBookingService):
    """
    Booking service with Supabase backend.

    Implements IBookingService with real database operations.
    """

    def __init__(
        self,
        repository: BookingRepository,
        settings: Optional[Settings] = None,
        rates: Optional[PricingRates] = None,
    ):
        self._repo = repository
        self._settings = settings or get_settings()
        self._rates = rates or PricingRates.from_settings(self._settings)

    async def submit_booking(self, user_id: Optional[str], draft: BookingDraft) -> Booking:
        errors = validate_booking(draft)
        if errors:
            raise BookingValidationError(errors)

        if not user_id:
            raise MissingUserError()

        cost = estimate_cost(draft.bag_count, draft.weight_category, draft.service_tier, self._rates)
        if cost is None:
            raise BookingValidationError({"service_tier": "No price is available for this selection"})

        row = self._build_row(user_id, draft, cost)
        try:
            booking = self._repo.create(row)
        except Exception as e:
            raise self._submission_error(e) from e

        logger.info(f"Booking {booking.id} created for user {user_id} ({booking.status})")
        return booking

    async def list_bookings(self, user_id: str) -> list[Booking]:
        try:
            return self._repo.list_for_user(user_id)
        except Exception as e:
            reason = classify_data_error(e)
            logger.warning(f"Listing bookings for {user_id} failed ({reason.value}): {e}")
            raise BookingLookupError(reason.value) from e

    def _build_row(self, user_id: str, draft: BookingDraft, cost: Any) -> dict[str, Any]:
        seat_delivery = draft.needs_seat_details
        return {
            "user_id": user_id,
            "full_name": draft.full_name.strip(),
            "email": draft.email.strip(),
            "phone": re.sub(r"\s+", "", draft.phone),
            "pickup_address": draft.pickup_address.strip(),
            "pickup_date": draft.pickup_date,
            "pickup_time": draft.pickup_time,
            "drop_off_station": draft.drop_off_station.strip(),
            "train_number": draft.train_number.strip(),
            "train_name": _optional(draft.train_name),
            "pnr_number": _optional(draft.pnr_number),
            "departure_time": _optional(draft.departure_time),
            "delivery_preference": draft.delivery_preference,
            # Coach and seat only mean something for seat delivery
            "coach_number": _optional(draft.coach_number) if seat_delivery else None,
            "seat_number": _optional(draft.seat_number) if seat_delivery else None,
            "bag_count": int(draft.bag_count),
            "weight_category": draft.weight_category,
            "luggage_description": _optional(draft.luggage_description),
            "service_tier": draft.service_tier,
            "payment_mode": draft.payment_mode,
            "special_instructions": _optional(draft.special_instructions),
            "estimated_cost": float(cost),
            "status": self._settings.booking_default_status,
        }

    @staticmethod
    def _submission_error(exc: Exception) -> BookingSubmissionError:
        reason = classify_data_error(exc)
        if reason in _SUBMISSION_MESSAGES:
            message = _SUBMISSION_MESSAGES[reason]
        else:
            message = f"Booking failed: {provider_message(exc)}. Please try again."

        if reason == AuthErrorCode.UNEXPECTED:
            logger.exception("Booking insert failed unexpectedly")
        else:
            logger.warning(f"Booking insert rejected ({reason.value}): {provider_message(exc)}")
        return BookingSubmissionError(message, reason.value)
