"""
Bookings module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Booking, BookingDraft


@runtime_checkable
class IBookingService(Protocol):
    """Interface for booking operations."""

    async def submit_booking(self, user_id: Optional[str], draft: BookingDraft) -> Booking:
        """
        Validate and store a booking.

        Args:
            user_id: The signed-in user; None aborts the submission
            draft: The form values

        Raises:
            MissingUserError: If user_id is None
            BookingValidationError: If the draft is invalid
            BookingSubmissionError: If the insert fails

        Returns:
            The stored booking
        """
        ...

    async def list_bookings(self, user_id: str) -> list[Booking]:
        """
        List a user's bookings, most recent first.

        Raises:
            BookingLookupError: If Supabase cannot return the rows
        """
        ...
