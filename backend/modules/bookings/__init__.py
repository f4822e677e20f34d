"""
Bookings module.

Handles the luggage pickup/delivery booking form: validation, cost
estimation, and persistence to the ``bookings`` table.

Public API:
- IBookingService: Interface for booking operations
- BookingDraft / Booking: Form input and stored row
- BookingForm: Form controller
- estimate_cost / PricingRates: Cost estimate
- validate_booking / first_invalid_field
"""

from .interfaces import IBookingService
from .models import (
    BOOKING_FIELDS,
    Booking,
    BookingDraft,
    BookingStatus,
    DeliveryPreference,
    PaymentMode,
    ServiceTier,
    WeightCategory,
    CostEstimateRequest,
    CostEstimateResponse,
)
from .controller import BookingForm
from .pricing import PricingRates, estimate_cost
from .validation import first_invalid_field, validate_booking
from .exceptions import (
    BookingValidationError,
    BookingLookupError,
    BookingSubmissionError,
    MissingUserError,
)

__all__ = [
    # Interface
    "IBookingService",
    # Models
    "BOOKING_FIELDS",
    "Booking",
    "BookingDraft",
    "BookingStatus",
    "DeliveryPreference",
    "PaymentMode",
    "ServiceTier",
    "WeightCategory",
    "CostEstimateRequest",
    "CostEstimateResponse",
    # Controller
    "BookingForm",
    # Pricing / validation
    "PricingRates",
    "estimate_cost",
    "first_invalid_field",
    "validate_booking",
    # Exceptions
    "BookingValidationError",
    "BookingLookupError",
    "BookingSubmissionError",
    "MissingUserError",
]
