"""
Booking data models.

``BookingDraft`` holds raw form input (every field a string, as typed or
selected). ``Booking`` is the typed row stored in the ``bookings`` table.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class DeliveryPreference(str, Enum):
    DELIVER_TO_SEAT = "Deliver to Seat"
    PLATFORM_HANDOVER = "Platform Handover"
    STATION_COUNTER = "Station Counter"


class WeightCategory(str, Enum):
    LIGHT = "0-10kg"
    MEDIUM = "10-20kg"
    HEAVY = "20kg+"


class ServiceTier(str, Enum):
    STANDARD = "Standard"
    EXPRESS = "Express"


class PaymentMode(str, Enum):
    ONLINE = "Online"
    UPI = "UPI"
    CASH_ON_PICKUP = "Cash on Pickup"


class BookingStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


class BookingDraft(BaseModel):
    """
    In-progress booking form.

    Field order is the on-screen order and decides which invalid field
    receives focus first.
    """

    # Contact
    full_name: str = ""
    email: str = ""
    phone: str = ""

    # Pickup
    pickup_address: str = ""
    pickup_date: str = Field("", description="YYYY-MM-DD")
    pickup_time: str = Field("", description="HH:MM")

    # Train
    drop_off_station: str = ""
    train_number: str = ""
    train_name: str = ""
    pnr_number: str = ""
    departure_time: str = Field("", description="HH:MM")

    # Handover
    delivery_preference: str = ""
    coach_number: str = ""
    seat_number: str = ""

    # Luggage
    bag_count: str = "1"
    weight_category: str = ""
    luggage_description: str = ""

    # Service and payment
    service_tier: str = ""
    payment_mode: str = ""
    special_instructions: str = ""

    @property
    def needs_seat_details(self) -> bool:
        return self.delivery_preference == DeliveryPreference.DELIVER_TO_SEAT.value


BOOKING_FIELDS: tuple[str, ...] = tuple(BookingDraft.model_fields)
COST_FIELDS = frozenset({"bag_count", "weight_category", "service_tier"})


class Booking(BaseModel):
    """A stored booking row."""

    id: str
    user_id: str
    full_name: str
    email: str
    phone: str
    pickup_address: str
    pickup_date: date
    pickup_time: str
    drop_off_station: str
    train_number: str
    train_name: Optional[str] = None
    pnr_number: Optional[str] = None
    departure_time: Optional[str] = None
    delivery_preference: DeliveryPreference
    coach_number: Optional[str] = None
    seat_number: Optional[str] = None
    bag_count: int
    weight_category: WeightCategory
    luggage_description: Optional[str] = None
    service_tier: ServiceTier
    payment_mode: PaymentMode
    special_instructions: Optional[str] = None
    estimated_cost: Decimal
    status: str = BookingStatus.PENDING.value
    created_at: Optional[datetime] = None


class CostEstimateRequest(BaseModel):
    """Inputs of the cost estimate; any may be missing."""

    bag_count: Optional[int] = None
    weight_category: Optional[str] = None
    service_tier: Optional[str] = None


class CostEstimateResponse(BaseModel):
    """Estimated price in INR, or None while an input is unset."""

    estimated_cost: Optional[Decimal] = None
    currency: str = "INR"
