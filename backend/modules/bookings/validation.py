"""Booking form validation."""

import re
from datetime import date, time
from typing import Optional

from .models import (
    BOOKING_FIELDS,
    BookingDraft,
    DeliveryPreference,
    PaymentMode,
    ServiceTier,
    WeightCategory,
)

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"^[0-9]{10,15}$")
TRAIN_NUMBER_PATTERN = re.compile(r"^[0-9]{5}$")
PNR_PATTERN = re.compile(r"^[0-9]{10}$")
MAX_BAGS = 10


def _choice_values(enum_cls) -> set[str]:
    return {member.value for member in enum_cls}


def _parse_time(value: str) -> Optional[time]:
    try:
        return time.fromisoformat(value)
    except ValueError:
        return None


def validate_booking(draft: BookingDraft, today: Optional[date] = None) -> dict[str, str]:
    """
    Check every field of the draft.

    Returns a field -> message map ordered like the form; empty when valid.
    """
    today = today or date.today()
    errors: dict[str, str] = {}

    if not draft.full_name.strip():
        errors["full_name"] = "Name is required"

    if not draft.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(draft.email):
        errors["email"] = "Please enter a valid email"

    phone = re.sub(r"\s+", "", draft.phone)
    if not phone:
        errors["phone"] = "Phone number is required"
    elif not PHONE_PATTERN.match(phone):
        errors["phone"] = "Please enter a valid phone number (10-15 digits)"

    if not draft.pickup_address.strip():
        errors["pickup_address"] = "Pickup address is required"

    if not draft.pickup_date:
        errors["pickup_date"] = "Date is required"
    else:
        try:
            if date.fromisoformat(draft.pickup_date) < today:
                errors["pickup_date"] = "Date cannot be in the past"
        except ValueError:
            errors["pickup_date"] = "Please enter a valid date"

    if not draft.pickup_time:
        errors["pickup_time"] = "Pickup time is required"
    elif _parse_time(draft.pickup_time) is None:
        errors["pickup_time"] = "Please enter a valid time (HH:MM)"

    if not draft.drop_off_station.strip():
        errors["drop_off_station"] = "Drop-off station is required"

    if not draft.train_number.strip():
        errors["train_number"] = "Train number is required"
    elif not TRAIN_NUMBER_PATTERN.match(draft.train_number.strip()):
        errors["train_number"] = "Train number must be 5 digits"

    if draft.pnr_number.strip() and not PNR_PATTERN.match(draft.pnr_number.strip()):
        errors["pnr_number"] = "PNR number must be 10 digits"

    if draft.departure_time and _parse_time(draft.departure_time) is None:
        errors["departure_time"] = "Please enter a valid time (HH:MM)"

    if draft.delivery_preference not in _choice_values(DeliveryPreference):
        errors["delivery_preference"] = "Please select a delivery preference"
    elif draft.needs_seat_details:
        if not draft.coach_number.strip():
            errors["coach_number"] = "Coach number is required for seat delivery"
        if not draft.seat_number.strip():
            errors["seat_number"] = "Seat number is required for seat delivery"

    try:
        bags = int(draft.bag_count)
    except ValueError:
        bags = 0
    if not 1 <= bags <= MAX_BAGS:
        errors["bag_count"] = f"Please select between 1 and {MAX_BAGS} bags"

    if draft.weight_category not in _choice_values(WeightCategory):
        errors["weight_category"] = "Please select a weight category"

    if draft.service_tier not in _choice_values(ServiceTier):
        errors["service_tier"] = "Please select a service type"

    if draft.payment_mode not in _choice_values(PaymentMode):
        errors["payment_mode"] = "Please select a payment method"

    return {name: errors[name] for name in BOOKING_FIELDS if name in errors}


def first_invalid_field(errors: dict[str, str]) -> Optional[str]:
    """The field that should receive focus: first in form order."""
    for name in BOOKING_FIELDS:
        if name in errors:
            return name
    return None
