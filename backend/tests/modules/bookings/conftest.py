"""Fixtures for booking tests."""

from datetime import date, timedelta

import pytest

from modules.bookings.models import BookingDraft


@pytest.fixture
def tomorrow() -> str:
    return (date.today() + timedelta(days=1)).isoformat()


@pytest.fixture
def valid_draft(tomorrow) -> BookingDraft:
    return BookingDraft(
        full_name="Asha Verma",
        email="asha@example.com",
        phone="9876543210",
        pickup_address="12 MG Road, Bengaluru",
        pickup_date=tomorrow,
        pickup_time="09:30",
        drop_off_station="KSR Bengaluru",
        train_number="12628",
        train_name="Karnataka Express",
        pnr_number="4521873690",
        departure_time="19:20",
        delivery_preference="Platform Handover",
        bag_count="2",
        weight_category="10-20kg",
        service_tier="Standard",
        payment_mode="UPI",
    )


def _booking_row(**overrides) -> dict:
    row = {
        "id": "booking-1",
        "user_id": "test-user-123",
        "full_name": "Asha Verma",
        "email": "asha@example.com",
        "phone": "9876543210",
        "pickup_address": "12 MG Road, Bengaluru",
        "pickup_date": "2030-01-15",
        "pickup_time": "09:30",
        "drop_off_station": "KSR Bengaluru",
        "train_number": "12628",
        "train_name": "Karnataka Express",
        "pnr_number": None,
        "departure_time": None,
        "delivery_preference": "Platform Handover",
        "coach_number": None,
        "seat_number": None,
        "bag_count": 2,
        "weight_category": "10-20kg",
        "luggage_description": None,
        "service_tier": "Standard",
        "payment_mode": "UPI",
        "special_instructions": None,
        "estimated_cost": 240.0,
        "status": "Pending",
        "created_at": "2030-01-10T08:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def booking_row():
    """Factory for a stored bookings row as PostgREST returns it."""
    return _booking_row
