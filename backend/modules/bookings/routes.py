"""
Booking API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_booking_service, get_pricing_rates
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .exceptions import BookingLookupError, BookingSubmissionError, BookingValidationError
from .interfaces import IBookingService
from .models import Booking, BookingDraft, CostEstimateRequest, CostEstimateResponse
from .pricing import PricingRates, estimate_cost

router = APIRouter()


@router.post("", response_model=Booking, status_code=201)
async def create_booking(
    draft: BookingDraft,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> Booking:
    """
    Submit a booking for the signed-in user.

    The booking is stored with the configured default status (Pending).
    """
    try:
        return await service.submit_booking(user.id, draft)
    except BookingValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": "validation_failed", "fields": e.field_errors},
        )
    except BookingSubmissionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"code": e.reason, "message": e.message},
        )


@router.get("", response_model=list[Booking])
async def list_bookings(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> list[Booking]:
    """List the current user's bookings, most recent first."""
    try:
        return await service.list_bookings(user.id)
    except BookingLookupError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"code": e.reason, "message": e.message},
        )


@router.post("/estimate", response_model=CostEstimateResponse)
async def estimate_booking_cost(
    request: CostEstimateRequest,
    rates: PricingRates = Depends(get_pricing_rates),
) -> CostEstimateResponse:
    """
    Price a booking before submitting it.

    ``estimated_cost`` is null until bag count, weight category and
    service tier are all provided.
    """
    return CostEstimateResponse(
        estimated_cost=estimate_cost(
            request.bag_count,
            request.weight_category,
            request.service_tier,
            rates,
        )
    )
