"""
Contact form endpoint.

Public: no authentication required.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_contact_service

from .controller import SUCCESS_MESSAGE
from .exceptions import ContactSubmissionError
from .interfaces import IContactService
from .models import ContactMessage, ContactResponse, validate_contact

router = APIRouter()


@router.post("", response_model=ContactResponse, status_code=201)
async def submit_contact(
    message: ContactMessage,
    service: IContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Store one message from the contact page."""
    errors = validate_contact(message)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": "validation_failed", "fields": errors},
        )

    try:
        await service.submit(message)
    except ContactSubmissionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"code": e.code, "message": e.message},
        )
    return ContactResponse(message=SUCCESS_MESSAGE)
