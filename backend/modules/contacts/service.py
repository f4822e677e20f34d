"""
Contact service implementation.
"""

import logging

from modules.auth.errors import classify_data_error

from .exceptions import ContactSubmissionError
from .interfaces import IContactService
from .models import ContactMessage
from .repository import ContactRepository

logger = logging.getLogger(__name__)


class ContactService(IContactService):
    """Inserts contact messages through an anonymous Supabase client."""

    def __init__(self, repository: ContactRepository):
        self._repo = repository

    async def submit(self, message: ContactMessage) -> None:
        try:
            self._repo.add(message)
        except Exception as e:
            reason = classify_data_error(e)
            logger.error(f"Error submitting contact form ({reason.value}): {e}")
            raise ContactSubmissionError(reason.value) from e
        logger.info(f"Contact message received: {message.subject!r}")
