"""
Contacts module interface.
"""

from typing import Protocol, runtime_checkable

from .models import ContactMessage


@runtime_checkable
class IContactService(Protocol):
    """Interface for contact form submissions."""

    async def submit(self, message: ContactMessage) -> None:
        """
        Store one contact message.

        Raises:
            ContactSubmissionError: If the insert fails
        """
        ...
