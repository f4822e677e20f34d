"""Contact page form controller."""

from typing import Optional

from shared.models import Feedback

from .exceptions import ContactSubmissionError
from .interfaces import IContactService
from .models import ContactMessage, validate_contact

SUCCESS_MESSAGE = "Thank you! Your message has been sent successfully."


class ContactForm:
    """
    Contact form state.

    Entered values survive a failed submission so the user can retry.
    """

    def __init__(self, contacts: IContactService):
        self._contacts = contacts
        self.values = ContactMessage()
        self.feedback: Optional[Feedback] = None
        self.errors: dict[str, str] = {}
        self.loading = False

    def set_field(self, name: str, value: str) -> None:
        if name not in ContactMessage.model_fields:
            raise ValueError(f"Unknown contact field: {name}")
        setattr(self.values, name, value)
        self.errors.pop(name, None)
        self.feedback = None

    async def submit(self) -> bool:
        if self.loading:
            return False

        self.feedback = None
        self.errors = validate_contact(self.values)
        if self.errors:
            self.feedback = Feedback.error(next(iter(self.errors.values())))
            return False

        self.loading = True
        try:
            await self._contacts.submit(self.values.model_copy())
        except ContactSubmissionError as e:
            self.feedback = Feedback.error(e.message)
            return False
        finally:
            self.loading = False

        self.feedback = Feedback.success(SUCCESS_MESSAGE)
        self.values = ContactMessage()
        return True
