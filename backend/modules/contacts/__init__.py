"""
Contacts module.

One-way contact form: messages are inserted into the public ``Contacts``
table and never read back by the application.

Public API:
- IContactService / ContactService
- ContactMessage
- ContactForm: Form controller
- ContactSubmissionError
"""

from .interfaces import IContactService
from .models import ContactMessage
from .controller import ContactForm
from .exceptions import ContactSubmissionError

__all__ = [
    "IContactService",
    "ContactMessage",
    "ContactForm",
    "ContactSubmissionError",
]
