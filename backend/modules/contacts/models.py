"""
Contact form models.
"""

import re

from pydantic import BaseModel, Field

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class ContactMessage(BaseModel):
    """A message sent from the contact page."""

    name: str = Field("", description="Sender name")
    email: str = Field("", description="Reply-to address")
    subject: str = Field("", description="Subject line")
    message: str = Field("", description="Message body")


class ContactResponse(BaseModel):
    """API response after a contact submission."""

    message: str


def validate_contact(message: ContactMessage) -> dict[str, str]:
    """Every field is required; the email needs an @ and a domain."""
    errors: dict[str, str] = {}
    for name in ContactMessage.model_fields:
        if not getattr(message, name).strip():
            errors[name] = f"{name.capitalize()} is required"
    if "email" not in errors and not EMAIL_PATTERN.search(message.email):
        errors["email"] = "Please enter a valid email"
    return errors
