"""
Content models for the static pages.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CallToAction(BaseModel):
    """A page button: either navigates to a page or triggers a shell action."""

    model_config = ConfigDict(frozen=True)

    label: str
    page: Optional[str] = None
    action: Optional[str] = None

    @model_validator(mode="after")
    def _one_target(self) -> "CallToAction":
        if (self.page is None) == (self.action is None):
            raise ValueError("A call to action needs exactly one of 'page' or 'action'")
        return self


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    body: Optional[str] = None
    items: list[str] = Field(default_factory=list)


class StorageRate(BaseModel):
    """Hourly storage price for a bag size."""

    model_config = ConfigDict(frozen=True)

    size: str
    price_per_hour: Decimal
    examples: list[str] = Field(default_factory=list)


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    subtitle: Optional[str] = None
    cta: Optional[CallToAction] = None
    sections: list[Section] = Field(default_factory=list)
    storage_rates: list[StorageRate] = Field(default_factory=list)


class PageSummary(BaseModel):
    slug: str
    title: str


class PagesResponse(BaseModel):
    pages: list[PageSummary]
    total: int
