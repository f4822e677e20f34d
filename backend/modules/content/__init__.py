"""
Content module.

Static marketing and information pages (home, about, services, storage,
pickup, delivery, contact) loaded from ``pages.yaml``.
"""

from .exceptions import PageNotFoundError
from .loader import get_page, get_pages, load_pages
from .models import CallToAction, Page, Section, StorageRate

__all__ = [
    "CallToAction",
    "Page",
    "Section",
    "StorageRate",
    "PageNotFoundError",
    "get_page",
    "get_pages",
    "load_pages",
]
