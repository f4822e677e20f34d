"""
Loads static page content from YAML.

Pages live in ``pages.yaml`` next to this module. The file is parsed
once and cached; tests can load other files through ``load_pages``.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from .exceptions import PageNotFoundError
from .models import Page

logger = logging.getLogger(__name__)

PAGES_FILE = Path(__file__).parent / "pages.yaml"


def load_pages(pages_path: Path) -> dict[str, Page]:
    """Load pages from a YAML file.

    Args:
        pages_path: Path to the YAML file

    Returns:
        Pages keyed by slug, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is invalid YAML
        ValueError: If two pages share a slug
    """
    with open(pages_path) as f:
        data = yaml.safe_load(f) or {}

    pages: dict[str, Page] = {}
    for entry in data.get("pages", []):
        page = Page.model_validate(entry)
        if page.slug in pages:
            raise ValueError(f"Duplicate page slug: {page.slug}")
        pages[page.slug] = page

    logger.debug(f"Loaded {len(pages)} pages from {pages_path}")
    return pages


@lru_cache
def get_pages() -> dict[str, Page]:
    """Get the site pages (cached)."""
    return load_pages(PAGES_FILE)


def get_page(slug: str) -> Page:
    """
    Get a single page.

    Raises:
        PageNotFoundError: If no page has this slug
    """
    page = get_pages().get(slug)
    if page is None:
        raise PageNotFoundError(slug)
    return page
