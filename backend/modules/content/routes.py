"""
Static page content endpoints.
"""

from fastapi import APIRouter, HTTPException, status

from .exceptions import PageNotFoundError
from .loader import get_page, get_pages
from .models import Page, PageSummary, PagesResponse

router = APIRouter()


@router.get("", response_model=PagesResponse)
async def list_pages() -> PagesResponse:
    """List the available content pages."""
    pages = [PageSummary(slug=p.slug, title=p.title) for p in get_pages().values()]
    return PagesResponse(pages=pages, total=len(pages))


@router.get("/{slug}", response_model=Page)
async def read_page(slug: str) -> Page:
    """Get a page's full content."""
    try:
        return get_page(slug)
    except PageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
