"""
Content module exceptions.
"""

from shared.exceptions import NotFoundError


class PageNotFoundError(NotFoundError):
    """Raised when no page has the requested slug."""

    def __init__(self, slug: str):
        super().__init__(
            message=f"Page not found: {slug}",
            code="PAGE_NOT_FOUND",
            details={"slug": slug},
        )
