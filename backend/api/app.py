"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    BagEaseError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)
from .routes import health, users
from modules.auth.routes import router as auth_router
from modules.bookings.routes import router as bookings_router
from modules.contacts.routes import router as contact_router
from modules.content.routes import router as pages_router

logger = logging.getLogger(__name__)


def _status_for(error: BagEaseError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, ValidationError):
        return 422
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, ExternalServiceError):
        return 502
    return 500


async def handle_bagease_error(request: Request, exc: BagEaseError) -> JSONResponse:
    """Render domain errors that a route did not translate itself."""
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    if not settings.supabase_jwt_secret:
        logger.warning("SUPABASE_JWT_SECRET is not set; authenticated routes will reject every request")
    yield
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Luggage pickup, storage and delivery bookings for rail travellers",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(BagEaseError, handle_bagease_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(bookings_router, prefix="/api/bookings", tags=["bookings"])
    app.include_router(contact_router, prefix="/api/contact", tags=["contact"])
    app.include_router(pages_router, prefix="/api/pages", tags=["pages"])

    return app


# Application instance for uvicorn
app = create_app()
