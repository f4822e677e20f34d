"""
Auth API endpoints.

Sign-in, sign-up and sign-out on behalf of a browser client. Failures are
returned with the same friendly text the account panel shows.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_auth_service, get_user_auth_service

from .errors import AuthErrorCode
from .exceptions import AuthProviderError, SignUpValidationError
from .feedback import describe_auth_error
from .interfaces import IAuthService
from .models import AuthMode, SessionResponse, SignInRequest, SignUpRequest
from .validation import validate_sign_in

router = APIRouter()

_STATUS_BY_REASON: dict[AuthErrorCode, int] = {
    AuthErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AuthErrorCode.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    AuthErrorCode.DUPLICATE_PROFILE: status.HTTP_409_CONFLICT,
    AuthErrorCode.WEAK_PASSWORD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthErrorCode.INVALID_EMAIL: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthErrorCode.MISSING_PROFILE_FIELD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthErrorCode.INVALID_NATIONAL_ID: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthErrorCode.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    AuthErrorCode.PROVIDER_ERROR: status.HTTP_400_BAD_REQUEST,
    AuthErrorCode.UNEXPECTED: status.HTTP_502_BAD_GATEWAY,
}


def _provider_http_error(error: AuthProviderError, mode: AuthMode) -> HTTPException:
    decision = describe_auth_error(error, mode, suggest_signup=False)
    return HTTPException(
        status_code=_STATUS_BY_REASON[error.reason],
        detail={"code": error.reason.value, "message": decision.feedback.text},
    )


def _validation_http_error(errors: dict[str, str]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"code": "validation_failed", "fields": errors},
    )


@router.post("/signin", response_model=SessionResponse)
async def sign_in(
    request: SignInRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SessionResponse:
    """Sign in with email and password."""
    errors = validate_sign_in(request)
    if errors:
        raise _validation_http_error(errors)

    try:
        result = await service.sign_in(request.email, request.password)
    except AuthProviderError as e:
        raise _provider_http_error(e, AuthMode.LOGIN)

    return SessionResponse(user=result.user, session=result.session)


@router.post("/signup", response_model=SessionResponse, status_code=201)
async def sign_up(
    request: SignUpRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SessionResponse:
    """
    Create an account and its profile.

    When the project requires email confirmation no session is returned
    and ``confirmation_required`` is true.
    """
    try:
        result = await service.sign_up(request)
    except SignUpValidationError as e:
        raise _validation_http_error(e.field_errors)
    except AuthProviderError as e:
        raise _provider_http_error(e, AuthMode.SIGNUP)

    message = None
    if result.confirmation_required:
        message = "Sign-up successful! Please check your email to confirm your account."
    return SessionResponse(
        user=result.user,
        session=result.session,
        confirmation_required=result.confirmation_required,
        message=message,
    )


@router.post("/signout", status_code=204)
async def sign_out(
    service: IAuthService = Depends(get_user_auth_service),
) -> None:
    """Revoke the caller's session."""
    try:
        await service.sign_out()
    except AuthProviderError as e:
        raise _provider_http_error(e, AuthMode.LOGIN)
