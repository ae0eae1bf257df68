"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from atrium.application.usecase.auth import GetCurrentUserUseCase, OAuthLoginUseCase
from atrium.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from atrium.application.usecase.auth.oauth_login import (
    OAuthLoginRequest,
    OAuthLoginResponse,
)
from atrium.config import Settings
from atrium.domain.error import (
    ConflictingLinkError,
    NotFoundError,
    ProviderAuthFailure,
    ProviderDisabledError,
)
from atrium.domain.service import OAuthProviderRegistry, SessionService
from atrium.domain.value import OAuthProviderKey, RegistrationFields
from atrium.interface.api.session import clear_session_cookie, set_session_cookie
from atrium.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class InitiateLoginResponse(BaseModel):
    """Initiate login response."""

    authorization_url: str


class RegistrationSubmitRequest(BaseModel):
    """Registration form submission.

    ``token`` is the access token echoed back from the registration form.
    """

    token: str
    username: str = ""
    email: str = ""
    realname: str = ""


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current account if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _parse_provider(provider: str) -> OAuthProviderKey:
    try:
        return OAuthProviderKey(provider)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown OAuth provider: {provider}",
        )


def _error_redirect(
    settings: Settings, error: str, provider: OAuthProviderKey, message: str
) -> RedirectResponse:
    query = urlencode({"error": error, "provider": provider.value, "message": message})
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/auth/error?{query}",
        status_code=status.HTTP_302_FOUND,
    )


@router.post("/oauth/{provider}/authorize", response_model=InitiateLoginResponse)
async def initiate_login(
    provider: str,
    provider_registry: FromDishka[OAuthProviderRegistry],
) -> InitiateLoginResponse:
    """Start an OAuth login.

    Example:
        POST /auth/oauth/github/authorize

        Response:
        {
            "authorization_url": "https://github.com/login/oauth/authorize?..."
        }
    """
    provider_key = _parse_provider(provider)
    logger.info(f"Initiating {provider_key.value} login")

    # TODO: persist state and verify it on the callback
    state = secrets.token_urlsafe(32)

    try:
        authorization_url = provider_registry.initiate_login(provider_key, state)
    except ProviderDisabledError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return InitiateLoginResponse(authorization_url=authorization_url)


@router.get("/oauth/{provider}/login")
async def oauth_callback(
    provider: str,
    oauth_login_use_case: FromDishka[OAuthLoginUseCase],
    session_service: FromDishka[SessionService],
    settings: FromDishka[Settings],
    code: str | None = None,
    token: str | None = None,
    error: str | None = None,
    auth_token: str | None = Cookie(default=None),
):
    """Handle the OAuth provider callback.

    Logs the user in, links the identity to the account sharing its email,
    or answers with the registration form for unknown identities.

    Example:
        GET /auth/oauth/github/login?code=abc123

        Redirects to the frontend and sets cookie: auth_token
    """
    provider_key = _parse_provider(provider)
    logger.info(f"OAuth callback received: provider={provider_key.value}")

    request = OAuthLoginRequest(
        provider=provider_key,
        viewer_id=session_service.get_account_id_from_token(auth_token),
        code=code,
        token=token,
        error=error,
    )
    return await _run_login(
        request, oauth_login_use_case, settings, status.HTTP_302_FOUND
    )


@router.post("/oauth/{provider}/login")
async def submit_registration(
    provider: str,
    body: RegistrationSubmitRequest,
    oauth_login_use_case: FromDishka[OAuthLoginUseCase],
    session_service: FromDishka[SessionService],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
):
    """Submit the registration form for a new account.

    Answers 422 with the re-populated form when a field is missing, invalid
    or already taken.

    Example:
        POST /auth/oauth/github/login
        {
            "token": "gho_...",
            "username": "octocat",
            "email": "octocat@example.com",
            "realname": "Mona Lisa Octocat"
        }
    """
    provider_key = _parse_provider(provider)

    request = OAuthLoginRequest(
        provider=provider_key,
        viewer_id=session_service.get_account_id_from_token(auth_token),
        token=body.token,
        registration=RegistrationFields(
            username=body.username, email=body.email, realname=body.realname
        ),
    )
    return await _run_login(
        request, oauth_login_use_case, settings, status.HTTP_303_SEE_OTHER
    )


async def _run_login(
    request: OAuthLoginRequest,
    oauth_login_use_case: OAuthLoginUseCase,
    settings: Settings,
    redirect_status: int,
):
    """Shared handler for callback and registration submit."""
    try:
        result = await oauth_login_use_case.execute(request)
    except ProviderDisabledError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ProviderAuthFailure as e:
        logger.error(f"OAuth error during {request.provider.value} login: {e}")
        return _error_redirect(settings, "auth_failed", request.provider, e.reason)
    except ConflictingLinkError as e:
        logger.error(f"Account conflict during {request.provider.value} login: {e}")
        return _error_redirect(settings, "account_conflict", request.provider, str(e))

    return _login_response(result, settings, redirect_status)


def _login_response(
    result: OAuthLoginResponse, settings: Settings, redirect_status: int
) -> Response:
    if result.kind == "registration_required" and result.form:
        form_status = (
            status.HTTP_422_UNPROCESSABLE_ENTITY
            if result.form.errors
            else status.HTTP_200_OK
        )
        return JSONResponse(
            status_code=form_status, content=result.form.model_dump(mode="json")
        )

    redirect_response = RedirectResponse(
        url=settings.api.frontend_url, status_code=redirect_status
    )
    if result.session_token:
        set_session_cookie(redirect_response, result.session_token, settings)
        logger.info(
            f"Login successful ({result.kind}) for account: {result.username}, "
            f"redirecting to: {settings.api.frontend_url}"
        )
    return redirect_response


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current account if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token - this is expected behavior, not an error
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but account not found in database (orphaned token)
        return AuthStatusResponse(authenticated=False)
