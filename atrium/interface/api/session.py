"""Session cookie helpers shared by the routes."""

from fastapi import HTTPException, status
from fastapi.responses import Response

from atrium.config import Settings
from atrium.domain.service import SessionService
from atrium.util.jwt import JWTError

SESSION_COOKIE = "auth_token"


def require_account_id(session_service: SessionService, auth_token: str | None) -> str:
    """Authenticate the viewer from the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return session_service.verify_token(auth_token).account_id
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie.

    Production serves frontend and API from different hosts, which needs
    ``samesite="none"`` and therefore ``secure=True``.
    """
    is_production = settings.environment == "production"
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Delete the session cookie with the domain and path it was set with."""
    response.delete_cookie(
        key=SESSION_COOKIE,
        domain=settings.auth.cookie_domain,
        path="/",
    )
