"""Session token domain service."""

import logfire

from atrium.config import AuthSettings
from atrium.domain.model.account import LocalAccount
from atrium.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Issues and verifies the JWT carried in the session cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def establish_session(self, account: LocalAccount) -> str:
        """Create a session token for an account.

        Args:
            account: Account that just logged in

        Returns:
            JWT token string
        """
        with logfire.span(
            "session_service.establish_session", account_id=str(account.id)
        ):
            token = create_token(
                str(account.id), account.username.root, self.auth_settings
            )
            logfire.info(
                "Session established",
                account_id=str(account.id),
                username=account.username.root,
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Extract account ID from a session token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except JWTError as e:
            logfire.debug(
                "Session verification failed, treating as unauthenticated",
                error=str(e),
            )
            return None
