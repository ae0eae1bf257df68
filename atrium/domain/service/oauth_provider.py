"""OAuth provider port and provider registry."""

from typing import Any, ClassVar

from atrium.config import AuthSettings
from atrium.domain.error import ProviderAuthFailure, ProviderDisabledError
from atrium.domain.value import ExternalIdentity, OAuthProviderKey

from .base import Service


class OAuthProviderClient:
    """Generic OAuth 2.0 client interface, one subclass per provider.

    Besides the two HTTP operations every provider shares, subclasses supply
    the provider-specific capability used during registration:
    ``extract_username`` and ``fetch_profile_image``.
    """

    provider: ClassVar[OAuthProviderKey]

    def authorization_url(self, state: str) -> str:
        """Build the provider URL the user is sent to for authorization.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL
        """
        raise NotImplementedError

    async def exchange_code_for_token(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the provider callback

        Returns:
            Access token

        Raises:
            ProviderAuthFailure: On transport failure or missing token
        """
        raise NotImplementedError

    async def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the user-info payload for an access token.

        Args:
            access_token: OAuth access token

        Returns:
            Provider user-info payload

        Raises:
            ProviderAuthFailure: On transport failure or undecodable payload
        """
        raise NotImplementedError

    def extract_username(self, user_info: dict[str, Any]) -> str | None:
        """Suggest a local username from the provider payload."""
        return None

    async def fetch_profile_image(
        self, access_token: str, user_info: dict[str, Any]
    ) -> bytes | None:
        """Fetch the user's avatar, if the provider offers one."""
        return None

    def extract_identity(self, user_info: dict[str, Any]) -> ExternalIdentity:
        """Build the external identity from a user-info payload.

        Raises:
            ProviderAuthFailure: If the payload carries no user ID
        """
        user_id = user_info.get("id")
        if user_id is None or user_id == "":
            raise ProviderAuthFailure(
                self.provider.value, "User info response has no user ID"
            )

        return ExternalIdentity(
            provider=self.provider,
            external_user_id=str(user_id),
            email=user_info.get("email") or None,
            display_name=user_info.get("name") or None,
            username_hint=self.extract_username(user_info),
        )


class OAuthProviderRegistry(Service):
    """Looks up provider clients, honouring the per-provider enabled flag."""

    def __init__(
        self,
        oauth_clients: dict[OAuthProviderKey, OAuthProviderClient],
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize provider registry.

        Args:
            oauth_clients: Map of provider to OAuth client implementation
            auth_settings: Authentication settings holding provider flags
        """
        self.oauth_clients = oauth_clients
        self.auth_settings = auth_settings

    def is_enabled(self, provider: OAuthProviderKey) -> bool:
        """Whether logins through the provider are allowed."""
        provider_settings = getattr(self.auth_settings, provider.value, None)
        return bool(provider_settings and provider_settings.enabled)

    def get_client(self, provider: OAuthProviderKey) -> OAuthProviderClient:
        """Get the client for an enabled provider.

        Raises:
            ProviderDisabledError: If the provider is disabled or unknown
        """
        client = self.oauth_clients.get(provider)
        if not client or not self.is_enabled(provider):
            raise ProviderDisabledError(provider.value)
        return client

    def initiate_login(self, provider: OAuthProviderKey, state: str) -> str:
        """Build the authorization URL for a provider.

        Raises:
            ProviderDisabledError: If the provider is disabled or unknown
        """
        return self.get_client(provider).authorization_url(state)
