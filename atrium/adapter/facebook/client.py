"""Facebook OAuth 2.0 client implementation."""

import re
from typing import Any

import logfire

from atrium.adapter.oauth2 import OAuth2Transport
from atrium.domain.error import ProviderAuthFailure
from atrium.domain.service.oauth_provider import OAuthProviderClient
from atrium.domain.value import OAuthProviderKey

PICTURE_URL = "https://graph.facebook.com/me/picture"

# Trailing path segment of the profile link, e.g. facebook.com/jsmith
PROFILE_LINK_USERNAME = re.compile(r"/([a-zA-Z0-9]+)$")


class FacebookOAuthClient(OAuthProviderClient):
    """Base class for Facebook OAuth clients.

    Provides type distinction for dependency injection.
    """

    provider = OAuthProviderKey.FACEBOOK

    def extract_username(self, user_info: dict[str, Any]) -> str | None:
        """Take the username from the last segment of the profile link."""
        match = PROFILE_LINK_USERNAME.search(user_info.get("link") or "")
        if match:
            return match.group(1)
        return None


class RealFacebookOAuthClient(FacebookOAuthClient):
    """Facebook OAuth 2.0 client over the Graph API."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> None:
        """Initialize Facebook OAuth client.

        Args:
            client_id: Facebook app ID
            client_secret: Facebook app secret
            redirect_uri: Callback URL registered with Facebook
        """
        self.transport = OAuth2Transport(
            provider=self.provider,
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            authorize_url="https://www.facebook.com/dialog/oauth",
            token_url="https://graph.facebook.com/oauth/access_token",
            user_info_url="https://graph.facebook.com/me",
        )

    def authorization_url(self, state: str) -> str:
        """Build the Facebook authorization URL."""
        url = self.transport.build_authorization_url(state, scope="email")
        logfire.info("Facebook OAuth authorization initiated", state=state)
        return url

    async def exchange_code_for_token(self, code: str) -> str:
        """Exchange a Facebook authorization code for an access token."""
        with logfire.span("facebook.exchange_code_for_token"):
            return await self.transport.exchange_code(code)

    async def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the authenticated Facebook user."""
        with logfire.span("facebook.fetch_user_info"):
            user_info = await self.transport.fetch_user_info(access_token)
            logfire.info("Facebook user info retrieved", user_id=user_info.get("id"))
            return user_info

    async def fetch_profile_image(
        self, access_token: str, user_info: dict[str, Any]
    ) -> bytes | None:
        """Download the user's Facebook profile picture."""
        with logfire.span("facebook.fetch_profile_image"):
            return await self.transport.fetch_bytes(
                PICTURE_URL, params={"access_token": access_token}
            )


class MockFacebookOAuthClient(FacebookOAuthClient):
    """Mock Facebook OAuth client for testing.

    Returns deterministic test data without making real API calls.
    """

    def __init__(self):
        """Initialize mock client without real OAuth configuration."""
        self.user_info: dict[str, Any] = {
            "id": "2002",
            "name": "Mock Facebook User",
            "email": "mock@facebook.example",
            "link": "https://www.facebook.com/mockfbuser",
        }
        self.profile_image: bytes | None = b"mock-facebook-avatar"
        self.token_error: str | None = None
        self.profile_image_requests = 0

    def authorization_url(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://www.facebook.com/dialog/oauth?state={state}&mock=true"

    async def exchange_code_for_token(self, code: str) -> str:
        """Return a token derived from the code, or fail if configured to."""
        if self.token_error:
            raise ProviderAuthFailure(self.provider.value, self.token_error)
        return f"mock-facebook-token-{code}"

    async def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Return the configured user info."""
        return dict(self.user_info)

    async def fetch_profile_image(
        self, access_token: str, user_info: dict[str, Any]
    ) -> bytes | None:
        """Return the configured avatar bytes."""
        self.profile_image_requests += 1
        return self.profile_image
