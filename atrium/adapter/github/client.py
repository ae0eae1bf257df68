"""GitHub OAuth 2.0 client implementation."""

from typing import Any

import logfire

from atrium.adapter.oauth2 import OAuth2Transport
from atrium.domain.error import ProviderAuthFailure
from atrium.domain.service.oauth_provider import OAuthProviderClient
from atrium.domain.value import OAuthProviderKey

GRAVATAR_URL = "http://www.gravatar.com/avatar/{gravatar_id}?s=50"


class GitHubOAuthClient(OAuthProviderClient):
    """Base class for GitHub OAuth clients.

    Provides type distinction for dependency injection and the GitHub
    payload handling shared by the real and mock clients.
    """

    provider = OAuthProviderKey.GITHUB

    def extract_username(self, user_info: dict[str, Any]) -> str | None:
        """GitHub logins are already valid local usernames."""
        return user_info.get("login") or None

    @staticmethod
    def unwrap_user_info(payload: dict[str, Any]) -> dict[str, Any]:
        """Unwrap payloads of the form ``{"user": {...}}``."""
        user = payload.get("user")
        if isinstance(user, dict) and "id" not in payload:
            return user
        return payload

    @staticmethod
    def avatar_url(user_info: dict[str, Any]) -> str | None:
        """Gravatar URL if GitHub gave a gravatar ID, else the avatar URL."""
        gravatar_id = user_info.get("gravatar_id")
        if gravatar_id:
            return GRAVATAR_URL.format(gravatar_id=gravatar_id)
        return user_info.get("avatar_url") or None


class RealGitHubOAuthClient(GitHubOAuthClient):
    """GitHub OAuth 2.0 client over HTTP."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> None:
        """Initialize GitHub OAuth client.

        Args:
            client_id: GitHub OAuth app client ID
            client_secret: GitHub OAuth app client secret
            redirect_uri: Callback URL registered with GitHub
        """
        self.transport = OAuth2Transport(
            provider=self.provider,
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            authorize_url="https://github.com/login/oauth/authorize",
            token_url="https://github.com/login/oauth/access_token",
            user_info_url="https://api.github.com/user",
        )

    def authorization_url(self, state: str) -> str:
        """Build the GitHub authorization URL."""
        url = self.transport.build_authorization_url(state, scope="user:email")
        logfire.info("GitHub OAuth authorization initiated", state=state)
        return url

    async def exchange_code_for_token(self, code: str) -> str:
        """Exchange a GitHub authorization code for an access token."""
        with logfire.span("github.exchange_code_for_token"):
            return await self.transport.exchange_code(code)

    async def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the authenticated GitHub user."""
        with logfire.span("github.fetch_user_info"):
            user_info = self.unwrap_user_info(
                await self.transport.fetch_user_info(access_token)
            )
            logfire.info(
                "GitHub user info retrieved",
                user_id=user_info.get("id"),
                login=user_info.get("login"),
            )
            return user_info

    async def fetch_profile_image(
        self, access_token: str, user_info: dict[str, Any]
    ) -> bytes | None:
        """Download the user's Gravatar or GitHub avatar."""
        url = self.avatar_url(user_info)
        if not url:
            return None
        with logfire.span("github.fetch_profile_image"):
            return await self.transport.fetch_bytes(url)


class MockGitHubOAuthClient(GitHubOAuthClient):
    """Mock GitHub OAuth client for testing.

    Returns deterministic test data without making real API calls. Tests
    may replace ``user_info``, ``profile_image`` or set ``token_error``.
    """

    def __init__(self):
        """Initialize mock client without real OAuth configuration."""
        self.user_info: dict[str, Any] = {
            "id": 1001,
            "login": "mockoctocat",
            "name": "Mock Octocat",
            "email": "mockoctocat@github.example",
        }
        self.profile_image: bytes | None = b"mock-github-avatar"
        self.token_error: str | None = None
        self.profile_image_requests = 0

    def authorization_url(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://github.com/login/oauth/authorize?state={state}&mock=true"

    async def exchange_code_for_token(self, code: str) -> str:
        """Return a token derived from the code, or fail if configured to."""
        if self.token_error:
            raise ProviderAuthFailure(self.provider.value, self.token_error)
        return f"mock-github-token-{code}"

    async def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Return the configured user info."""
        return self.unwrap_user_info(dict(self.user_info))

    async def fetch_profile_image(
        self, access_token: str, user_info: dict[str, Any]
    ) -> bytes | None:
        """Return the configured avatar bytes."""
        self.profile_image_requests += 1
        return self.profile_image
