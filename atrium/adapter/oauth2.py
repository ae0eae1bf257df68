"""Shared OAuth 2.0 HTTP transport.

Performs the two calls every authorization-code provider shares: the
token exchange and the user-info lookup. Provider clients compose it and
add their own payload handling.
"""

import json
from typing import Any
from urllib.parse import parse_qs, urlencode

import httpx
import logfire

from atrium.domain.error import ProviderAuthFailure
from atrium.domain.value import OAuthProviderKey

DEFAULT_TIMEOUT = 30.0


def parse_token_response(body: str) -> dict[str, Any]:
    """Decode a token endpoint response body.

    Providers answer either with JSON or with a form-encoded body such as
    ``access_token=...&token_type=bearer``.

    Returns:
        Decoded fields, empty if the body is neither
    """
    body = body.strip()
    if body.startswith("{"):
        try:
            data = json.loads(body)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    return {key: values[0] for key, values in parse_qs(body).items() if values}


class OAuth2Transport:
    """HTTP side of an OAuth 2.0 authorization-code provider."""

    def __init__(
        self,
        provider: OAuthProviderKey,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        authorize_url: str,
        token_url: str,
        user_info_url: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize transport.

        Args:
            provider: Provider this transport talks to
            client_id: OAuth client ID
            client_secret: OAuth client secret
            redirect_uri: Callback URL registered with the provider
            authorize_url: Provider authorization endpoint
            token_url: Provider token endpoint
            user_info_url: Provider user-info endpoint
            timeout: Per-request timeout in seconds
        """
        self.provider = provider
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.authorize_url = authorize_url
        self.token_url = token_url
        self.user_info_url = user_info_url
        self.timeout = timeout

    def _failure(self, reason: str) -> ProviderAuthFailure:
        return ProviderAuthFailure(self.provider.value, reason)

    def build_authorization_url(self, state: str, scope: str | None = None) -> str:
        """Build the authorization URL for the provider."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "state": state,
        }
        if scope:
            params["scope"] = scope
        return f"{self.authorize_url}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Raises:
            ProviderAuthFailure: On transport failure, non-2xx status or a
                response without ``access_token``
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Token exchange HTTP error", provider=self.provider.value, error=str(e)
            )
            raise self._failure(f"HTTP error during token exchange: {e}") from e

        if not response.is_success:
            logfire.error(
                "Token exchange failed",
                provider=self.provider.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise self._failure(f"Token exchange failed: {response.status_code}")

        token = parse_token_response(response.text).get("access_token")
        if not token:
            logfire.error(
                "Token response has no access token", provider=self.provider.value
            )
            raise self._failure("Token response has no access token")

        return token

    async def fetch_user_info(self, access_token: str) -> dict[str, Any]:
        """Fetch the user-info payload with the token as a query parameter.

        Raises:
            ProviderAuthFailure: On transport failure, non-2xx status or a
                body that is not a JSON object
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    params={"access_token": access_token},
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "User info HTTP error", provider=self.provider.value, error=str(e)
            )
            raise self._failure(f"HTTP error fetching user info: {e}") from e

        if not response.is_success:
            logfire.error(
                "User info request failed",
                provider=self.provider.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise self._failure(f"User info request failed: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise self._failure("User info response is not JSON") from e

        if not isinstance(payload, dict):
            raise self._failure("User info response is not an object")

        return payload

    async def fetch_bytes(
        self, url: str, params: dict[str, str] | None = None
    ) -> bytes | None:
        """Download a resource such as an avatar.

        Failures are logged and reported as ``None``.
        """
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(url, params=params, timeout=self.timeout)
        except httpx.HTTPError as e:
            logfire.warn(
                "Resource download failed",
                provider=self.provider.value,
                url=url,
                error=str(e),
            )
            return None

        if not response.is_success:
            logfire.warn(
                "Resource download failed",
                provider=self.provider.value,
                url=url,
                status_code=response.status_code,
            )
            return None

        return response.content or None
