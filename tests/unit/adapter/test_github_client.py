"""Unit tests for the GitHub OAuth client."""

from unittest.mock import AsyncMock, patch

import pytest

from atrium.adapter.github.client import (
    GitHubOAuthClient,
    MockGitHubOAuthClient,
    RealGitHubOAuthClient,
)
from atrium.domain.error import ProviderAuthFailure


@pytest.fixture
def client():
    return RealGitHubOAuthClient(
        client_id="gh-client",
        client_secret="gh-secret",
        redirect_uri="http://localhost:8000/auth/oauth/github/login",
    )


class TestPayloadHandling:
    def test_login_is_the_username_hint(self):
        assert MockGitHubOAuthClient().extract_username({"login": "octocat"}) == (
            "octocat"
        )
        assert MockGitHubOAuthClient().extract_username({"id": 1}) is None

    def test_wrapped_user_payload_is_unwrapped(self):
        payload = {"user": {"id": 7, "login": "wrapped"}}

        assert GitHubOAuthClient.unwrap_user_info(payload) == {
            "id": 7,
            "login": "wrapped",
        }

    def test_top_level_payload_is_kept(self):
        payload = {"id": 7, "login": "plain", "user": {"id": 8}}

        assert GitHubOAuthClient.unwrap_user_info(payload) is payload

    def test_gravatar_preferred_over_avatar_url(self):
        assert GitHubOAuthClient.avatar_url(
            {"gravatar_id": "abc123", "avatar_url": "https://avatars.example/1"}
        ) == "http://www.gravatar.com/avatar/abc123?s=50"

    def test_avatar_url_used_without_gravatar(self):
        assert GitHubOAuthClient.avatar_url(
            {"gravatar_id": "", "avatar_url": "https://avatars.example/1"}
        ) == "https://avatars.example/1"
        assert GitHubOAuthClient.avatar_url({}) is None


class TestRealGitHubOAuthClient:
    def test_authorization_url_requests_email_scope(self, client):
        url = client.authorization_url("state-1")

        assert url.startswith("https://github.com/login/oauth/authorize?")
        assert "client_id=gh-client" in url
        assert "scope=user%3Aemail" in url

    @pytest.mark.asyncio
    async def test_fetch_user_info_unwraps_payload(self, client):
        with patch.object(
            client.transport,
            "fetch_user_info",
            AsyncMock(return_value={"user": {"id": 9, "login": "nested"}}),
        ):
            user_info = await client.fetch_user_info("gho_1")

        assert user_info == {"id": 9, "login": "nested"}

    @pytest.mark.asyncio
    async def test_fetch_profile_image_downloads_avatar(self, client):
        fetch_bytes = AsyncMock(return_value=b"avatar")
        with patch.object(client.transport, "fetch_bytes", fetch_bytes):
            image = await client.fetch_profile_image(
                "gho_1", {"id": 9, "gravatar_id": "abc"}
            )

        assert image == b"avatar"
        fetch_bytes.assert_awaited_once_with(
            "http://www.gravatar.com/avatar/abc?s=50"
        )

    @pytest.mark.asyncio
    async def test_no_avatar_means_no_download(self, client):
        fetch_bytes = AsyncMock()
        with patch.object(client.transport, "fetch_bytes", fetch_bytes):
            assert await client.fetch_profile_image("gho_1", {"id": 9}) is None

        fetch_bytes.assert_not_awaited()


class TestMockGitHubOAuthClient:
    @pytest.mark.asyncio
    async def test_token_is_derived_from_code(self):
        assert await MockGitHubOAuthClient().exchange_code_for_token("c1") == (
            "mock-github-token-c1"
        )

    @pytest.mark.asyncio
    async def test_configured_token_error(self):
        client = MockGitHubOAuthClient()
        client.token_error = "bad_verification_code"

        with pytest.raises(ProviderAuthFailure, match="bad_verification_code"):
            await client.exchange_code_for_token("c1")
