"""Unit tests for OAuthProviderRegistry."""

import pytest

from atrium.adapter.facebook.client import MockFacebookOAuthClient
from atrium.adapter.github.client import MockGitHubOAuthClient
from atrium.config import AuthSettings, OAuthProviderSettings
from atrium.domain.error import ProviderAuthFailure, ProviderDisabledError
from atrium.domain.service import OAuthProviderRegistry
from atrium.domain.value import OAuthProviderKey


@pytest.fixture
def clients():
    return {
        OAuthProviderKey.GITHUB: MockGitHubOAuthClient(),
        OAuthProviderKey.FACEBOOK: MockFacebookOAuthClient(),
    }


def make_registry(clients, github: bool = True, facebook: bool = False):
    return OAuthProviderRegistry(
        oauth_clients=clients,
        auth_settings=AuthSettings(
            github=OAuthProviderSettings(enabled=github),
            facebook=OAuthProviderSettings(enabled=facebook),
        ),
    )


class TestOAuthProviderRegistry:
    def test_enabled_provider_returns_client(self, clients):
        registry = make_registry(clients)

        assert registry.is_enabled(OAuthProviderKey.GITHUB)
        assert registry.get_client(OAuthProviderKey.GITHUB) is clients[
            OAuthProviderKey.GITHUB
        ]

    def test_disabled_provider_raises(self, clients):
        registry = make_registry(clients)

        assert not registry.is_enabled(OAuthProviderKey.FACEBOOK)
        with pytest.raises(ProviderDisabledError, match="facebook"):
            registry.get_client(OAuthProviderKey.FACEBOOK)

    def test_enabled_provider_without_client_raises(self, clients):
        del clients[OAuthProviderKey.FACEBOOK]
        registry = make_registry(clients, facebook=True)

        with pytest.raises(ProviderDisabledError):
            registry.get_client(OAuthProviderKey.FACEBOOK)

    def test_initiate_login_builds_authorization_url(self, clients):
        registry = make_registry(clients)

        url = registry.initiate_login(OAuthProviderKey.GITHUB, "state123")

        assert url.startswith("https://github.com/login/oauth/authorize")
        assert "state=state123" in url


class TestExtractIdentity:
    """Identity extraction shared by every provider client."""

    def test_numeric_id_becomes_string(self):
        identity = MockGitHubOAuthClient().extract_identity(
            {"id": 1001, "login": "octocat", "email": "", "name": "Mona"}
        )

        assert identity.provider == OAuthProviderKey.GITHUB
        assert identity.external_user_id == "1001"
        assert identity.email is None  # Empty strings count as missing
        assert identity.display_name == "Mona"
        assert identity.username_hint == "octocat"

    def test_missing_id_is_an_auth_failure(self):
        with pytest.raises(ProviderAuthFailure, match="no user ID"):
            MockFacebookOAuthClient().extract_identity({"name": "No Id"})
