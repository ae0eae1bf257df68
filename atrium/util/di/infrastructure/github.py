"""GitHub infrastructure providers."""

from dishka import Scope, provide

from atrium.adapter.github.client import GitHubOAuthClient, RealGitHubOAuthClient
from atrium.config import Settings
from atrium.util.di.base import ProviderBase
from atrium.util.error import ConfigurationError


class GitHubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGitHubProvider(GitHubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_oauth_client(self, settings: Settings) -> GitHubOAuthClient:
        """Provide GitHub OAuth client.

        Raises:
            ConfigurationError: If GitHub is enabled without credentials
        """
        github = settings.auth.github
        if github.enabled and not (github.client_id and github.client_secret):
            raise ConfigurationError(
                "GitHub OAuth client ID and secret must be configured"
            )

        return RealGitHubOAuthClient(
            client_id=github.client_id,
            client_secret=github.client_secret,
            redirect_uri=settings.auth.github_callback_url,
        )
