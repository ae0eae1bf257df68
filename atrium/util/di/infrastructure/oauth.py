"""OAuth infrastructure provider for multi-provider authentication."""

from dishka import Scope, provide

from atrium.adapter.facebook.client import FacebookOAuthClient
from atrium.adapter.github.client import GitHubOAuthClient
from atrium.domain.service import OAuthProviderClient
from atrium.domain.value import OAuthProviderKey
from atrium.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates all OAuth clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self,
        github_oauth_client: GitHubOAuthClient,
        facebook_oauth_client: FacebookOAuthClient,
    ) -> dict[OAuthProviderKey, OAuthProviderClient]:
        """Provide dictionary of all OAuth clients by provider.

        Args:
            github_oauth_client: GitHub OAuth client (specific type)
            facebook_oauth_client: Facebook OAuth client (specific type)

        Returns:
            Dictionary mapping OAuthProviderKey to OAuthProviderClient
        """
        return {
            OAuthProviderKey.GITHUB: github_oauth_client,
            OAuthProviderKey.FACEBOOK: facebook_oauth_client,
        }
