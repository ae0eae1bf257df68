"""Facebook infrastructure providers."""

from dishka import Scope, provide

from atrium.adapter.facebook.client import (
    FacebookOAuthClient,
    RealFacebookOAuthClient,
)
from atrium.config import Settings
from atrium.util.di.base import ProviderBase
from atrium.util.error import ConfigurationError


class FacebookProvider(ProviderBase):
    """Facebook component base."""

    __mock_component__ = "facebook"


class ProdFacebookProvider(FacebookProvider):
    """Production Facebook provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_facebook_oauth_client(self, settings: Settings) -> FacebookOAuthClient:
        """Provide Facebook OAuth client.

        Raises:
            ConfigurationError: If Facebook is enabled without credentials
        """
        facebook = settings.auth.facebook
        if facebook.enabled and not (facebook.client_id and facebook.client_secret):
            raise ConfigurationError(
                "Facebook OAuth client ID and secret must be configured"
            )

        return RealFacebookOAuthClient(
            client_id=facebook.client_id,
            client_secret=facebook.client_secret,
            redirect_uri=settings.auth.facebook_callback_url,
        )
