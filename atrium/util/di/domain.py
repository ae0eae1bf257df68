"""Domain layer DI providers."""

from dishka import Scope, provide

from atrium.config import AuthSettings
from atrium.domain.repository import (
    AccountRepository,
    LinkedAccountRepository,
    PreferencesRepository,
)
from atrium.domain.service import (
    AccountService,
    LinkedAccountService,
    OAuthAccountResolver,
    OAuthProviderClient,
    OAuthProviderRegistry,
    SessionService,
    SetupEngine,
    SetupIssueService,
    TimezoneDatabase,
    TimezoneService,
)
from atrium.domain.value import OAuthProviderKey
from atrium.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_provider_registry(
        self,
        oauth_clients: dict[OAuthProviderKey, OAuthProviderClient],
        auth_settings: AuthSettings,
    ) -> OAuthProviderRegistry:
        """Provide OAuth provider registry.

        Args:
            oauth_clients: Dictionary mapping providers to their OAuth clients
            auth_settings: Settings holding the per-provider enabled flags
        """
        return OAuthProviderRegistry(
            oauth_clients=oauth_clients, auth_settings=auth_settings
        )

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        preferences_repository: PreferencesRepository,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            preferences_repository=preferences_repository,
        )

    @provide
    def get_linked_account_service(
        self, linked_account_repository: LinkedAccountRepository
    ) -> LinkedAccountService:
        """Provide linked account domain service."""
        return LinkedAccountService(linked_account_repository=linked_account_repository)

    @provide
    def get_account_resolver(
        self,
        account_service: AccountService,
        linked_account_service: LinkedAccountService,
        provider_registry: OAuthProviderRegistry,
    ) -> OAuthAccountResolver:
        """Provide OAuth account resolver."""
        return OAuthAccountResolver(
            account_service=account_service,
            linked_account_service=linked_account_service,
            provider_registry=provider_registry,
        )

    @provide
    def get_timezone_service(
        self, timezone_database: TimezoneDatabase
    ) -> TimezoneService:
        """Provide timezone domain service."""
        return TimezoneService(timezone_database=timezone_database)

    @provide
    def get_setup_issue_service(self, setup_engine: SetupEngine) -> SetupIssueService:
        """Provide setup issue domain service."""
        return SetupIssueService(setup_engine=setup_engine)
