"""Application layer DI providers."""

from dishka import Scope, provide

from atrium.application.usecase.auth import GetCurrentUserUseCase, OAuthLoginUseCase
from atrium.application.usecase.config import (
    GetSetupIssueUseCase,
    ListSetupIssuesUseCase,
)
from atrium.application.usecase.settings import ReconcileTimezoneUseCase
from atrium.config import Settings
from atrium.domain.service import (
    AccountService,
    LinkedAccountService,
    OAuthAccountResolver,
    OAuthProviderRegistry,
    SessionService,
    SetupIssueService,
    TimezoneService,
)
from atrium.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_oauth_login_use_case(
        self,
        provider_registry: OAuthProviderRegistry,
        account_resolver: OAuthAccountResolver,
        account_service: AccountService,
        session_service: SessionService,
        settings: Settings,
    ) -> OAuthLoginUseCase:
        """Provide OAuth login use case."""
        return OAuthLoginUseCase(
            provider_registry=provider_registry,
            account_resolver=account_resolver,
            account_service=account_service,
            session_service=session_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        session_service: SessionService,
        account_service: AccountService,
        linked_account_service: LinkedAccountService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            session_service=session_service,
            account_service=account_service,
            linked_account_service=linked_account_service,
        )

    # Setup issue use cases
    @provide(scope=Scope.REQUEST)
    def get_get_setup_issue_use_case(
        self, setup_issue_service: SetupIssueService
    ) -> GetSetupIssueUseCase:
        """Provide get setup issue use case."""
        return GetSetupIssueUseCase(setup_issue_service=setup_issue_service)

    @provide(scope=Scope.REQUEST)
    def get_list_setup_issues_use_case(
        self, setup_issue_service: SetupIssueService
    ) -> ListSetupIssuesUseCase:
        """Provide list setup issues use case."""
        return ListSetupIssuesUseCase(setup_issue_service=setup_issue_service)

    # Settings use cases
    @provide(scope=Scope.REQUEST)
    def get_reconcile_timezone_use_case(
        self,
        account_service: AccountService,
        timezone_service: TimezoneService,
        settings: Settings,
    ) -> ReconcileTimezoneUseCase:
        """Provide reconcile timezone use case."""
        return ReconcileTimezoneUseCase(
            account_service=account_service,
            timezone_service=timezone_service,
            settings=settings,
        )
