"""Domain services."""

from .account_resolver import OAuthAccountResolver
from .account_service import AccountService
from .base import Service
from .linked_account_service import LinkedAccountService
from .oauth_provider import OAuthProviderClient, OAuthProviderRegistry
from .session_service import SessionService
from .setup_service import SetupEngine, SetupIssueService
from .timezone_service import TimezoneDatabase, TimezoneService

__all__ = [
    "AccountService",
    "LinkedAccountService",
    "OAuthAccountResolver",
    "OAuthProviderClient",
    "OAuthProviderRegistry",
    "Service",
    "SessionService",
    "SetupEngine",
    "SetupIssueService",
    "TimezoneDatabase",
    "TimezoneService",
]
