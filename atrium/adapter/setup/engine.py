"""Setup engine that inspects application settings."""

from atrium.config import PLACEHOLDER_SECRET, Settings
from atrium.domain.model import SetupIssue
from atrium.domain.service.setup_service import SetupEngine
from atrium.domain.service.timezone_service import TimezoneDatabase
from atrium.domain.value import OAuthProviderKey


class SettingsSetupEngine(SetupEngine):
    """Reports configuration problems found in Settings."""

    def __init__(self, settings: Settings, timezone_database: TimezoneDatabase) -> None:
        self.settings = settings
        self.timezone_database = timezone_database

    def collect_issues(self) -> list[SetupIssue]:
        """Run every check, in a stable order."""
        issues: list[SetupIssue] = []
        for check in (
            self._check_jwt_secret,
            self._check_provider_credentials,
            self._check_any_provider_enabled,
            self._check_default_timezone,
        ):
            issues.extend(check())
        return issues

    def _check_jwt_secret(self) -> list[SetupIssue]:
        if self.settings.environment in ("test", "development"):
            return []
        if self.settings.auth.jwt_secret != PLACEHOLDER_SECRET:
            return []

        return [
            SetupIssue(
                key="auth.jwt-secret",
                name="Session Signing Secret Not Configured",
                short_name="JWT Secret",
                summary="Sessions are signed with the default secret.",
                message=(
                    "The session signing secret still has its default value, so "
                    "anyone can forge a session cookie. Set AUTH__JWT_SECRET to a "
                    "long random value."
                ),
                is_fatal=self.settings.environment == "production",
                config_keys=["auth.jwt_secret"],
            )
        ]

    def _check_provider_credentials(self) -> list[SetupIssue]:
        issues = []
        for provider in OAuthProviderKey:
            provider_settings = getattr(self.settings.auth, provider.value)
            if not provider_settings.enabled:
                continue

            missing = [
                name
                for name in ("client_id", "client_secret")
                if getattr(provider_settings, name) in ("", PLACEHOLDER_SECRET)
            ]
            if not missing:
                continue

            issues.append(
                SetupIssue(
                    key=f"auth.{provider.value}.credentials",
                    name=f"{provider.display_name} OAuth Credentials Missing",
                    short_name=f"{provider.display_name} Credentials",
                    summary=(
                        f"{provider.display_name} login is enabled but has no "
                        f"application credentials."
                    ),
                    message=(
                        f"Register an OAuth application with "
                        f"{provider.display_name} and configure its client ID and "
                        f"secret, or disable {provider.display_name} login."
                    ),
                    config_keys=[f"auth.{provider.value}.{name}" for name in missing],
                )
            )
        return issues

    def _check_any_provider_enabled(self) -> list[SetupIssue]:
        if any(
            getattr(self.settings.auth, provider.value).enabled
            for provider in OAuthProviderKey
        ):
            return []

        return [
            SetupIssue(
                key="auth.no-providers",
                name="No Login Providers Enabled",
                short_name="No Providers",
                summary="Nobody can log in or register.",
                message=(
                    "Accounts are created through OAuth login, and no OAuth "
                    "provider is enabled. Enable at least one provider."
                ),
                config_keys=[
                    f"auth.{provider.value}.enabled" for provider in OAuthProviderKey
                ],
            )
        ]

    def _check_default_timezone(self) -> list[SetupIssue]:
        if self.settings.default_timezone in self.timezone_database.list_identifiers():
            return []

        return [
            SetupIssue(
                key="timezone.default",
                name="Unknown Default Timezone",
                short_name="Default Timezone",
                summary=(
                    f"The default timezone '{self.settings.default_timezone}' is "
                    f"not a known timezone."
                ),
                message=(
                    "Set DEFAULT_TIMEZONE to an IANA timezone identifier such as "
                    "'UTC' or 'America/New_York'."
                ),
                config_keys=["default_timezone"],
                is_fatal=True,
            )
        ]
