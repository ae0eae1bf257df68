"""Unit tests for SettingsSetupEngine."""

from datetime import datetime

from atrium.adapter.setup.engine import SettingsSetupEngine
from atrium.config import AuthSettings, OAuthProviderSettings, Settings
from atrium.domain.service import TimezoneDatabase


class StubTimezoneDatabase(TimezoneDatabase):
    def list_identifiers(self) -> list[str]:
        return ["America/New_York", "UTC"]

    def utc_offset_minutes(self, identifier: str, at: datetime) -> int:
        return 0


def configured(**provider_overrides) -> AuthSettings:
    providers = {
        "github": OAuthProviderSettings(
            enabled=True, client_id="gh-id", client_secret="gh-secret"
        ),
        "facebook": OAuthProviderSettings(enabled=False),
    }
    providers.update(provider_overrides)
    return AuthSettings(jwt_secret="a-real-secret-value-0123456789", **providers)


def collect(settings: Settings) -> dict:
    engine = SettingsSetupEngine(settings, StubTimezoneDatabase())
    return {issue.key: issue for issue in engine.collect_issues()}


def test_healthy_configuration_has_no_issues():
    assert collect(Settings(environment="test", auth=configured())) == {}


def test_placeholder_jwt_secret_is_fatal_in_production():
    auth = configured().model_copy(update={"jwt_secret": "CHANGE_ME_IN_PRODUCTION"})

    issues = collect(Settings(environment="production", auth=auth))

    assert issues["auth.jwt-secret"].is_fatal is True
    assert issues["auth.jwt-secret"].config_keys == ["auth.jwt_secret"]


def test_placeholder_jwt_secret_is_a_warning_in_staging():
    auth = configured().model_copy(update={"jwt_secret": "CHANGE_ME_IN_PRODUCTION"})

    issues = collect(Settings(environment="staging", auth=auth))

    assert issues["auth.jwt-secret"].is_fatal is False


def test_placeholder_jwt_secret_ignored_in_development():
    auth = configured().model_copy(update={"jwt_secret": "CHANGE_ME_IN_PRODUCTION"})

    assert "auth.jwt-secret" not in collect(
        Settings(environment="development", auth=auth)
    )


def test_enabled_provider_with_placeholder_credentials():
    auth = configured(facebook=OAuthProviderSettings(enabled=True, client_id="fb-id"))

    issue = collect(Settings(environment="test", auth=auth))[
        "auth.facebook.credentials"
    ]

    assert issue.short_name == "Facebook Credentials"
    assert issue.config_keys == ["auth.facebook.client_secret"]
    assert issue.is_fatal is False


def test_no_enabled_provider():
    auth = configured(github=OAuthProviderSettings(enabled=False))

    issues = collect(Settings(environment="test", auth=auth))

    assert list(issues) == ["auth.no-providers"]


def test_default_timezone_missing_from_database_is_fatal():
    issues = collect(
        Settings(environment="test", auth=configured(), default_timezone="Asia/Tokyo")
    )

    assert "Asia/Tokyo" in issues["timezone.default"].summary
    assert issues["timezone.default"].is_fatal is True
