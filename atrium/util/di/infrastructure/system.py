"""System infrastructure providers (timezone database, setup engine)."""

from dishka import Scope, provide

from atrium.adapter.setup.engine import SettingsSetupEngine
from atrium.adapter.timezone import ZoneInfoTimezoneDatabase
from atrium.config import Settings
from atrium.domain.service import SetupEngine, TimezoneDatabase
from atrium.util.di.base import ProviderBase


class SystemProvider(ProviderBase):
    """Provider for adapters over the local system - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_timezone_database(self) -> TimezoneDatabase:
        """Provide IANA timezone database."""
        return ZoneInfoTimezoneDatabase()

    @provide(scope=Scope.APP)
    def get_setup_engine(
        self, settings: Settings, timezone_database: TimezoneDatabase
    ) -> SetupEngine:
        """Provide settings-based setup engine."""
        return SettingsSetupEngine(
            settings=settings, timezone_database=timezone_database
        )
