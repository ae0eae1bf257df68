"""IANA timezone database backed by ``zoneinfo``."""

from datetime import datetime
from functools import cached_property
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from atrium.domain.service.timezone_service import TimezoneDatabase


class ZoneInfoTimezoneDatabase(TimezoneDatabase):
    """Timezone database over the system (or ``tzdata``) IANA zones."""

    @cached_property
    def _identifiers(self) -> list[str]:
        return sorted(available_timezones())

    def list_identifiers(self) -> list[str]:
        """List all known timezone identifiers, sorted."""
        return list(self._identifiers)

    def utc_offset_minutes(self, identifier: str, at: datetime) -> int:
        """UTC offset of a zone at an instant, in minutes east of UTC.

        Raises:
            KeyError: If the identifier is unknown
        """
        try:
            zone = ZoneInfo(identifier)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise KeyError(identifier) from e

        offset = at.astimezone(zone).utcoffset()
        if offset is None:
            return 0
        return int(offset.total_seconds() // 60)
