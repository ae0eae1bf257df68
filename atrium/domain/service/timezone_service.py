"""Timezone reconciliation domain service.

Offsets here follow the browser convention: minutes, positive west of UTC
(``Date.getTimezoneOffset()``), so UTC+2 is ``-120``.
"""

from datetime import datetime, timezone

import logfire

from .base import Service

IGNORE_OPTION = "ignore"


class TimezoneDatabase:
    """Timezone database port."""

    def list_identifiers(self) -> list[str]:
        """List all known timezone identifiers."""
        raise NotImplementedError

    def utc_offset_minutes(self, identifier: str, at: datetime) -> int:
        """UTC offset of a zone at an instant, in minutes east of UTC.

        Raises:
            KeyError: If the identifier is unknown
        """
        raise NotImplementedError


class TimezoneService(Service):
    """Matches browser offsets against the timezone database."""

    def __init__(self, timezone_database: TimezoneDatabase) -> None:
        self.timezone_database = timezone_database

    def offset_for(self, identifier: str, at: datetime | None = None) -> int:
        """Browser-convention offset of a zone."""
        at = at or datetime.now(timezone.utc)
        return -self.timezone_database.utc_offset_minutes(identifier, at)

    def is_known(self, identifier: str) -> bool:
        """Whether the identifier exists in the timezone database."""
        return identifier in self.timezone_database.list_identifiers()

    def candidate_timezones(
        self, client_offset: int, at: datetime | None = None
    ) -> dict[str, str]:
        """Dialog options for a browser offset.

        Returns:
            ``{"ignore": "Ignore Conflict"}`` followed by every zone whose
            current offset equals ``client_offset``, keyed by identifier
        """
        at = at or datetime.now(timezone.utc)
        options = {IGNORE_OPTION: "Ignore Conflict"}
        with logfire.span(
            "timezone_service.candidate_timezones", client_offset=client_offset
        ):
            for identifier in self.timezone_database.list_identifiers():
                if self.offset_for(identifier, at) == client_offset:
                    options[identifier] = identifier
        return options

    @staticmethod
    def format_offset(offset: int) -> str:
        """Format a browser-convention offset, e.g. ``300`` -> ``GMT-5``."""
        hours = offset / 60
        if hours >= 0:
            return f"GMT-{int(hours)}"
        return f"GMT+{int(-hours)}"
