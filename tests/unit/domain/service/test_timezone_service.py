"""Unit tests for TimezoneService."""

from datetime import datetime, timezone

import pytest

from atrium.domain.service import TimezoneDatabase, TimezoneService

AT = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class FixedTimezoneDatabase(TimezoneDatabase):
    """Timezone database with fixed offsets (minutes east of UTC)."""

    def __init__(self, offsets: dict[str, int]):
        self.offsets = offsets

    def list_identifiers(self) -> list[str]:
        return sorted(self.offsets)

    def utc_offset_minutes(self, identifier: str, at: datetime) -> int:
        return self.offsets[identifier]


@pytest.fixture
def timezone_service():
    return TimezoneService(
        FixedTimezoneDatabase(
            {
                "UTC": 0,
                "America/Chicago": -360,
                "America/Mexico_City": -360,
                "America/New_York": -300,
                "Asia/Kolkata": 330,
                "Europe/Berlin": 60,
            }
        )
    )


class TestOffsetFor:
    def test_west_of_utc_is_positive(self, timezone_service):
        assert timezone_service.offset_for("America/New_York", AT) == 300

    def test_east_of_utc_is_negative(self, timezone_service):
        assert timezone_service.offset_for("Europe/Berlin", AT) == -60

    def test_unknown_zone_raises_key_error(self, timezone_service):
        with pytest.raises(KeyError):
            timezone_service.offset_for("Mars/Olympus_Mons", AT)


class TestCandidateTimezones:
    def test_ignore_option_comes_first(self, timezone_service):
        options = timezone_service.candidate_timezones(360, AT)

        assert list(options) == ["ignore", "America/Chicago", "America/Mexico_City"]
        assert options["ignore"] == "Ignore Conflict"
        assert options["America/Chicago"] == "America/Chicago"

    def test_offset_without_zone_only_offers_ignore(self, timezone_service):
        assert timezone_service.candidate_timezones(-600, AT) == {
            "ignore": "Ignore Conflict"
        }


class TestFormatOffset:
    """Offsets are rendered as whole hours with the sign of UTC+/-."""

    @pytest.mark.parametrize(
        "offset, expected",
        [
            (0, "GMT-0"),
            (300, "GMT-5"),
            (-60, "GMT+1"),
            (-330, "GMT+5"),
            (570, "GMT-9"),
        ],
    )
    def test_format_offset(self, offset, expected):
        assert TimezoneService.format_offset(offset) == expected


def test_is_known(timezone_service):
    assert timezone_service.is_known("Asia/Kolkata")
    assert not timezone_service.is_known("Asia/Atlantis")
