"""Unit tests for application settings."""

import pydantic
import pytest

from atrium.config import Settings


def test_default_timezone_defaults_to_utc():
    assert Settings(environment="test").default_timezone == "UTC"


def test_known_default_timezone_is_accepted():
    settings = Settings(environment="test", default_timezone="America/New_York")

    assert settings.default_timezone == "America/New_York"


@pytest.mark.parametrize("identifier", ["Mars/Olympus", "", "../etc/passwd"])
def test_unknown_default_timezone_is_rejected(identifier):
    with pytest.raises(pydantic.ValidationError, match="Unknown timezone"):
        Settings(environment="test", default_timezone=identifier)
