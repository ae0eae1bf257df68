"""Unit tests for SessionService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from atrium.config import AuthSettings
from atrium.domain.model import LocalAccount
from atrium.domain.service import SessionService
from atrium.domain.value import AccountId, Username
from atrium.util.jwt import JWTError

SECRET = "unit-test-secret-with-enough-length"


@pytest.fixture
def session_service():
    return SessionService(AuthSettings(jwt_secret=SECRET))


@pytest.fixture
def account():
    return LocalAccount(
        id=AccountId(uuid4()),
        username=Username("octocat"),
        email="octocat@example.com",
        display_name="Mona Octocat",
    )


def test_session_token_round_trip(session_service, account):
    token = session_service.establish_session(account)

    payload = session_service.verify_token(token)

    assert payload.account_id == str(account.id)
    assert payload.username == "octocat"


def test_expired_token_is_rejected(session_service, account):
    token = jwt.encode(
        {
            "account_id": str(account.id),
            "username": "octocat",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(JWTError, match="expired"):
        session_service.verify_token(token)


def test_token_signed_with_other_secret_is_rejected(account):
    other = SessionService(AuthSettings(jwt_secret="another-secret-entirely-123"))
    token = other.establish_session(account)

    with pytest.raises(JWTError, match="Invalid token"):
        SessionService(AuthSettings(jwt_secret=SECRET)).verify_token(token)


def test_account_id_from_bad_token_is_none(session_service, account):
    assert session_service.get_account_id_from_token(None) is None
    assert session_service.get_account_id_from_token("not-a-jwt") is None
    assert session_service.get_account_id_from_token(
        session_service.establish_session(account)
    ) == str(account.id)
