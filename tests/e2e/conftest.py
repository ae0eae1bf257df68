"""Fixtures for end-to-end tests against the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from atrium.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container with mocked providers and in-memory persistence."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client sharing one event loop with the container."""
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Walk the callback and registration form, returning the final response."""

    def _register(provider: str = "github", **fields):
        form = client.get(
            f"/auth/oauth/{provider}/login",
            params={"code": "abc"},
            follow_redirects=False,
        ).json()
        body = {"token": form["token"], "username": "octo", **fields}
        return client.post(
            f"/auth/oauth/{provider}/login", json=body, follow_redirects=False
        )

    return _register
