"""Mock providers for testing."""

from .facebook import MockFacebookProvider
from .github import MockGitHubProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockFacebookProvider",
    "MockGitHubProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
