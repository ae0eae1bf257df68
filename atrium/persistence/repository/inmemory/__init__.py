"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .database import InMemoryDatabase
from .linked_account import InMemoryLinkedAccountRepository
from .preferences import InMemoryPreferencesRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryDatabase",
    "InMemoryLinkedAccountRepository",
    "InMemoryPreferencesRepository",
]
