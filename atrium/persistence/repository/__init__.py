"""PostgreSQL repository implementations."""

from atrium.persistence.repository.account import PostgresAccountRepository
from atrium.persistence.repository.linked_account import (
    PostgresLinkedAccountRepository,
)
from atrium.persistence.repository.preferences import PostgresPreferencesRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresLinkedAccountRepository",
    "PostgresPreferencesRepository",
]
