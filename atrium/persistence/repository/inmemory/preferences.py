"""In-memory preferences repository for testing."""

from typing import Optional

from atrium.domain.model import AccountPreferences
from atrium.domain.repository import PreferencesRepository
from atrium.domain.value import AccountId

from .database import InMemoryDatabase


class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory implementation of PreferencesRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_account(
        self, account_id: AccountId
    ) -> Optional[AccountPreferences]:
        """Find preferences for an account."""
        return self.database.preferences.get(account_id)

    async def save(self, preferences: AccountPreferences) -> AccountPreferences:
        """Create or replace preferences."""
        self.database.preferences[preferences.account_id] = preferences
        return preferences
