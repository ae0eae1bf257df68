"""Account preferences repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from atrium.domain.model.preferences import AccountPreferences
from atrium.domain.value import AccountId


class PreferencesRepository(ABC):
    """Repository for AccountPreferences."""

    @abstractmethod
    async def find_by_account(
        self, account_id: AccountId
    ) -> Optional[AccountPreferences]:
        """Find preferences for an account.

        Args:
            account_id: Account ID

        Returns:
            Preferences if the account ever saved any, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, preferences: AccountPreferences) -> AccountPreferences:
        """Create or replace preferences for an account."""
        pass
