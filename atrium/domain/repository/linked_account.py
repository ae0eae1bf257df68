"""Linked account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from atrium.domain.model.linked_account import LinkedAccount
from atrium.domain.value import AccountId, OAuthProviderKey


class LinkedAccountRepository(ABC):
    """Repository for LinkedAccount entity."""

    @abstractmethod
    async def find_by_provider_identity(
        self, provider: OAuthProviderKey, external_user_id: str
    ) -> Optional[LinkedAccount]:
        """Find the link for a provider identity.

        Args:
            provider: OAuth provider
            external_user_id: Provider-assigned user ID

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_account_and_provider(
        self, account_id: AccountId, provider: OAuthProviderKey
    ) -> Optional[LinkedAccount]:
        """Find the link an account holds for a provider.

        Args:
            account_id: Local account ID
            provider: OAuth provider

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_account(self, account_id: AccountId) -> list[LinkedAccount]:
        """Find all links for an account, oldest first."""
        pass

    @abstractmethod
    async def add(self, linked_account: LinkedAccount) -> LinkedAccount:
        """Insert a new link.

        Raises:
            UniquenessViolation: If the identity or the account/provider pair
                is already linked
        """
        pass
