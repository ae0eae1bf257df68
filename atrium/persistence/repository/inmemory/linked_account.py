"""In-memory linked account repository for testing."""

from typing import Optional

from atrium.domain.error import UniquenessViolation
from atrium.domain.model.linked_account import LinkedAccount
from atrium.domain.repository.linked_account import LinkedAccountRepository
from atrium.domain.value import AccountId, OAuthProviderKey

from .database import InMemoryDatabase


def check_link_constraints(
    database: InMemoryDatabase, linked_account: LinkedAccount
) -> None:
    """Raise UniquenessViolation if the link would break a unique key."""
    for other in database.linked_accounts.values():
        if (
            other.provider == linked_account.provider
            and other.external_user_id == linked_account.external_user_id
        ):
            raise UniquenessViolation("provider_identity")
        if (
            other.account_id == linked_account.account_id
            and other.provider == linked_account.provider
        ):
            raise UniquenessViolation("account_provider")


class InMemoryLinkedAccountRepository(LinkedAccountRepository):
    """In-memory implementation of LinkedAccountRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_provider_identity(
        self, provider: OAuthProviderKey, external_user_id: str
    ) -> Optional[LinkedAccount]:
        """Find link by provider identity."""
        for link in self.database.linked_accounts.values():
            if link.provider == provider and link.external_user_id == external_user_id:
                return link
        return None

    async def find_by_account_and_provider(
        self, account_id: AccountId, provider: OAuthProviderKey
    ) -> Optional[LinkedAccount]:
        """Find the link an account holds for a provider."""
        for link in self.database.linked_accounts.values():
            if link.account_id == account_id and link.provider == provider:
                return link
        return None

    async def find_all_by_account(self, account_id: AccountId) -> list[LinkedAccount]:
        """Find all links for an account, oldest first."""
        links = [
            link
            for link in self.database.linked_accounts.values()
            if link.account_id == account_id
        ]
        return sorted(links, key=lambda link: link.created_at)

    async def add(self, linked_account: LinkedAccount) -> LinkedAccount:
        """Insert a new link."""
        check_link_constraints(self.database, linked_account)
        self.database.linked_accounts[linked_account.id] = linked_account
        return linked_account
