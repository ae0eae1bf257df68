"""In-memory account repository for testing."""

from typing import Optional

from atrium.domain.error import UniquenessViolation
from atrium.domain.model import LinkedAccount, LocalAccount, ProfileImage
from atrium.domain.repository.account import AccountRepository
from atrium.domain.value import AccountId, Username

from .database import InMemoryDatabase
from .linked_account import check_link_constraints


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Enforces the same unique keys as the database schema.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, account_id: AccountId) -> Optional[LocalAccount]:
        """Find an account by ID."""
        return self.database.accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[LocalAccount]:
        """Find an account by email."""
        for account in self.database.accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_username(self, username: Username) -> Optional[LocalAccount]:
        """Find an account by username."""
        for account in self.database.accounts.values():
            if account.username == username:
                return account
        return None

    def _check_account_constraints(self, account: LocalAccount) -> None:
        for other in self.database.accounts.values():
            if other.id == account.id:
                continue
            if other.username == account.username:
                raise UniquenessViolation("username")
            if other.email == account.email:
                raise UniquenessViolation("email")

    async def save(self, account: LocalAccount) -> LocalAccount:
        """Save or update an account."""
        self._check_account_constraints(account)
        self.database.accounts[account.id] = account
        return account

    async def register(
        self,
        account: LocalAccount,
        linked_account: LinkedAccount,
        profile_image: ProfileImage | None = None,
    ) -> LocalAccount:
        """Check every constraint, then write all rows."""
        self._check_account_constraints(account)
        check_link_constraints(self.database, linked_account)

        if profile_image:
            self.database.profile_images[profile_image.id] = profile_image
        self.database.accounts[account.id] = account
        self.database.linked_accounts[linked_account.id] = linked_account
        return account
