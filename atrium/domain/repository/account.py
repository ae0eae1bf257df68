"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from atrium.domain.model.account import LocalAccount
from atrium.domain.model.linked_account import LinkedAccount
from atrium.domain.model.profile_image import ProfileImage
from atrium.domain.value import AccountId, Username


class AccountRepository(ABC):
    """Repository for LocalAccount aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[LocalAccount]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[LocalAccount]:
        """Find an account by email.

        Args:
            email: The account's email

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[LocalAccount]:
        """Find an account by username.

        Args:
            username: The account's username

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: LocalAccount) -> LocalAccount:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            UniquenessViolation: If username or email is already taken
        """
        pass

    @abstractmethod
    async def register(
        self,
        account: LocalAccount,
        linked_account: LinkedAccount,
        profile_image: ProfileImage | None = None,
    ) -> LocalAccount:
        """Create an account together with its first linked account.

        Either every row is written or none is.

        Args:
            account: New account
            linked_account: Link to the provider identity used to register
            profile_image: Optional profile image referenced by the account

        Returns:
            The saved account

        Raises:
            UniquenessViolation: Naming the violated key ("username", "email",
                "provider_identity" or "account_provider")
        """
        pass
