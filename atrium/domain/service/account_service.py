"""Account domain service."""

import logfire

from atrium.domain.error import NotFoundError
from atrium.domain.model import (
    AccountPreferences,
    LinkedAccount,
    LocalAccount,
    ProfileImage,
)
from atrium.domain.repository import AccountRepository, PreferencesRepository
from atrium.domain.value import AccountId


class AccountService:
    """Domain service for local account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        preferences_repository: PreferencesRepository,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            preferences_repository: Account preferences repository
        """
        self.account_repository = account_repository
        self.preferences_repository = preferences_repository

    async def get_by_id(self, account_id: AccountId) -> LocalAccount:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def get_by_email(self, email: str) -> LocalAccount | None:
        """Get account by email.

        Args:
            email: Account email

        Returns:
            Account if found, None otherwise
        """
        with logfire.span("account_service.get_by_email", email=email):
            account = await self.account_repository.find_by_email(email)
            if account:
                logfire.info("Account found", email=email, account_id=str(account.id))
            else:
                logfire.info("Account not found", email=email)
            return account

    async def save(self, account: LocalAccount) -> LocalAccount:
        """Save account (create or update)."""
        with logfire.span("account_service.save", account_id=str(account.id)):
            saved = await self.account_repository.save(account)
            logfire.info(
                "Account saved",
                account_id=str(saved.id),
                username=saved.username.root,
            )
            return saved

    async def register(
        self,
        account: LocalAccount,
        linked_account: LinkedAccount,
        profile_image: ProfileImage | None = None,
    ) -> LocalAccount:
        """Create an account and its first link atomically.

        Raises:
            UniquenessViolation: If a unique key is already taken
        """
        with logfire.span(
            "account_service.register",
            username=account.username.root,
            provider=linked_account.provider.value,
        ):
            saved = await self.account_repository.register(
                account, linked_account, profile_image
            )
            logfire.info(
                "Account registered",
                account_id=str(saved.id),
                username=saved.username.root,
                provider=linked_account.provider.value,
                has_profile_image=profile_image is not None,
            )
            return saved

    async def get_preferences(self, account_id: AccountId) -> AccountPreferences:
        """Get preferences for an account, defaulting to empty preferences."""
        preferences = await self.preferences_repository.find_by_account(account_id)
        return preferences or AccountPreferences(account_id=account_id)

    async def save_preferences(
        self, preferences: AccountPreferences
    ) -> AccountPreferences:
        """Save account preferences."""
        with logfire.span(
            "account_service.save_preferences",
            account_id=str(preferences.account_id),
        ):
            return await self.preferences_repository.save(preferences)
