"""Linked account domain service."""

import logfire

from atrium.domain.model.linked_account import LinkedAccount
from atrium.domain.repository import LinkedAccountRepository
from atrium.domain.value import AccountId, OAuthProviderKey


class LinkedAccountService:
    """Domain service for linked account operations."""

    def __init__(self, linked_account_repository: LinkedAccountRepository) -> None:
        """Initialize linked account service.

        Args:
            linked_account_repository: Linked account repository
        """
        self.linked_account_repository = linked_account_repository

    async def get_by_provider_identity(
        self, provider: OAuthProviderKey, external_user_id: str
    ) -> LinkedAccount | None:
        """Get link by provider and provider-assigned user ID.

        Args:
            provider: OAuth provider
            external_user_id: Provider-specific user ID

        Returns:
            Link if found, None otherwise
        """
        with logfire.span(
            "linked_account_service.get_by_provider_identity",
            provider=provider.value,
            external_user_id=external_user_id,
        ):
            link = await self.linked_account_repository.find_by_provider_identity(
                provider, external_user_id
            )
            if link:
                logfire.info(
                    "Linked account found",
                    provider=provider.value,
                    external_user_id=external_user_id,
                    account_id=str(link.account_id),
                )
            return link

    async def get_for_account(
        self, account_id: AccountId, provider: OAuthProviderKey
    ) -> LinkedAccount | None:
        """Get the link an account holds for a provider."""
        return await self.linked_account_repository.find_by_account_and_provider(
            account_id, provider
        )

    async def get_all_for_account(self, account_id: AccountId) -> list[LinkedAccount]:
        """Get all links for an account."""
        with logfire.span(
            "linked_account_service.get_all_for_account", account_id=str(account_id)
        ):
            links = await self.linked_account_repository.find_all_by_account(
                account_id
            )
            logfire.info(
                "Linked accounts retrieved",
                account_id=str(account_id),
                count=len(links),
            )
            return links

    async def link(self, linked_account: LinkedAccount) -> LinkedAccount:
        """Create a new link.

        Raises:
            UniquenessViolation: If the identity is already linked
        """
        with logfire.span(
            "linked_account_service.link",
            provider=linked_account.provider.value,
            account_id=str(linked_account.account_id),
        ):
            saved = await self.linked_account_repository.add(linked_account)
            logfire.info(
                "Account linked",
                provider=saved.provider.value,
                external_user_id=saved.external_user_id,
                account_id=str(saved.account_id),
            )
            return saved
