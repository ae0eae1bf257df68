"""LinkedAccount repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from atrium.domain.model.linked_account import LinkedAccount
from atrium.domain.repository.linked_account import LinkedAccountRepository
from atrium.domain.value import AccountId, OAuthProviderKey
from atrium.persistence.integrity import to_uniqueness_violation
from atrium.persistence.mappers import linked_account_to_dict, row_to_linked_account
from atrium.persistence.tables import linked_accounts_table


class PostgresLinkedAccountRepository(LinkedAccountRepository):
    """PostgreSQL implementation of LinkedAccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_provider_identity(
        self, provider: OAuthProviderKey, external_user_id: str
    ) -> Optional[LinkedAccount]:
        """Get link by provider and provider-assigned user ID."""
        stmt = select(linked_accounts_table).where(
            linked_accounts_table.c.provider == provider.value,
            linked_accounts_table.c.external_user_id == external_user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_linked_account(dict(row))

    async def find_by_account_and_provider(
        self, account_id: AccountId, provider: OAuthProviderKey
    ) -> Optional[LinkedAccount]:
        """Get the link an account holds for a provider."""
        stmt = select(linked_accounts_table).where(
            linked_accounts_table.c.account_id == account_id,
            linked_accounts_table.c.provider == provider.value,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_linked_account(dict(row))

    async def find_all_by_account(self, account_id: AccountId) -> list[LinkedAccount]:
        """Find all links for an account, oldest first."""
        stmt = (
            select(linked_accounts_table)
            .where(linked_accounts_table.c.account_id == account_id)
            .order_by(linked_accounts_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_linked_account(dict(row)) for row in rows]

    async def add(self, linked_account: LinkedAccount) -> LinkedAccount:
        """Insert a new link.

        Raises:
            UniquenessViolation: If the identity or account/provider pair is taken
        """
        stmt = linked_accounts_table.insert().values(
            **linked_account_to_dict(linked_account)
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            violation = to_uniqueness_violation(e)
            if violation is None:
                raise
            raise violation from e

        return linked_account
