"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from atrium.domain.model import LinkedAccount, LocalAccount, ProfileImage
from atrium.domain.repository import AccountRepository
from atrium.domain.value import AccountId, Username
from atrium.persistence.integrity import to_uniqueness_violation
from atrium.persistence.mappers import (
    account_to_dict,
    linked_account_to_dict,
    profile_image_to_dict,
    row_to_account,
)
from atrium.persistence.tables import (
    accounts_table,
    linked_accounts_table,
    profile_images_table,
)


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[LocalAccount]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[LocalAccount]:
        """Find an account by email."""
        stmt = select(accounts_table).where(accounts_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[LocalAccount]:
        """Find an account by username."""
        stmt = select(accounts_table).where(accounts_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def save(self, account: LocalAccount) -> LocalAccount:
        """Save an account (create or update).

        Raises:
            UniquenessViolation: If username or email is already taken
        """
        existing = await self.find_by_id(account.id)

        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = accounts_table.insert().values(**account_dict)

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            violation = to_uniqueness_violation(e)
            if violation is None:
                raise
            raise violation from e

        return account

    async def register(
        self,
        account: LocalAccount,
        linked_account: LinkedAccount,
        profile_image: ProfileImage | None = None,
    ) -> LocalAccount:
        """Insert image, account and link inside one SAVEPOINT.

        Raises:
            UniquenessViolation: Naming the violated key
        """
        try:
            async with self.session.begin_nested():
                if profile_image:
                    await self.session.execute(
                        profile_images_table.insert().values(
                            **profile_image_to_dict(profile_image)
                        )
                    )
                await self.session.execute(
                    accounts_table.insert().values(**account_to_dict(account))
                )
                await self.session.execute(
                    linked_accounts_table.insert().values(
                        **linked_account_to_dict(linked_account)
                    )
                )
        except IntegrityError as e:
            violation = to_uniqueness_violation(e)
            if violation is None:
                raise
            raise violation from e

        return account
