"""PostgreSQL implementation of Preferences repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from atrium.domain.model import AccountPreferences
from atrium.domain.repository import PreferencesRepository
from atrium.domain.value import AccountId
from atrium.persistence.mappers import preferences_to_dict, row_to_preferences
from atrium.persistence.tables import account_preferences_table


class PostgresPreferencesRepository(PreferencesRepository):
    """PostgreSQL implementation of PreferencesRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_account(
        self, account_id: AccountId
    ) -> Optional[AccountPreferences]:
        """Find preferences for an account."""
        stmt = select(account_preferences_table).where(
            account_preferences_table.c.account_id == account_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_preferences(dict(row)) if row else None

    async def save(self, preferences: AccountPreferences) -> AccountPreferences:
        """Upsert preferences for an account."""
        values = preferences_to_dict(preferences)
        stmt = insert(account_preferences_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[account_preferences_table.c.account_id],
            set_={
                "ignore_timezone_offset": stmt.excluded.ignore_timezone_offset,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return preferences
