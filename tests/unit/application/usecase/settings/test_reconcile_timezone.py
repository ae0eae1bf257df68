"""Unit tests for ReconcileTimezoneUseCase.

Uses zones without daylight saving so offsets do not depend on the date.
"""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from atrium.application.usecase.settings import ReconcileTimezoneUseCase
from atrium.application.usecase.settings.reconcile_timezone import (
    ReconcileTimezoneRequest,
)
from atrium.domain.error import NotFoundError
from atrium.domain.model import AccountPreferences, LocalAccount
from atrium.domain.service import AccountService
from atrium.domain.value import AccountId, Username
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TOKYO = -540  # UTC+9 in browser convention
KOLKATA = -330


async def store_account(
    container: AsyncContainer, timezone_identifier: str | None = None
) -> LocalAccount:
    account_service = await container.get(AccountService)
    return await account_service.save(
        LocalAccount(
            id=AccountId(uuid4()),
            username=Username("octocat"),
            email="octocat@example.com",
            display_name="Mona Octocat",
            timezone_identifier=timezone_identifier,
        )
    )


class TestReconcileTimezone:
    @pytest.mark.asyncio
    async def test_matching_offsets_are_calibrated(self, unit_env):
        """Accounts without a timezone use the server default (UTC)."""
        account = await store_account(unit_env)
        use_case = await unit_env.get(ReconcileTimezoneUseCase)

        response = await use_case.execute(
            ReconcileTimezoneRequest(account_id=account.id, client_offset=0)
        )

        assert response.kind == "calibrated"
        assert response.title == "Timezone Calibrated"
        assert "(GMT-0)" in response.messages[0]
        assert response.options == {}

    @pytest.mark.asyncio
    async def test_conflict_offers_matching_zones(self, unit_env):
        account = await store_account(unit_env, "Asia/Kolkata")
        use_case = await unit_env.get(ReconcileTimezoneUseCase)

        response = await use_case.execute(
            ReconcileTimezoneRequest(account_id=account.id, client_offset=TOKYO)
        )

        assert response.kind == "adjust"
        assert response.title == "Adjust Timezone"
        assert response.client_offset == "GMT+9"
        assert response.account_offset == "GMT+5"
        assert list(response.options)[0] == "ignore"
        assert response.options["ignore"] == "Ignore Conflict"
        assert "Asia/Tokyo" in response.options
        assert "Asia/Kolkata" not in response.options

    @pytest.mark.asyncio
    async def test_ignore_remembers_offset(self, unit_env):
        account = await store_account(unit_env)
        use_case = await unit_env.get(ReconcileTimezoneUseCase)
        account_service = await unit_env.get(AccountService)

        response = await use_case.execute(
            ReconcileTimezoneRequest(
                account_id=account.id,
                client_offset=TOKYO,
                submitted=True,
                timezone="ignore",
            )
        )

        assert response.kind == "ignored"
        assert response.title == "Conflict Ignored"
        preferences = await account_service.get_preferences(account.id)
        assert preferences.ignore_timezone_offset == TOKYO
        # Profile timezone untouched
        assert (await account_service.get_by_id(account.id)).timezone_identifier is None

    @pytest.mark.asyncio
    async def test_choosing_zone_updates_profile_and_clears_ignore(self, unit_env):
        account = await store_account(unit_env)
        account_service = await unit_env.get(AccountService)
        await account_service.save_preferences(
            AccountPreferences(account_id=account.id, ignore_timezone_offset=KOLKATA)
        )
        use_case = await unit_env.get(ReconcileTimezoneUseCase)

        response = await use_case.execute(
            ReconcileTimezoneRequest(
                account_id=account.id,
                client_offset=TOKYO,
                submitted=True,
                timezone="Asia/Tokyo",
            )
        )

        assert response.kind == "calibrated"
        updated = await account_service.get_by_id(account.id)
        assert updated.timezone_identifier == "Asia/Tokyo"
        preferences = await account_service.get_preferences(account.id)
        assert preferences.ignore_timezone_offset is None

    @pytest.mark.asyncio
    async def test_zone_not_matching_offset_is_not_saved(self, unit_env):
        account = await store_account(unit_env)
        use_case = await unit_env.get(ReconcileTimezoneUseCase)
        account_service = await unit_env.get(AccountService)

        response = await use_case.execute(
            ReconcileTimezoneRequest(
                account_id=account.id,
                client_offset=TOKYO,
                submitted=True,
                timezone="Asia/Kolkata",
            )
        )

        assert response.kind == "adjust"
        assert (await account_service.get_by_id(account.id)).timezone_identifier is None

    @pytest.mark.asyncio
    async def test_unknown_account(self, unit_env):
        use_case = await unit_env.get(ReconcileTimezoneUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ReconcileTimezoneRequest(account_id=AccountId(uuid4()), client_offset=0)
            )
