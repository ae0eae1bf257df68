"""Unit tests for GetCurrentUserUseCase."""

from uuid import uuid4

import pytest

from atrium.application.usecase.auth import GetCurrentUserUseCase
from atrium.application.usecase.auth.get_current_user import GetCurrentUserRequest
from atrium.domain.error import NotFoundError
from atrium.domain.model import AccountPreferences, LinkedAccount, LocalAccount
from atrium.domain.service import (
    AccountService,
    LinkedAccountService,
    SessionService,
)
from atrium.domain.value import (
    AccountId,
    LinkedAccountId,
    OAuthProviderKey,
    Username,
)
from atrium.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_account() -> LocalAccount:
    return LocalAccount(
        id=AccountId(uuid4()),
        username=Username("octocat"),
        email="octocat@example.com",
        display_name="Mona Octocat",
        timezone_identifier="Europe/Berlin",
    )


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_returns_account_links_and_preferences(self, unit_env):
        account_service = await unit_env.get(AccountService)
        linked_account_service = await unit_env.get(LinkedAccountService)
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        account = await account_service.save(make_account())
        await linked_account_service.link(
            LinkedAccount(
                id=LinkedAccountId(uuid4()),
                account_id=account.id,
                provider=OAuthProviderKey.FACEBOOK,
                external_user_id="2002",
            )
        )
        await account_service.save_preferences(
            AccountPreferences(account_id=account.id, ignore_timezone_offset=300)
        )

        response = await use_case.execute(
            GetCurrentUserRequest(token=session_service.establish_session(account))
        )

        assert response.account_id == str(account.id)
        assert response.username == "octocat"
        assert response.has_profile_image is False
        assert response.timezone_identifier == "Europe/Berlin"
        assert response.ignore_timezone_offset == 300
        assert [link.provider for link in response.linked_accounts] == [
            OAuthProviderKey.FACEBOOK
        ]

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="garbage"))

    @pytest.mark.asyncio
    async def test_token_for_deleted_account(self, unit_env):
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCurrentUserRequest(
                    token=session_service.establish_session(make_account())
                )
            )
