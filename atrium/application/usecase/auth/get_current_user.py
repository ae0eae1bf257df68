"""Get current account use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from atrium.domain.service import (
    AccountService,
    LinkedAccountService,
    SessionService,
)
from atrium.domain.value import AccountId, OAuthProviderKey


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class LinkedAccountInfo(BaseModel):
    """Linked account information for response."""

    provider: OAuthProviderKey
    external_user_id: str
    created_at: datetime


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    account_id: str
    username: str
    email: str
    display_name: str
    has_profile_image: bool
    timezone_identifier: str | None
    ignore_timezone_offset: int | None
    created_at: datetime
    linked_accounts: list[LinkedAccountInfo]


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated account."""

    def __init__(
        self,
        session_service: SessionService,
        account_service: AccountService,
        linked_account_service: LinkedAccountService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            session_service: Session token domain service
            account_service: Account domain service
            linked_account_service: Linked account domain service
        """
        self.session_service = session_service
        self.account_service = account_service
        self.linked_account_service = linked_account_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the account no longer exists
        """
        payload = self.session_service.verify_token(request.token)

        account = await self.account_service.get_by_id(
            AccountId(UUID(payload.account_id))
        )
        preferences = await self.account_service.get_preferences(account.id)
        links = await self.linked_account_service.get_all_for_account(account.id)

        return GetCurrentUserResponse(
            account_id=str(account.id),
            username=account.username.root,
            email=account.email,
            display_name=account.display_name,
            has_profile_image=account.profile_image_id is not None,
            timezone_identifier=account.timezone_identifier,
            ignore_timezone_offset=preferences.ignore_timezone_offset,
            created_at=account.created_at,
            linked_accounts=[
                LinkedAccountInfo(
                    provider=link.provider,
                    external_user_id=link.external_user_id,
                    created_at=link.created_at,
                )
                for link in links
            ],
        )
