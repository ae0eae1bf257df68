"""Timezone reconciliation use case.

Compares the browser's UTC offset with the account's timezone and lets the
user either adopt a matching zone or ignore the conflict for that offset.
"""

from datetime import datetime, timezone
from typing import Literal

import logfire
from pydantic import BaseModel, Field

from atrium.application.usecase.base import BaseUseCase
from atrium.config import Settings
from atrium.domain.service import AccountService, TimezoneService
from atrium.domain.service.timezone_service import IGNORE_OPTION
from atrium.domain.value import AccountId

SETTINGS_HELP = "You can change your date and time preferences in Settings."


class ReconcileTimezoneRequest(BaseModel):
    """Timezone dialog request."""

    account_id: AccountId
    client_offset: int  # Minutes, positive west of UTC
    submitted: bool = False
    timezone: str | None = None  # Selected option when submitted


class ReconcileTimezoneResponse(BaseModel):
    """Timezone dialog state."""

    kind: Literal["ignored", "calibrated", "adjust"]
    title: str
    messages: list[str]
    options: dict[str, str] = Field(default_factory=dict)  # Only for "adjust"
    client_offset: str
    account_offset: str | None = None


class ReconcileTimezoneUseCase(BaseUseCase):
    """Use case for the browser/profile timezone conflict dialog."""

    def __init__(
        self,
        account_service: AccountService,
        timezone_service: TimezoneService,
        settings: Settings,
    ) -> None:
        """Initialize reconcile timezone use case.

        Args:
            account_service: Account domain service
            timezone_service: Timezone domain service
            settings: Application settings (default timezone)
        """
        self.account_service = account_service
        self.timezone_service = timezone_service
        self.settings = settings

    async def execute(
        self, request: ReconcileTimezoneRequest
    ) -> ReconcileTimezoneResponse:
        """Apply a submitted choice, then report whether offsets agree.

        Raises:
            NotFoundError: If the account does not exist
        """
        now = datetime.now(timezone.utc)
        client_label = self.timezone_service.format_offset(request.client_offset)

        with logfire.span(
            "reconcile_timezone",
            account_id=str(request.account_id),
            client_offset=request.client_offset,
            submitted=request.submitted,
        ):
            account = await self.account_service.get_by_id(request.account_id)
            options = self.timezone_service.candidate_timezones(
                request.client_offset, now
            )

            if request.submitted:
                preferences = await self.account_service.get_preferences(account.id)

                if request.timezone == IGNORE_OPTION:
                    await self.account_service.save_preferences(
                        preferences.model_copy(
                            update={
                                "ignore_timezone_offset": request.client_offset,
                                "updated_at": now,
                            }
                        )
                    )
                    logfire.info(
                        "Timezone conflict ignored",
                        account_id=str(account.id),
                        client_offset=request.client_offset,
                    )
                    return ReconcileTimezoneResponse(
                        kind="ignored",
                        title="Conflict Ignored",
                        messages=[
                            "The conflict between your browser and profile "
                            "timezone settings will be ignored.",
                            SETTINGS_HELP,
                        ],
                        client_offset=client_label,
                    )

                # Zones that do not match the browser offset are not accepted
                if request.timezone and request.timezone in options:
                    await self.account_service.save_preferences(
                        preferences.model_copy(
                            update={"ignore_timezone_offset": None, "updated_at": now}
                        )
                    )
                    account = await self.account_service.save(
                        account.model_copy(
                            update={
                                "timezone_identifier": request.timezone,
                                "updated_at": now,
                            }
                        )
                    )
                    logfire.info(
                        "Account timezone updated",
                        account_id=str(account.id),
                        timezone=request.timezone,
                    )

            account_offset = self.timezone_service.offset_for(
                account.timezone_identifier or self.settings.default_timezone, now
            )

            if request.client_offset == account_offset:
                return ReconcileTimezoneResponse(
                    kind="calibrated",
                    title="Timezone Calibrated",
                    messages=[
                        "Your browser timezone and profile timezone are now in "
                        f"agreement ({client_label}).",
                        SETTINGS_HELP,
                    ],
                    client_offset=client_label,
                )

            account_label = self.timezone_service.format_offset(account_offset)
            return ReconcileTimezoneResponse(
                kind="adjust",
                title="Adjust Timezone",
                messages=[
                    f"Your browser timezone ({client_label}) differs from your "
                    f"profile timezone ({account_label}). You can ignore this "
                    "conflict or adjust your profile setting to match your client."
                ],
                options=options,
                client_offset=client_label,
                account_offset=account_label,
            )
