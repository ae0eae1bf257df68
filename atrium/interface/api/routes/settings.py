"""Account settings routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from atrium.application.usecase.settings import ReconcileTimezoneUseCase
from atrium.application.usecase.settings.reconcile_timezone import (
    ReconcileTimezoneRequest,
    ReconcileTimezoneResponse,
)
from atrium.domain.error import NotFoundError
from atrium.domain.service import SessionService
from atrium.domain.value import AccountId
from atrium.interface.api.session import require_account_id

router = APIRouter(prefix="/settings", tags=["settings"], route_class=DishkaRoute)


class TimezoneChoiceRequest(BaseModel):
    """Timezone dialog submission: "ignore" or a timezone identifier."""

    timezone: str | None = None


async def _reconcile(
    use_case: ReconcileTimezoneUseCase,
    account_id: str,
    offset: int,
    choice: TimezoneChoiceRequest | None,
) -> ReconcileTimezoneResponse:
    try:
        return await use_case.execute(
            ReconcileTimezoneRequest(
                account_id=AccountId(UUID(account_id)),
                client_offset=offset,
                submitted=choice is not None,
                timezone=choice.timezone if choice else None,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/timezone/{offset}", response_model=ReconcileTimezoneResponse)
async def get_timezone_dialog(
    offset: int,
    reconcile_timezone_use_case: FromDishka[ReconcileTimezoneUseCase],
    session_service: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> ReconcileTimezoneResponse:
    """Compare the browser offset with the profile timezone.

    ``offset`` is the browser's ``Date.getTimezoneOffset()``: minutes,
    positive west of UTC.

    Example:
        GET /settings/timezone/300

        Response:
        {
            "kind": "adjust",
            "title": "Adjust Timezone",
            "options": {"ignore": "Ignore Conflict", "America/Chicago": ...},
            "client_offset": "GMT-5",
            "account_offset": "GMT-0",
            ...
        }
    """
    account_id = require_account_id(session_service, auth_token)
    return await _reconcile(reconcile_timezone_use_case, account_id, offset, None)


@router.post("/timezone/{offset}", response_model=ReconcileTimezoneResponse)
async def submit_timezone_dialog(
    offset: int,
    choice: TimezoneChoiceRequest,
    reconcile_timezone_use_case: FromDishka[ReconcileTimezoneUseCase],
    session_service: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> ReconcileTimezoneResponse:
    """Ignore the conflict for this offset or adopt a matching timezone."""
    account_id = require_account_id(session_service, auth_token)
    return await _reconcile(reconcile_timezone_use_case, account_id, offset, choice)
