"""Setup issue routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from atrium.application.usecase.config import (
    GetSetupIssueUseCase,
    ListSetupIssuesUseCase,
)
from atrium.application.usecase.config.get_setup_issue import (
    GetSetupIssueRequest,
    GetSetupIssueResponse,
    ListSetupIssuesResponse,
)
from atrium.domain.error import FatalSetupIssuesError
from atrium.domain.service import SessionService
from atrium.interface.api.session import require_account_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/config", tags=["config"], route_class=DishkaRoute)


def _fatal_issues(e: FatalSetupIssuesError) -> HTTPException:
    logger.error(f"Fatal setup issues: {e.issue_keys}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": str(e), "issues": e.issue_keys},
    )


@router.get("/issue/", response_model=ListSetupIssuesResponse)
async def list_setup_issues(
    list_setup_issues_use_case: FromDishka[ListSetupIssuesUseCase],
    session_service: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> ListSetupIssuesResponse:
    """List open setup issues."""
    require_account_id(session_service, auth_token)

    try:
        return await list_setup_issues_use_case.execute()
    except FatalSetupIssuesError as e:
        raise _fatal_issues(e)


@router.get("/issue/{key}", response_model=GetSetupIssueResponse)
async def get_setup_issue(
    key: str,
    get_setup_issue_use_case: FromDishka[GetSetupIssueUseCase],
    session_service: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> GetSetupIssueResponse:
    """Show one setup issue.

    Keys that are no longer reported answer with a resolved notice and a
    link back to the issue list.

    Example:
        GET /config/issue/auth.no-providers
    """
    require_account_id(session_service, auth_token)

    try:
        return await get_setup_issue_use_case.execute(GetSetupIssueRequest(key=key))
    except FatalSetupIssuesError as e:
        raise _fatal_issues(e)
