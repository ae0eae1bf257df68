"""Setup issue use cases."""

from pydantic import BaseModel

from atrium.domain.model import SetupIssue
from atrium.domain.service import SetupIssueService

ISSUE_LIST_PATH = "/config/issue/"


class GetSetupIssueRequest(BaseModel):
    """Get setup issue request."""

    key: str


class GetSetupIssueResponse(BaseModel):
    """A single setup issue, or a notice that it has been resolved."""

    key: str
    title: str
    resolved: bool
    issue: SetupIssue | None = None
    message: str | None = None
    issue_list_path: str = ISSUE_LIST_PATH


class ListSetupIssuesResponse(BaseModel):
    """All open setup issues."""

    issues: list[SetupIssue]


class GetSetupIssueUseCase:
    """Use case for viewing one setup issue."""

    def __init__(self, setup_issue_service: SetupIssueService) -> None:
        self.setup_issue_service = setup_issue_service

    async def execute(self, request: GetSetupIssueRequest) -> GetSetupIssueResponse:
        """Look up an open issue by key.

        Raises:
            FatalSetupIssuesError: If the setup engine reports fatal issues
        """
        issues = self.setup_issue_service.get_issues()

        issue = issues.get(request.key)
        if issue is None:
            return GetSetupIssueResponse(
                key=request.key,
                title="Resolved Issue",
                resolved=True,
                message="This setup issue has been resolved.",
            )

        return GetSetupIssueResponse(
            key=issue.key,
            title=issue.short_name,
            resolved=False,
            issue=issue,
        )


class ListSetupIssuesUseCase:
    """Use case for listing open setup issues."""

    def __init__(self, setup_issue_service: SetupIssueService) -> None:
        self.setup_issue_service = setup_issue_service

    async def execute(self) -> ListSetupIssuesResponse:
        """List open issues.

        Raises:
            FatalSetupIssuesError: If the setup engine reports fatal issues
        """
        issues = self.setup_issue_service.get_issues()
        return ListSetupIssuesResponse(issues=list(issues.values()))
