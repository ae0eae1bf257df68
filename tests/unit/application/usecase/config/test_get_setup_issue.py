"""Unit tests for the setup issue use cases."""

import pytest

from atrium.application.usecase.config import (
    GetSetupIssueUseCase,
    ListSetupIssuesUseCase,
)
from atrium.application.usecase.config.get_setup_issue import GetSetupIssueRequest
from atrium.domain.error import FatalSetupIssuesError
from atrium.domain.model import SetupIssue
from atrium.domain.service import SetupEngine, SetupIssueService


class StaticSetupEngine(SetupEngine):
    def __init__(self, *issues: SetupIssue):
        self.issues = list(issues)

    def collect_issues(self) -> list[SetupIssue]:
        return self.issues


NO_PROVIDERS = SetupIssue(
    key="auth.no-providers",
    name="No Login Providers Enabled",
    short_name="No Providers",
    summary="Nobody can log in or register.",
    message="Enable at least one provider.",
)


def service(*issues: SetupIssue) -> SetupIssueService:
    return SetupIssueService(StaticSetupEngine(*issues))


class TestGetSetupIssueUseCase:
    @pytest.mark.asyncio
    async def test_open_issue(self):
        use_case = GetSetupIssueUseCase(service(NO_PROVIDERS))

        response = await use_case.execute(
            GetSetupIssueRequest(key="auth.no-providers")
        )

        assert response.resolved is False
        assert response.title == "No Providers"
        assert response.issue == NO_PROVIDERS

    @pytest.mark.asyncio
    async def test_missing_key_is_resolved(self):
        use_case = GetSetupIssueUseCase(service())

        response = await use_case.execute(
            GetSetupIssueRequest(key="auth.no-providers")
        )

        assert response.resolved is True
        assert response.title == "Resolved Issue"
        assert response.message == "This setup issue has been resolved."
        assert response.issue_list_path == "/config/issue/"
        assert response.issue is None

    @pytest.mark.asyncio
    async def test_fatal_issues_propagate(self):
        fatal = NO_PROVIDERS.model_copy(update={"is_fatal": True})
        use_case = GetSetupIssueUseCase(service(fatal))

        with pytest.raises(FatalSetupIssuesError):
            await use_case.execute(GetSetupIssueRequest(key="anything"))


class TestListSetupIssuesUseCase:
    @pytest.mark.asyncio
    async def test_lists_open_issues(self):
        use_case = ListSetupIssuesUseCase(service(NO_PROVIDERS))

        response = await use_case.execute()

        assert [issue.key for issue in response.issues] == ["auth.no-providers"]
