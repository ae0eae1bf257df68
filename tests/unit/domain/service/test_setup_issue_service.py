"""Unit tests for SetupIssueService."""

import pytest

from atrium.domain.error import FatalSetupIssuesError
from atrium.domain.model import SetupIssue
from atrium.domain.service import SetupEngine, SetupIssueService


class StaticSetupEngine(SetupEngine):
    def __init__(self, issues: list[SetupIssue]):
        self.issues = issues

    def collect_issues(self) -> list[SetupIssue]:
        return list(self.issues)


def make_issue(key: str, is_fatal: bool = False) -> SetupIssue:
    return SetupIssue(
        key=key,
        name=f"Issue {key}",
        short_name=key,
        summary="Something is misconfigured.",
        message="Fix the configuration.",
        is_fatal=is_fatal,
    )


def test_issues_are_keyed_by_issue_key():
    service = SetupIssueService(
        StaticSetupEngine(
            [make_issue("auth.no-providers"), make_issue("timezone.default")]
        )
    )

    issues = service.get_issues()

    assert list(issues) == ["auth.no-providers", "timezone.default"]
    assert issues["timezone.default"].short_name == "timezone.default"


def test_no_issues():
    assert SetupIssueService(StaticSetupEngine([])).get_issues() == {}


def test_fatal_issue_raises_with_every_fatal_key():
    service = SetupIssueService(
        StaticSetupEngine(
            [
                make_issue("auth.jwt-secret", is_fatal=True),
                make_issue("auth.no-providers"),
                make_issue("storage.missing", is_fatal=True),
            ]
        )
    )

    with pytest.raises(FatalSetupIssuesError) as exc_info:
        service.get_issues()

    assert exc_info.value.issue_keys == ["auth.jwt-secret", "storage.missing"]
