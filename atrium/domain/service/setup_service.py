"""Setup issue domain service."""

import logfire

from atrium.domain.error import FatalSetupIssuesError
from atrium.domain.model import SetupIssue

from .base import Service


class SetupEngine:
    """Setup diagnostics port.

    Implementations inspect configuration and environment and report every
    problem found as a SetupIssue.
    """

    def collect_issues(self) -> list[SetupIssue]:
        """Run all checks and return the issues found."""
        raise NotImplementedError


class SetupIssueService(Service):
    """Runs the setup engine and exposes its issues by key."""

    def __init__(self, setup_engine: SetupEngine) -> None:
        self.setup_engine = setup_engine

    def get_issues(self) -> dict[str, SetupIssue]:
        """Collect open setup issues keyed by issue key.

        Raises:
            FatalSetupIssuesError: If any collected issue is fatal
        """
        with logfire.span("setup_issue_service.get_issues"):
            issues = {issue.key: issue for issue in self.setup_engine.collect_issues()}

            fatal = [key for key, issue in issues.items() if issue.is_fatal]
            if fatal:
                logfire.error("Fatal setup issues found", issue_keys=fatal)
                raise FatalSetupIssuesError(fatal)

            logfire.info("Setup issues collected", count=len(issues))
            return issues
