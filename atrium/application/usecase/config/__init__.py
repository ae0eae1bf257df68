"""Setup configuration use cases."""

from .get_setup_issue import GetSetupIssueUseCase, ListSetupIssuesUseCase

__all__ = ["GetSetupIssueUseCase", "ListSetupIssuesUseCase"]
