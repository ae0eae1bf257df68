"""Domain model entities for atrium."""

from atrium.domain.model.account import LocalAccount
from atrium.domain.model.linked_account import LinkedAccount
from atrium.domain.model.preferences import AccountPreferences
from atrium.domain.model.profile_image import ProfileImage
from atrium.domain.model.setup_issue import SetupIssue

__all__ = [
    "LocalAccount",
    "LinkedAccount",
    "AccountPreferences",
    "ProfileImage",
    "SetupIssue",
]
