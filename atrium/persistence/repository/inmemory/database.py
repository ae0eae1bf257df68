"""Shared in-memory store backing the in-memory repositories."""

from atrium.domain.model import (
    AccountPreferences,
    LinkedAccount,
    LocalAccount,
    ProfileImage,
)
from atrium.domain.value import AccountId, LinkedAccountId, ProfileImageId


class InMemoryDatabase:
    """Tables kept as dicts, shared by every repository of a test container."""

    def __init__(self) -> None:
        self.accounts: dict[AccountId, LocalAccount] = {}
        self.linked_accounts: dict[LinkedAccountId, LinkedAccount] = {}
        self.profile_images: dict[ProfileImageId, ProfileImage] = {}
        self.preferences: dict[AccountId, AccountPreferences] = {}
