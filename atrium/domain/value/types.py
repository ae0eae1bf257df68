"""Domain value objects for atrium.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum
from typing import Literal, Union

from pydantic import Field, field_validator

from atrium.domain.value.common import RootValueObject, ValueObject
from atrium.domain.value.identifiers import AccountId

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9]+")


class OAuthProviderKey(str, Enum):
    """Supported OAuth providers."""

    GITHUB = "github"
    FACEBOOK = "facebook"

    @property
    def display_name(self) -> str:
        """Human-readable provider name."""
        return {
            OAuthProviderKey.GITHUB: "GitHub",
            OAuthProviderKey.FACEBOOK: "Facebook",
        }[self]


def is_valid_username(value: str) -> bool:
    """Usernames may only contain letters and numbers."""
    return bool(USERNAME_PATTERN.fullmatch(value))


class Username(RootValueObject[str]):
    """Local account username (letters and numbers only)."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not is_valid_username(v):
            raise ValueError("Username may only contain letters and numbers.")
        return v


class ExternalIdentity(ValueObject):
    """Verified identity returned by an OAuth provider.

    Built once per login attempt from the provider's user-info payload.
    """

    provider: OAuthProviderKey
    external_user_id: str
    email: str | None = None
    display_name: str | None = None
    username_hint: str | None = None
    profile_image: bytes | None = None


class RegistrationFields(ValueObject):
    """Fields submitted on the registration form."""

    username: str = ""
    email: str = ""
    realname: str = ""


class RegistrationSuggestion(ValueObject):
    """Prefilled registration values derived from the provider identity.

    Email and display name supplied by the provider are authoritative and
    not editable by the user.
    """

    username: str | None = None
    email: str | None = None
    display_name: str | None = None

    @property
    def email_editable(self) -> bool:
        """Whether the user has to provide an email."""
        return self.email is None

    @property
    def display_name_editable(self) -> bool:
        """Whether the user has to provide a real name."""
        return self.display_name is None


class LoginExisting(ValueObject):
    """Identity resolved to an existing local account."""

    kind: Literal["login_existing"] = "login_existing"
    account_id: AccountId
    linked: bool = False  # True when the link was created by this resolution


class NeedsRegistration(ValueObject):
    """No local account matched; registration fields must be collected."""

    kind: Literal["needs_registration"] = "needs_registration"
    suggestion: RegistrationSuggestion


ResolutionOutcome = Union[LoginExisting, NeedsRegistration]


class AuthContext(ValueObject):
    """Explicit request context for an OAuth login attempt."""

    viewer_id: AccountId | None = None
    access_token: str
    user_info: dict = Field(default_factory=dict)
