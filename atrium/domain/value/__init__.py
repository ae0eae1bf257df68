"""Domain value objects for atrium."""

from atrium.domain.value.identifiers import (
    AccountId,
    LinkedAccountId,
    ProfileImageId,
)
from atrium.domain.value.types import (
    AuthContext,
    ExternalIdentity,
    LoginExisting,
    NeedsRegistration,
    OAuthProviderKey,
    RegistrationFields,
    RegistrationSuggestion,
    ResolutionOutcome,
    Username,
    is_valid_username,
)

__all__ = [
    # Identifiers
    "AccountId",
    "LinkedAccountId",
    "ProfileImageId",
    # Types
    "AuthContext",
    "ExternalIdentity",
    "LoginExisting",
    "NeedsRegistration",
    "OAuthProviderKey",
    "RegistrationFields",
    "RegistrationSuggestion",
    "ResolutionOutcome",
    "Username",
    "is_valid_username",
]
