"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from atrium.domain.model import (
    AccountPreferences,
    LinkedAccount,
    LocalAccount,
    ProfileImage,
)
from atrium.domain.value import (
    AccountId,
    LinkedAccountId,
    OAuthProviderKey,
    ProfileImageId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> LocalAccount:
    """Convert database row to LocalAccount domain model.

    Args:
        row: Database row as dict

    Returns:
        LocalAccount domain model
    """
    profile_image_id = row.get("profile_image_id")
    return LocalAccount(
        id=AccountId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        display_name=row["display_name"],
        profile_image_id=(
            ProfileImageId(_uuid(profile_image_id)) if profile_image_id else None
        ),
        timezone_identifier=row.get("timezone_identifier"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: LocalAccount) -> Dict[str, Any]:
    """Convert LocalAccount domain model to database dict.

    Args:
        account: LocalAccount domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = account.model_dump()
    data["username"] = account.username.root
    return data


def row_to_linked_account(row: Dict[str, Any]) -> LinkedAccount:
    """Convert database row to LinkedAccount domain model."""
    return LinkedAccount(
        id=LinkedAccountId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        provider=OAuthProviderKey(row["provider"]),
        external_user_id=row["external_user_id"],
        created_at=row["created_at"],
    )


def linked_account_to_dict(linked_account: LinkedAccount) -> Dict[str, Any]:
    """Convert LinkedAccount domain model to database dict."""
    data = linked_account.model_dump()
    data["provider"] = linked_account.provider.value
    return data


def profile_image_to_dict(profile_image: ProfileImage) -> Dict[str, Any]:
    """Convert ProfileImage domain model to database dict."""
    return profile_image.model_dump()


def row_to_preferences(row: Dict[str, Any]) -> AccountPreferences:
    """Convert database row to AccountPreferences domain model."""
    return AccountPreferences(
        account_id=AccountId(_uuid(row["account_id"])),
        ignore_timezone_offset=row.get("ignore_timezone_offset"),
        updated_at=row["updated_at"],
    )


def preferences_to_dict(preferences: AccountPreferences) -> Dict[str, Any]:
    """Convert AccountPreferences domain model to database dict."""
    return preferences.model_dump()
