"""Local account aggregate root.

Accounts are created through OAuth registration and may be linked to one
identity per OAuth provider.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from atrium.domain.model.common import DomainModel
from atrium.domain.value import AccountId, ProfileImageId, Username


class LocalAccount(DomainModel):
    """Local account - provider-agnostic.

    Username and email are unique across all accounts; the store enforces it.
    """

    id: AccountId
    username: Username
    email: str
    display_name: str
    profile_image_id: Optional[ProfileImageId] = None
    timezone_identifier: Optional[str] = None  # None means the server default
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
