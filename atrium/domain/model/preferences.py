"""Per-account preferences."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from atrium.domain.model.common import DomainModel
from atrium.domain.value import AccountId


class AccountPreferences(DomainModel):
    """Account preferences.

    ``ignore_timezone_offset`` holds the browser offset (minutes, positive
    west of UTC) for which the timezone conflict prompt was dismissed.
    """

    account_id: AccountId
    ignore_timezone_offset: Optional[int] = None
    updated_at: datetime = Field(default_factory=datetime.now)
