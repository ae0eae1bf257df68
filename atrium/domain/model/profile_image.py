"""Stored profile image."""

from datetime import datetime

from pydantic import Field

from atrium.domain.model.common import DomainModel
from atrium.domain.value import ProfileImageId


class ProfileImage(DomainModel):
    """Profile image bytes fetched from a provider at registration time."""

    id: ProfileImageId
    name: str  # e.g. "github-profile.jpg"
    content: bytes
    created_at: datetime = Field(default_factory=datetime.now)
