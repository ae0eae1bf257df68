"""Strongly typed identifiers for atrium domain entities."""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
LinkedAccountId = NewType("LinkedAccountId", UUID)
ProfileImageId = NewType("ProfileImageId", UUID)
