"""Linked account entity.

Durable association between an external OAuth identity and a local account.
"""

from datetime import datetime

from pydantic import Field

from atrium.domain.model.common import DomainModel
from atrium.domain.value import AccountId, LinkedAccountId, OAuthProviderKey


class LinkedAccount(DomainModel):
    """External identity linked to a local account.

    Unique on (provider, external_user_id) and on (account_id, provider).
    Never mutated once created.
    """

    id: LinkedAccountId
    account_id: AccountId
    provider: OAuthProviderKey
    external_user_id: str  # Permanent ID assigned by the provider
    created_at: datetime = Field(default_factory=datetime.now)
