"""Repository interfaces for atrium domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from atrium.domain.repository.account import AccountRepository
from atrium.domain.repository.linked_account import LinkedAccountRepository
from atrium.domain.repository.preferences import PreferencesRepository

__all__ = [
    "AccountRepository",
    "LinkedAccountRepository",
    "PreferencesRepository",
]
