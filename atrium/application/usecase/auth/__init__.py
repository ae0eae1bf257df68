"""Authentication use cases."""

from .get_current_user import GetCurrentUserUseCase
from .oauth_login import OAuthLoginUseCase

__all__ = ["OAuthLoginUseCase", "GetCurrentUserUseCase"]
