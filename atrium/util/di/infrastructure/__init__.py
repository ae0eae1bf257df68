"""Infrastructure providers."""

# Import bases
from .facebook import FacebookProvider
from .github import GitHubProvider
from .oauth import OAuthAggregatorProvider
from .persistence import PersistenceProvider
from .system import SystemProvider

# Import implementations (needed for __subclasses__())
from .facebook import ProdFacebookProvider  # noqa: F401
from .github import ProdGitHubProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "FacebookProvider",
    "GitHubProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdFacebookProvider",
    "ProdGitHubProvider",
    "ProdPersistenceProvider",
    "SystemProvider",
]
