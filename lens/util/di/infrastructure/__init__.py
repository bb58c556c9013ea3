"""Infrastructure providers."""

# Import bases
from .image_search import ImageSearchProvider
from .oauth import OAuthProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .image_search import ProdImageSearchProvider  # noqa: F401
from .oauth import ProdOAuthProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ImageSearchProvider",
    "OAuthProvider",
    "PersistenceProvider",
    "ProdImageSearchProvider",
    "ProdOAuthProvider",
    "ProdPersistenceProvider",
]
