"""Mock providers for testing."""

from .image_search import MockImageSearchProvider
from .oauth import MOCK_PROFILES, MockOAuthProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MOCK_PROFILES",
    "MockImageSearchProvider",
    "MockOAuthProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
