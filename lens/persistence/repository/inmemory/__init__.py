"""In-memory repository implementations for testing."""

from .identity import InMemoryIdentityRepository
from .search_event import InMemorySearchEventRepository
from .session import InMemorySessionRepository

__all__ = [
    "InMemoryIdentityRepository",
    "InMemorySearchEventRepository",
    "InMemorySessionRepository",
]
