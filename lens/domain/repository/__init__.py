"""Repository interfaces for the Lens domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from lens.domain.repository.identity import IdentityRepository
from lens.domain.repository.search_event import SearchEventRepository
from lens.domain.repository.session import SessionRepository

__all__ = [
    "IdentityRepository",
    "SearchEventRepository",
    "SessionRepository",
]
