"""Domain value objects for Lens."""

from lens.domain.value.identifiers import IdentityId, SearchEventId
from lens.domain.value.types import (
    AuthProvider,
    HistoryEntry,
    IdentityRequest,
    SearchTerm,
    TopSearch,
)

__all__ = [
    # Identifiers
    "IdentityId",
    "SearchEventId",
    # Types
    "AuthProvider",
    "HistoryEntry",
    "IdentityRequest",
    "SearchTerm",
    "TopSearch",
]
