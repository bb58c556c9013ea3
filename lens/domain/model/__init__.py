"""Domain model entities for Lens."""

from lens.domain.model.identity import Identity
from lens.domain.model.search_event import SearchEvent
from lens.domain.model.session import SessionRecord

__all__ = [
    "Identity",
    "SearchEvent",
    "SessionRecord",
]
