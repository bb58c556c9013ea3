"""In-memory search event log for testing."""

from collections import Counter

from lens.domain.model.search_event import SearchEvent
from lens.domain.repository.search_event import SearchEventRepository
from lens.domain.value import HistoryEntry, IdentityId, TopSearch


class InMemorySearchEventRepository(SearchEventRepository):
    """In-memory implementation of SearchEventRepository for testing."""

    def __init__(self) -> None:
        self._events: list[SearchEvent] = []

    @property
    def events(self) -> list[SearchEvent]:
        """Snapshot of all appended events, in append order."""
        return list(self._events)

    async def append(self, event: SearchEvent) -> SearchEvent:
        """Append event."""
        self._events.append(event)
        return event

    async def top_terms(self, limit: int) -> list[TopSearch]:
        """Count events per term, most frequent first, ties by term."""
        counts = Counter(event.term.root for event in self._events)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [TopSearch(term=term, count=count) for term, count in ranked[:limit]]

    async def find_recent_by_identity(
        self, identity_id: IdentityId, limit: int
    ) -> list[HistoryEntry]:
        """Latest events of one identity, in reverse append order."""
        mine = [e for e in reversed(self._events) if e.identity_id == identity_id]
        return [HistoryEntry(term=e.term.root, timestamp=e.timestamp) for e in mine[:limit]]
