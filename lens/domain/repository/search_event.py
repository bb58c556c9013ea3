"""Search event log interface."""

from abc import ABC, abstractmethod

from lens.domain.model.search_event import SearchEvent
from lens.domain.value import HistoryEntry, IdentityId, TopSearch


class SearchEventRepository(ABC):
    """Append-only log of search events.

    There is no update or delete. Aggregates are computed on read.
    """

    @abstractmethod
    async def append(self, event: SearchEvent) -> SearchEvent:
        """Append an event to the log.

        Args:
            event: The event to append

        Returns:
            The appended event

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass

    @abstractmethod
    async def top_terms(self, limit: int) -> list[TopSearch]:
        """Count events per term across all identities.

        Ordered by count descending, then term ascending.

        Args:
            limit: Maximum number of terms to return

        Returns:
            Up to ``limit`` term counts
        """
        pass

    @abstractmethod
    async def find_recent_by_identity(
        self, identity_id: IdentityId, limit: int
    ) -> list[HistoryEntry]:
        """Get the latest events of one identity, newest first.

        Newest means most recently recorded, so a clock step between two
        appends does not reorder them.

        Args:
            identity_id: Owning identity
            limit: Maximum number of entries to return

        Returns:
            Up to ``limit`` history entries
        """
        pass
