"""Search event log implementation using PostgreSQL.

Each operation runs in its own short transaction, independent of the
request transaction, so an append is durable as soon as it returns and a
failed request does not roll it back.
"""

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lens.domain.model.search_event import SearchEvent
from lens.domain.repository.search_event import SearchEventRepository
from lens.domain.value import HistoryEntry, IdentityId, TopSearch
from lens.persistence.database import store_errors
from lens.persistence.mappers import search_event_to_dict
from lens.persistence.tables import search_events_table


class PostgresSearchEventRepository(SearchEventRepository):
    """PostgreSQL implementation of SearchEventRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory for per-operation sessions
        """
        self.session_factory = session_factory

    async def append(self, event: SearchEvent) -> SearchEvent:
        """Insert one event and commit."""
        stmt = insert(search_events_table).values(**search_event_to_dict(event))
        with store_errors("search event log"):
            async with self.session_factory() as session, session.begin():
                await session.execute(stmt)
        return event

    async def top_terms(self, limit: int) -> list[TopSearch]:
        """Count events per term, most frequent first, ties by term."""
        count = func.count().label("count")
        stmt = (
            select(search_events_table.c.term, count)
            .group_by(search_events_table.c.term)
            # "C" collation orders by code point, independent of the DB locale
            .order_by(count.desc(), search_events_table.c.term.collate("C").asc())
            .limit(limit)
        )
        with store_errors("search event log"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()

        return [TopSearch(term=row.term, count=row.count) for row in rows]

    async def find_recent_by_identity(
        self, identity_id: IdentityId, limit: int
    ) -> list[HistoryEntry]:
        """Latest events of one identity, most recently recorded first."""
        stmt = (
            select(search_events_table.c.term, search_events_table.c.timestamp)
            .where(search_events_table.c.identity_id == identity_id)
            .order_by(search_events_table.c.seq.desc())
            .limit(limit)
        )
        with store_errors("search event log"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()

        return [HistoryEntry(term=row.term, timestamp=row.timestamp) for row in rows]
