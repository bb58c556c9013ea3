"""Session store implementation using PostgreSQL."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.model.session import SessionRecord
from lens.domain.repository.session import SessionRepository
from lens.persistence.database import store_errors
from lens.persistence.mappers import row_to_session, session_to_dict
from lens.persistence.tables import sessions_table


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, record: SessionRecord) -> SessionRecord:
        """Insert a session record."""
        stmt = insert(sessions_table).values(**session_to_dict(record))
        with store_errors("session store"):
            await self.session.execute(stmt)
            await self.session.flush()
        return record

    async def find_by_id(self, session_id: str) -> Optional[SessionRecord]:
        """Find a session record by id."""
        stmt = select(sessions_table).where(sessions_table.c.id == session_id)
        with store_errors("session store"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        if not row:
            return None

        return row_to_session(dict(row))

    async def touch(self, session_id: str, touched_at: datetime) -> None:
        """Update last_touched_at of a session."""
        stmt = (
            update(sessions_table)
            .where(sessions_table.c.id == session_id)
            .values(last_touched_at=touched_at)
        )
        with store_errors("session store"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def delete(self, session_id: str) -> None:
        """Delete a session record."""
        stmt = delete(sessions_table).where(sessions_table.c.id == session_id)
        with store_errors("session store"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def delete_expired(self, now: datetime) -> int:
        """Delete all sessions whose expiry has passed."""
        stmt = delete(sessions_table).where(sessions_table.c.expires_at <= now)
        with store_errors("session store"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
