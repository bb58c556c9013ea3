"""In-memory session store for testing."""

from datetime import datetime
from typing import Optional

from lens.domain.model.session import SessionRecord
from lens.domain.repository.session import SessionRepository


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self) -> None:
        self._sessions: dict[str, SessionRecord] = {}
        self.touch_count = 0

    async def save(self, record: SessionRecord) -> SessionRecord:
        """Store session record."""
        self._sessions[record.id] = record
        return record

    async def find_by_id(self, session_id: str) -> Optional[SessionRecord]:
        """Find session record by id."""
        return self._sessions.get(session_id)

    async def touch(self, session_id: str, touched_at: datetime) -> None:
        """Update last_touched_at."""
        record = self._sessions.get(session_id)
        if record is None:
            return
        self._sessions[session_id] = record.model_copy(
            update={"last_touched_at": touched_at}
        )
        self.touch_count += 1

    async def delete(self, session_id: str) -> None:
        """Delete session record."""
        self._sessions.pop(session_id, None)

    async def delete_expired(self, now: datetime) -> int:
        """Delete expired session records."""
        expired = [sid for sid, r in self._sessions.items() if r.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def count(self) -> int:
        """Number of stored sessions."""
        return len(self._sessions)
