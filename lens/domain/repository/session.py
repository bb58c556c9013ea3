"""Session store interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from lens.domain.model.session import SessionRecord


class SessionRepository(ABC):
    """Store for server-side session records."""

    @abstractmethod
    async def save(self, record: SessionRecord) -> SessionRecord:
        """Store a new session record."""
        pass

    @abstractmethod
    async def find_by_id(self, session_id: str) -> Optional[SessionRecord]:
        """Find a session record by its id."""
        pass

    @abstractmethod
    async def touch(self, session_id: str, touched_at: datetime) -> None:
        """Update the last-activity timestamp of a session."""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Remove a session record. Missing ids are ignored."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Remove all sessions past their expiry.

        Returns:
            Number of removed sessions
        """
        pass
