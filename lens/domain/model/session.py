"""Session record.

Binds a server-side session id to an identity. Lives in the session store,
not in the durable business data.
"""

from datetime import datetime

from lens.domain.model.common import DomainModel
from lens.domain.value import IdentityId


class SessionRecord(DomainModel):
    """Server-side session binding."""

    id: str
    identity_id: IdentityId
    created_at: datetime
    expires_at: datetime  # Absolute; activity never extends it
    last_touched_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Whether the session is past its absolute expiry."""
        return now >= self.expires_at
