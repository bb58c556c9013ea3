"""In-memory identity repository for testing."""

import asyncio
from typing import Optional

from lens.domain.error import DuplicateIdentityError
from lens.domain.model.identity import Identity
from lens.domain.repository.identity import IdentityRepository
from lens.domain.value import AuthProvider, IdentityId


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing.

    Reads yield to the event loop like a real driver would, so concurrent
    callers interleave between their find and their add.
    """

    def __init__(self) -> None:
        self._identities: dict[tuple[AuthProvider, str], Identity] = {}

    async def add(self, identity: Identity) -> Identity:
        """Insert identity; check and insert happen without yielding."""
        key = (identity.provider, identity.provider_id)
        if key in self._identities:
            raise DuplicateIdentityError(identity.provider.value, identity.provider_id)
        self._identities[key] = identity
        return identity

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find identity by ID."""
        await asyncio.sleep(0)
        for identity in self._identities.values():
            if identity.id == identity_id:
                return identity
        return None

    async def find_by_provider(
        self, provider: AuthProvider, provider_id: str
    ) -> Optional[Identity]:
        """Find identity by provider and provider-assigned ID."""
        await asyncio.sleep(0)
        return self._identities.get((provider, provider_id))

    def count(self) -> int:
        """Number of stored identities."""
        return len(self._identities)
