"""Identity repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lens.domain.error import DuplicateIdentityError
from lens.domain.model.identity import Identity
from lens.domain.repository.identity import IdentityRepository
from lens.domain.value import AuthProvider, IdentityId
from lens.persistence.database import store_errors
from lens.persistence.mappers import identity_to_dict, row_to_identity
from lens.persistence.tables import identities_table


class PostgresIdentityRepository(IdentityRepository):
    """PostgreSQL implementation of IdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, identity: Identity) -> Identity:
        """Insert identity unless (provider, provider_id) already exists.

        Uses ON CONFLICT DO NOTHING so a concurrent insert of the same pair
        waits for the other transaction and then inserts nothing.

        Args:
            identity: Identity to insert

        Returns:
            Inserted identity

        Raises:
            DuplicateIdentityError: If the pair is already taken
        """
        stmt = (
            insert(identities_table)
            .values(**identity_to_dict(identity))
            .on_conflict_do_nothing(index_elements=["provider", "provider_id"])
            .returning(identities_table.c.id)
        )
        with store_errors("identity store"):
            result = await self.session.execute(stmt)
            inserted = result.first()
            await self.session.flush()

        if inserted is None:
            raise DuplicateIdentityError(identity.provider.value, identity.provider_id)
        return identity

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Get identity by ID.

        Args:
            identity_id: Identity ID to look up

        Returns:
            Identity if found, None otherwise
        """
        stmt = select(identities_table).where(identities_table.c.id == identity_id)
        with store_errors("identity store"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        if not row:
            return None

        return row_to_identity(dict(row))

    async def find_by_provider(
        self, provider: AuthProvider, provider_id: str
    ) -> Optional[Identity]:
        """Get identity by provider and provider-assigned ID.

        Args:
            provider: Authentication provider
            provider_id: Provider-specific user ID

        Returns:
            Identity if found, None otherwise
        """
        stmt = select(identities_table).where(
            identities_table.c.provider == provider.value,
            identities_table.c.provider_id == provider_id,
        )
        with store_errors("identity store"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        if not row:
            return None

        return row_to_identity(dict(row))
