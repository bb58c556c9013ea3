"""Identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lens.domain.model.identity import Identity
from lens.domain.value import AuthProvider, IdentityId


class IdentityRepository(ABC):
    """Repository for Identity entity.

    Implementations must enforce uniqueness of (provider, provider_id)
    atomically in ``add``; a find followed by an insert is not enough.
    """

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_provider(
        self, provider: AuthProvider, provider_id: str
    ) -> Optional[Identity]:
        """Find an identity by provider and provider-assigned ID.

        Args:
            provider: The authentication provider
            provider_id: The user's ID on that provider

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, identity: Identity) -> Identity:
        """Insert a new identity unless its (provider, provider_id) exists.

        Args:
            identity: The identity to insert

        Returns:
            The inserted identity

        Raises:
            DuplicateIdentityError: If the (provider, provider_id) pair is taken
            StoreUnavailableError: If the store cannot be reached
        """
        pass
