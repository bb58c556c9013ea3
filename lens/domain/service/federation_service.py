"""Identity federation domain service."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from lens.domain.error import DuplicateIdentityError, NotFoundError
from lens.domain.model.identity import Identity
from lens.domain.repository.identity import IdentityRepository
from lens.domain.service.profile_adapter import ProviderAdapterRegistry
from lens.domain.value import AuthProvider, IdentityId, IdentityRequest

from .base import Service


class IdentityFederationService(Service):
    """Find-or-create of identities from provider profiles.

    Exactly one identity exists per (provider, provider_id). The first
    login's profile data is kept; later logins never update it.
    """

    def __init__(
        self,
        identity_repository: IdentityRepository,
        adapters: ProviderAdapterRegistry,
    ) -> None:
        """Initialize federation service.

        Args:
            identity_repository: Identity store
            adapters: Provider adapter registry
        """
        self.identity_repository = identity_repository
        self.adapters = adapters

    async def federate(
        self, provider: AuthProvider, profile: dict[str, Any]
    ) -> Identity:
        """Resolve the identity behind a provider profile payload.

        Args:
            provider: Provider that issued the profile
            profile: Raw provider payload

        Returns:
            The existing or newly created identity

        Raises:
            UnsupportedProviderError: If no adapter is registered
            ProfileIncompleteError: If the profile lacks mandatory fields
        """
        request = self.adapters.get(provider).to_identity_request(profile)
        return await self.resolve_identity(request)

    async def resolve_identity(self, request: IdentityRequest) -> Identity:
        """Find the identity for a request, creating it on first login.

        Concurrent first logins for the same pair race on ``add``; losers
        get DuplicateIdentityError and return the winner's record.

        Args:
            request: Canonical identity request

        Returns:
            The identity bound to (request.provider, request.provider_id)

        Raises:
            StoreUnavailableError: If the identity store cannot be reached
        """
        with logfire.span(
            "federation.resolve_identity",
            provider=request.provider.value,
            provider_id=request.provider_id,
        ):
            existing = await self.identity_repository.find_by_provider(
                request.provider, request.provider_id
            )
            if existing:
                logfire.info(
                    "Existing identity resolved",
                    identity_id=str(existing.id),
                    provider=request.provider.value,
                )
                return existing

            candidate = Identity(
                id=IdentityId(uuid4()),
                provider=request.provider,
                provider_id=request.provider_id,
                display_name=request.display_name,
                email=request.email,
                profile_photo=request.profile_photo,
                created_at=datetime.now(timezone.utc),
            )

            try:
                created = await self.identity_repository.add(candidate)
            except DuplicateIdentityError:
                winner = await self.identity_repository.find_by_provider(
                    request.provider, request.provider_id
                )
                if winner is None:
                    # Conflict reported but nothing readable; store is inconsistent
                    raise NotFoundError(
                        "Identity", f"{request.provider.value}:{request.provider_id}"
                    )
                logfire.info(
                    "Lost identity creation race, using existing record",
                    identity_id=str(winner.id),
                    provider=request.provider.value,
                )
                return winner

            logfire.info(
                "New identity created",
                identity_id=str(created.id),
                provider=request.provider.value,
                provider_id=request.provider_id,
            )
            return created

    async def get_identity(self, identity_id: IdentityId) -> Identity | None:
        """Get identity by ID.

        Args:
            identity_id: Identity ID

        Returns:
            Identity if found, None otherwise
        """
        with logfire.span(
            "federation.get_identity", identity_id=str(identity_id)
        ):
            identity = await self.identity_repository.find_by_id(identity_id)
            if identity is None:
                logfire.warn("Identity not found", identity_id=str(identity_id))
            return identity
