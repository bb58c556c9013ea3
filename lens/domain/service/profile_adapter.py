"""Provider profile adapters.

Each provider describes its users differently. An adapter maps one
provider's profile payload onto the single IdentityRequest shape; new
providers are added by adding adapters, not by branching on payload shape.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

from lens.domain.error import ProfileIncompleteError, UnsupportedProviderError
from lens.domain.value import AuthProvider, IdentityRequest


class ProviderAdapter(ABC):
    """Maps a provider profile payload to an IdentityRequest."""

    provider: AuthProvider

    @abstractmethod
    def to_identity_request(self, profile: dict[str, Any]) -> IdentityRequest:
        """Build the canonical identity request.

        Args:
            profile: Raw provider payload

        Returns:
            Identity request for the federation service

        Raises:
            ProfileIncompleteError: If no id or no usable display name
        """
        pass

    def _build(
        self,
        provider_id: Any,
        display_name: str | None,
        username: str | None,
        email: str | None,
        profile_photo: str | None,
    ) -> IdentityRequest:
        """Apply the rules shared by all providers.

        Display name falls back to the username; with neither, the profile
        cannot become an identity.
        """
        if provider_id is None or str(provider_id).strip() == "":
            raise ProfileIncompleteError(self.provider.value, "id")

        name = _clean(display_name) or _clean(username)
        if not name:
            raise ProfileIncompleteError(self.provider.value, "display name")

        return IdentityRequest(
            provider=self.provider,
            provider_id=str(provider_id),
            display_name=name,
            email=_clean(email),
            profile_photo=_clean(profile_photo),
        )


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProviderAdapterRegistry:
    """Adapters by provider, built once at startup."""

    def __init__(self, adapters: Iterable[ProviderAdapter]) -> None:
        self._adapters = {adapter.provider: adapter for adapter in adapters}

    def get(self, provider: AuthProvider) -> ProviderAdapter:
        """Look up the adapter for a provider.

        Raises:
            UnsupportedProviderError: If no adapter is registered
        """
        adapter = self._adapters.get(provider)
        if adapter is None:
            raise UnsupportedProviderError(provider.value)
        return adapter

    @property
    def providers(self) -> list[AuthProvider]:
        return list(self._adapters)
