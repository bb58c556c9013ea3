"""Authentication domain service."""

from typing import Any

from lens.domain.error import UnsupportedProviderError
from lens.domain.value.types import AuthProvider

from .base import Service


class OAuthClient:
    """Generic OAuth client interface for all providers."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str) -> dict[str, Any]:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback

        Returns:
            Raw profile payload in the provider's own shape
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for multi-provider OAuth round trips.

    Coordinates the redirect and code exchange across Google, Facebook
    and GitHub. Turning the resulting profile into an identity is the
    federation service's job.
    """

    def __init__(self, oauth_clients: dict[AuthProvider, OAuthClient]) -> None:
        """Initialize auth service.

        Args:
            oauth_clients: Map of provider to OAuth client implementation
        """
        self.oauth_clients = oauth_clients

    def _client_for(self, provider: AuthProvider) -> OAuthClient:
        client = self.oauth_clients.get(provider)
        if not client:
            raise UnsupportedProviderError(provider.value)
        return client

    async def initiate_login(self, provider: AuthProvider, state: str) -> str:
        """Initiate OAuth login flow for any provider.

        Args:
            provider: Authentication provider to use
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to

        Raises:
            UnsupportedProviderError: If provider not configured
        """
        return await self._client_for(provider).initiate_authorization(state)

    async def complete_login(
        self, provider: AuthProvider, code: str
    ) -> dict[str, Any]:
        """Complete OAuth login flow for any provider.

        Args:
            provider: Authentication provider used
            code: Authorization code from OAuth callback

        Returns:
            Raw profile payload from the provider

        Raises:
            UnsupportedProviderError: If provider not configured
        """
        return await self._client_for(provider).complete_authorization(code)
