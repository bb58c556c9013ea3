"""Unit tests for AuthService."""

import pytest

from lens.adapter.oauth import MockOAuthClient
from lens.domain.error import UnsupportedProviderError
from lens.domain.service import AuthService
from lens.domain.value import AuthProvider


class TestAuthService:
    """Tests for AuthService."""

    @pytest.mark.asyncio
    async def test_dispatches_to_provider_client(self):
        """Should use the client registered for the provider."""
        service = AuthService(
            oauth_clients={
                AuthProvider.GOOGLE: MockOAuthClient(AuthProvider.GOOGLE, {"sub": "g"}),
                AuthProvider.GITHUB: MockOAuthClient(AuthProvider.GITHUB, {"id": 1}),
            }
        )

        url = await service.initiate_login(AuthProvider.GITHUB, "state-1")
        profile = await service.complete_login(AuthProvider.GOOGLE, "code")

        assert url.startswith("https://github.example.com/authorize")
        assert profile == {"sub": "g"}

    @pytest.mark.asyncio
    async def test_unconfigured_provider(self):
        """Should raise for a provider without a client."""
        service = AuthService(oauth_clients={})

        with pytest.raises(UnsupportedProviderError):
            await service.initiate_login(AuthProvider.FACEBOOK, "state-1")
