"""OAuth 2.0 authorization-code client shared by all providers.

Providers differ only in endpoints, scopes and how the profile is fetched,
so each concrete client fills in those pieces.
"""

from typing import Any
from urllib.parse import urlencode

import httpx
import logfire

from lens.adapter.error import OAuthError
from lens.config import OAuthProviderSettings
from lens.domain.service.auth_service import OAuthClient
from lens.domain.value.types import AuthProvider

DEFAULT_TIMEOUT = 30.0


class OAuth2Client(OAuthClient):
    """Confidential OAuth 2.0 client (authorization code grant)."""

    provider: AuthProvider
    authorize_url: str
    token_url: str
    scope: str

    def __init__(
        self,
        settings: OAuthProviderSettings,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize OAuth client.

        Args:
            settings: Client credentials and callback URL for this provider
            timeout: Seconds allowed for each provider call
        """
        self.client_id = settings.client_id
        self.client_secret = settings.client_secret
        self.redirect_uri = settings.callback_url
        self.timeout = timeout

    def authorization_params(self, state: str) -> dict[str, str]:
        """Query parameters of the authorization redirect."""
        return {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "state": state,
        }

    async def initiate_authorization(self, state: str) -> str:
        """Build the provider authorization URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        auth_url = f"{self.authorize_url}?{urlencode(self.authorization_params(state))}"

        logfire.info(
            "OAuth authorization initiated",
            provider=self.provider.value,
            redirect_uri=self.redirect_uri,
        )

        return auth_url

    async def complete_authorization(self, code: str) -> dict[str, Any]:
        """Exchange the code and fetch the user's profile.

        Args:
            code: Authorization code from the provider callback

        Returns:
            Raw profile payload

        Raises:
            OAuthError: If any provider call fails
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            access_token = await self._exchange_code_for_token(client, code)
            profile = await self.fetch_profile(client, access_token)

        logfire.info(
            "OAuth completed",
            provider=self.provider.value,
            has_email=bool(profile.get("email")),
        )
        return profile

    async def fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> dict[str, Any]:
        """Fetch the profile payload with an access token."""
        raise NotImplementedError

    async def _exchange_code_for_token(
        self, client: httpx.AsyncClient, code: str
    ) -> str:
        """Exchange authorization code for access token.

        Raises:
            OAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            response = await client.post(
                self.token_url,
                data=data,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logfire.error(
                "Token exchange HTTP error", provider=self.provider.value, error=str(e)
            )
            raise OAuthError(f"HTTP error during token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Token exchange failed",
                provider=self.provider.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise OAuthError(f"Token exchange failed: {response.status_code}")

        result = response.json()
        access_token = result.get("access_token")
        if not access_token:
            # GitHub reports bad codes with 200 and an "error" field
            raise OAuthError(
                f"Token exchange failed: {result.get('error', 'no access token')}"
            )
        return access_token

    async def get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        access_token: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """GET a provider API resource with bearer auth.

        Raises:
            OAuthError: If the request fails
        """
        try:
            response = await client.get(
                url,
                params=params,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logfire.error(
                "Profile request HTTP error", provider=self.provider.value, error=str(e)
            )
            raise OAuthError(f"HTTP error fetching profile: {e}")

        if response.status_code != 200:
            logfire.error(
                "Profile request failed",
                provider=self.provider.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise OAuthError(f"Profile request failed: {response.status_code}")

        return response.json()


class MockOAuthClient(OAuthClient):
    """Mock OAuth client for testing.

    Returns a canned profile without making real API calls. The code
    ``"fail"`` simulates a rejected authorization.
    """

    def __init__(self, provider: AuthProvider, profile: dict[str, Any]) -> None:
        self.provider = provider
        self.profile = profile

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://{self.provider.value}.example.com/authorize?state={state}&mock=true"

    async def complete_authorization(self, code: str) -> dict[str, Any]:
        """Return the canned profile."""
        if code == "fail":
            raise OAuthError("Mock authorization rejected")
        return dict(self.profile)
