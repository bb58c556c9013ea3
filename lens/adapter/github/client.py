"""GitHub OAuth app client."""

from typing import Any

import httpx
import logfire

from lens.adapter.error import OAuthError
from lens.adapter.oauth import OAuth2Client
from lens.domain.value.types import AuthProvider


class GithubOAuthClient(OAuth2Client):
    """GitHub sign-in returning ``/user`` with ``/user/emails`` merged in."""

    provider = AuthProvider.GITHUB
    authorize_url = "https://github.com/login/oauth/authorize"
    token_url = "https://github.com/login/oauth/access_token"
    user_url = "https://api.github.com/user"
    emails_url = "https://api.github.com/user/emails"
    scope = "user:email"

    async def fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> dict[str, Any]:
        profile = await self.get_json(client, self.user_url, access_token)

        # /user only shows the public email; private ones need /user/emails
        if not profile.get("email"):
            try:
                profile["emails"] = await self.get_json(
                    client, self.emails_url, access_token
                )
            except OAuthError as e:
                logfire.warn("GitHub email lookup failed", error=str(e))
                profile["emails"] = []

        return profile
