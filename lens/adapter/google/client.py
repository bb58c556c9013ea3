"""Google OAuth 2.0 / OpenID Connect client."""

from typing import Any

import httpx

from lens.adapter.oauth import OAuth2Client
from lens.domain.value.types import AuthProvider


class GoogleOAuthClient(OAuth2Client):
    """Google sign-in returning the OpenID Connect userinfo payload."""

    provider = AuthProvider.GOOGLE
    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    userinfo_url = "https://openidconnect.googleapis.com/v1/userinfo"
    scope = "openid email profile"

    async def fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> dict[str, Any]:
        return await self.get_json(client, self.userinfo_url, access_token)
