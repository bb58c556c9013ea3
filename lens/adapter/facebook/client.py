"""Facebook Login OAuth 2.0 client."""

from typing import Any

import httpx

from lens.adapter.oauth import OAuth2Client
from lens.domain.value.types import AuthProvider

GRAPH_VERSION = "v18.0"


class FacebookOAuthClient(OAuth2Client):
    """Facebook Login returning the Graph API ``/me`` payload."""

    provider = AuthProvider.FACEBOOK
    authorize_url = f"https://www.facebook.com/{GRAPH_VERSION}/dialog/oauth"
    token_url = f"https://graph.facebook.com/{GRAPH_VERSION}/oauth/access_token"
    me_url = f"https://graph.facebook.com/{GRAPH_VERSION}/me"
    scope = "email"

    async def fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> dict[str, Any]:
        return await self.get_json(
            client,
            self.me_url,
            access_token,
            params={"fields": "id,name,email,picture"},
        )
