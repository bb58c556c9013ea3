"""Unit tests for provider OAuth clients."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from lens.adapter.error import OAuthError
from lens.adapter.facebook import FacebookOAuthClient
from lens.adapter.github import GithubOAuthClient
from lens.adapter.google import GoogleOAuthClient
from lens.adapter.oauth import MockOAuthClient
from lens.config import OAuthProviderSettings
from lens.domain.value import AuthProvider

SETTINGS = OAuthProviderSettings(
    client_id="client-id",
    client_secret="client-secret",
    callback_url="http://localhost:8000/auth/google/callback",
)


class TestInitiateAuthorization:
    """Tests for building authorization URLs."""

    @pytest.mark.asyncio
    async def test_google_authorization_url(self):
        """Should carry client id, redirect uri, scope and state."""
        url = await GoogleOAuthClient(SETTINGS).initiate_authorization("state-1")

        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert parsed.netloc == "accounts.google.com"
        assert params["response_type"] == ["code"]
        assert params["client_id"] == ["client-id"]
        assert params["redirect_uri"] == ["http://localhost:8000/auth/google/callback"]
        assert params["scope"] == ["openid email profile"]
        assert params["state"] == ["state-1"]

    @pytest.mark.asyncio
    async def test_facebook_and_github_scopes(self):
        """Should request email access from Facebook and GitHub."""
        facebook_url = await FacebookOAuthClient(SETTINGS).initiate_authorization("s")
        github_url = await GithubOAuthClient(SETTINGS).initiate_authorization("s")

        assert parse_qs(urlparse(facebook_url).query)["scope"] == ["email"]
        assert parse_qs(urlparse(github_url).query)["scope"] == ["user:email"]


class TestCompleteAuthorization:
    """Tests for the code exchange and profile fetch."""

    @pytest.mark.asyncio
    async def test_google_exchanges_code_and_fetches_userinfo(self, mock_transport):
        """Should post the code and fetch userinfo with the bearer token."""

        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "oauth2.googleapis.com":
                body = parse_qs(request.content.decode())
                assert body["code"] == ["code-1"]
                assert body["grant_type"] == ["authorization_code"]
                return httpx.Response(200, json={"access_token": "token-1"})
            assert request.headers["Authorization"] == "Bearer token-1"
            return httpx.Response(200, json={"sub": "1098", "name": "Ada"})

        mock_transport(handler)

        # Act
        profile = await GoogleOAuthClient(SETTINGS).complete_authorization("code-1")

        # Assert
        assert profile == {"sub": "1098", "name": "Ada"}

    @pytest.mark.asyncio
    async def test_github_merges_emails_when_email_private(self, mock_transport):
        """Should add /user/emails to the profile when email is private."""
        emails = [{"email": "octocat@github.com", "primary": True, "verified": True}]

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "github.com":
                return httpx.Response(200, json={"access_token": "token-1"})
            if request.url.path == "/user/emails":
                return httpx.Response(200, json=emails)
            return httpx.Response(200, json={"id": 1, "login": "octocat", "email": None})

        mock_transport(handler)

        profile = await GithubOAuthClient(SETTINGS).complete_authorization("code-1")

        assert profile["emails"] == emails

    @pytest.mark.asyncio
    async def test_github_error_with_200_status(self, mock_transport):
        """Should fail when GitHub reports a bad code in a 200 response."""
        mock_transport(
            lambda request: httpx.Response(
                200, json={"error": "bad_verification_code"}
            ),
        )

        with pytest.raises(OAuthError) as exc_info:
            await GithubOAuthClient(SETTINGS).complete_authorization("stale")

        assert "bad_verification_code" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_token_endpoint_failure(self, mock_transport):
        """Should raise OAuthError when the token exchange is refused."""
        mock_transport(lambda request: httpx.Response(400, text="nope"))

        with pytest.raises(OAuthError):
            await FacebookOAuthClient(SETTINGS).complete_authorization("code-1")

    @pytest.mark.asyncio
    async def test_profile_endpoint_failure(self, mock_transport):
        """Should raise OAuthError when the profile cannot be read."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                return httpx.Response(200, json={"access_token": "token-1"})
            return httpx.Response(500, text="boom")

        mock_transport(handler)

        with pytest.raises(OAuthError):
            await GoogleOAuthClient(SETTINGS).complete_authorization("code-1")


class TestMockOAuthClient:
    """Tests for MockOAuthClient."""

    @pytest.mark.asyncio
    async def test_returns_copy_of_profile(self):
        """Should return the canned profile."""
        client = MockOAuthClient(AuthProvider.GOOGLE, {"sub": "1", "name": "Ada"})

        assert await client.complete_authorization("any") == {"sub": "1", "name": "Ada"}
        assert "state=xyz" in await client.initiate_authorization("xyz")

    @pytest.mark.asyncio
    async def test_fail_code_is_rejected(self):
        """Should raise OAuthError for the code 'fail'."""
        client = MockOAuthClient(AuthProvider.GOOGLE, {})

        with pytest.raises(OAuthError):
            await client.complete_authorization("fail")
