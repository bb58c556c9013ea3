"""OAuth infrastructure providers for multi-provider authentication."""

from dishka import Scope, provide

from lens.adapter.facebook import FacebookOAuthClient
from lens.adapter.github import GithubOAuthClient
from lens.adapter.google import GoogleOAuthClient
from lens.config import Settings
from lens.domain.service.auth_service import OAuthClient
from lens.domain.value import AuthProvider
from lens.util.di.base import ProviderBase
from lens.util.error import ConfigurationError


class OAuthProvider(ProviderBase):
    """OAuth component base."""

    __mock_component__ = "oauth"


class ProdOAuthProvider(OAuthProvider):
    """Production OAuth provider building one client per identity provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_oauth_clients(self, settings: Settings) -> dict[AuthProvider, OAuthClient]:
        """Provide dictionary of all OAuth clients by provider.

        Raises:
            ConfigurationError: If a provider has no client credentials
        """
        auth = settings.auth
        for name in ("google", "facebook", "github"):
            provider_settings = getattr(auth, name)
            if not provider_settings.client_id or not provider_settings.client_secret:
                raise ConfigurationError(f"{name} OAuth credentials must be configured")

        return {
            AuthProvider.GOOGLE: GoogleOAuthClient(auth.google),
            AuthProvider.FACEBOOK: FacebookOAuthClient(auth.facebook),
            AuthProvider.GITHUB: GithubOAuthClient(auth.github),
        }
