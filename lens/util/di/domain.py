"""Domain layer DI providers."""

from dishka import Scope, provide

from lens.adapter.facebook import FacebookProfileAdapter
from lens.adapter.github import GithubProfileAdapter
from lens.adapter.google import GoogleProfileAdapter
from lens.config import AuthSettings
from lens.domain.repository import (
    IdentityRepository,
    SearchEventRepository,
    SessionRepository,
)
from lens.domain.service import (
    AuthService,
    IdentityFederationService,
    OAuthClient,
    ProviderAdapterRegistry,
    SearchTelemetryService,
    SessionManager,
)
from lens.domain.value import AuthProvider
from lens.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_provider_adapters(self) -> ProviderAdapterRegistry:
        """Provide the registry of provider profile adapters.

        Built once per application; adding a provider means adding it here.
        """
        return ProviderAdapterRegistry(
            [
                GoogleProfileAdapter(),
                FacebookProfileAdapter(),
                GithubProfileAdapter(),
            ]
        )

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide multi-provider authentication domain service."""
        return AuthService(oauth_clients=oauth_clients)

    @provide
    def get_federation_service(
        self,
        identity_repository: IdentityRepository,
        adapters: ProviderAdapterRegistry,
    ) -> IdentityFederationService:
        """Provide identity federation domain service."""
        return IdentityFederationService(
            identity_repository=identity_repository, adapters=adapters
        )

    @provide
    def get_session_manager(
        self,
        session_repository: SessionRepository,
        identity_repository: IdentityRepository,
        auth_settings: AuthSettings,
    ) -> SessionManager:
        """Provide session manager."""
        return SessionManager(
            session_repository=session_repository,
            identity_repository=identity_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_search_service(
        self, search_event_repository: SearchEventRepository
    ) -> SearchTelemetryService:
        """Provide search telemetry domain service."""
        return SearchTelemetryService(search_event_repository=search_event_repository)
