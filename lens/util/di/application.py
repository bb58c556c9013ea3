"""Application layer DI providers."""

from dishka import Scope, provide

from lens.adapter.unsplash import ImageSearchClient
from lens.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from lens.application.usecase.search import (
    GetHistoryUseCase,
    GetTopSearchesUseCase,
    SearchImagesUseCase,
)
from lens.domain.service import (
    AuthService,
    IdentityFederationService,
    SearchTelemetryService,
    SessionManager,
)
from lens.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        federation_service: IdentityFederationService,
        session_manager: SessionManager,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            federation_service=federation_service,
            session_manager=session_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, session_manager: SessionManager
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(session_manager=session_manager)

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, session_manager: SessionManager) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(session_manager=session_manager)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_images_use_case(
        self,
        search_service: SearchTelemetryService,
        image_search_client: ImageSearchClient,
    ) -> SearchImagesUseCase:
        """Provide search images use case."""
        return SearchImagesUseCase(
            search_service=search_service, image_search_client=image_search_client
        )

    @provide(scope=Scope.REQUEST)
    def get_top_searches_use_case(
        self, search_service: SearchTelemetryService
    ) -> GetTopSearchesUseCase:
        """Provide get top searches use case."""
        return GetTopSearchesUseCase(search_service=search_service)

    @provide(scope=Scope.REQUEST)
    def get_history_use_case(
        self, search_service: SearchTelemetryService
    ) -> GetHistoryUseCase:
        """Provide get history use case."""
        return GetHistoryUseCase(search_service=search_service)
