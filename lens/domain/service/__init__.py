"""Domain services for Lens."""

from lens.domain.service.auth_service import AuthService, OAuthClient
from lens.domain.service.federation_service import IdentityFederationService
from lens.domain.service.profile_adapter import (
    ProviderAdapter,
    ProviderAdapterRegistry,
)
from lens.domain.service.search_service import SearchTelemetryService
from lens.domain.service.session_service import SessionManager

__all__ = [
    "AuthService",
    "IdentityFederationService",
    "OAuthClient",
    "ProviderAdapter",
    "ProviderAdapterRegistry",
    "SearchTelemetryService",
    "SessionManager",
]
