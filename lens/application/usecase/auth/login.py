"""Login use case."""

import logfire
from pydantic import BaseModel

from lens.application.usecase.auth.get_current_user import IdentityInfo
from lens.application.usecase.base import BaseUseCase
from lens.domain.service import AuthService, IdentityFederationService, SessionManager
from lens.domain.value import AuthProvider


class LoginRequest(BaseModel):
    """Login request from OAuth callback."""

    provider: AuthProvider
    code: str  # OAuth authorization code


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    identity: IdentityInfo


class LoginUseCase(BaseUseCase):
    """Use case for multi-provider login via OAuth."""

    def __init__(
        self,
        auth_service: AuthService,
        federation_service: IdentityFederationService,
        session_manager: SessionManager,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: OAuth round trips for all providers
            federation_service: Identity find-or-create
            session_manager: Session domain service
        """
        self.auth_service = auth_service
        self.federation_service = federation_service
        self.session_manager = session_manager

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Exchange the code for the provider's profile payload
        2. Map the payload and find or create the identity
        3. Open a session for it

        Args:
            request: Login request with OAuth callback parameters

        Returns:
            Session token and identity

        Raises:
            OAuthError: If the provider round trip fails
            ProfileIncompleteError: If the profile cannot become an identity
            StoreUnavailableError: If a store cannot be reached
        """
        with logfire.span("login", provider=request.provider.value):
            profile = await self.auth_service.complete_login(
                request.provider, request.code
            )
            identity = await self.federation_service.federate(
                request.provider, profile
            )
            token = await self.session_manager.create_session(identity)

            logfire.info(
                "Login succeeded",
                identity_id=str(identity.id),
                provider=request.provider.value,
            )

            return LoginResponse(
                token=token, identity=IdentityInfo.from_identity(identity)
            )
