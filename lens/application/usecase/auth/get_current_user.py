"""Get current user use case."""

from pydantic import BaseModel

from lens.application.context import AuthContext
from lens.application.usecase.base import BaseUseCase
from lens.domain.error import AuthenticationError
from lens.domain.model.identity import Identity
from lens.domain.service import SessionManager
from lens.domain.value import AuthProvider


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Session token from cookie


class IdentityInfo(BaseModel):
    """Identity as returned to the browser."""

    id: str
    provider: AuthProvider
    provider_id: str
    display_name: str
    email: str | None
    profile_photo: str | None

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityInfo":
        return cls(
            id=str(identity.id),
            provider=identity.provider,
            provider_id=identity.provider_id,
            display_name=identity.display_name,
            email=identity.email,
            profile_photo=identity.profile_photo,
        )


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the caller's session into an auth context."""

    def __init__(self, session_manager: SessionManager) -> None:
        """Initialize get current user use case.

        Args:
            session_manager: Session domain service
        """
        self.session_manager = session_manager

    async def execute(self, request: GetCurrentUserRequest) -> AuthContext:
        """Resolve the session token.

        Args:
            request: Request with the session token, if any

        Returns:
            Auth context for the identity bound to the session

        Raises:
            AuthenticationError: If there is no live session
        """
        identity = await self.session_manager.resolve_session(request.token)
        if identity is None or request.token is None:
            raise AuthenticationError()
        return AuthContext(identity=identity, session_token=request.token)
