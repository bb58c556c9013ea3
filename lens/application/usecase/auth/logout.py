"""Logout use case."""

from lens.application.context import AuthContext
from lens.application.usecase.base import BaseUseCase
from lens.domain.service import SessionManager


class LogoutUseCase(BaseUseCase):
    """Use case for ending the caller's session."""

    def __init__(self, session_manager: SessionManager) -> None:
        self.session_manager = session_manager

    async def execute(self, request: AuthContext) -> None:
        await self.session_manager.destroy_session(request.session_token)
