"""Get search history use case."""

from lens.application.context import AuthContext
from lens.application.usecase.base import BaseUseCase
from lens.domain.service import SearchTelemetryService
from lens.domain.value import HistoryEntry


class GetHistoryUseCase(BaseUseCase):
    """Use case for the caller's own recent searches."""

    def __init__(self, search_service: SearchTelemetryService) -> None:
        self.search_service = search_service

    async def execute(self, request: AuthContext) -> list[HistoryEntry]:
        """Return the caller's latest searches, newest first."""
        return await self.search_service.history(request.identity.id)
