"""Get top searches use case."""

from pydantic import BaseModel, Field

from lens.application.usecase.base import BaseUseCase
from lens.domain.service import SearchTelemetryService
from lens.domain.service.search_service import DEFAULT_TOP_LIMIT
from lens.domain.value import TopSearch


class GetTopSearchesRequest(BaseModel):
    """Get top searches request."""

    limit: int = Field(default=DEFAULT_TOP_LIMIT, ge=0)


class GetTopSearchesUseCase(BaseUseCase):
    """Use case for the most frequent search terms across all users."""

    def __init__(self, search_service: SearchTelemetryService) -> None:
        self.search_service = search_service

    async def execute(self, request: GetTopSearchesRequest) -> list[TopSearch]:
        """Return up to ``request.limit`` most frequent terms."""
        return await self.search_service.top_searches(limit=request.limit)
