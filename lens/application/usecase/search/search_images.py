"""Search images use case."""

from typing import Any

from pydantic import BaseModel

from lens.adapter.unsplash import Image, ImageSearchClient
from lens.application.context import AuthContext
from lens.application.usecase.base import BaseUseCase
from lens.domain.service import SearchTelemetryService


class SearchImagesRequest(BaseModel):
    """Search images request."""

    context: AuthContext
    term: Any = None


class SearchImagesResponse(BaseModel):
    """Search images response."""

    term: str
    count: int
    images: list[Image]


class SearchImagesUseCase(BaseUseCase):
    """Use case for searching images and recording the search."""

    def __init__(
        self,
        search_service: SearchTelemetryService,
        image_search_client: ImageSearchClient,
    ) -> None:
        """Initialize search images use case.

        Args:
            search_service: Search telemetry domain service
            image_search_client: Outbound image search client
        """
        self.search_service = search_service
        self.image_search_client = image_search_client

    async def execute(self, request: SearchImagesRequest) -> SearchImagesResponse:
        """Execute search flow.

        Steps:
        1. Validate and normalize the term (nothing is written if invalid)
        2. Record the search; a log outage does not stop the search
        3. Query the image search service

        Args:
            request: Caller context and raw term

        Returns:
            Normalized term and the images found

        Raises:
            ValidationError: If the term is missing, blank or not a string
            UpstreamError: If the image search service fails
        """
        term = self.search_service.normalize(request.term)

        await self.search_service.record_best_effort(
            request.context.identity.id, term
        )

        images = await self.image_search_client.search(term.root)

        return SearchImagesResponse(term=term.root, count=len(images), images=images)
