"""Image search client for the Unsplash API.

A plain proxy call: bounded timeout, no retry, no caching.
"""

from typing import Any

import httpx
import logfire
from pydantic import BaseModel

from lens.adapter.error import UpstreamAuthError, UpstreamError
from lens.config import ImageSearchSettings


class Image(BaseModel):
    """One image search result."""

    id: str
    url: str
    thumbnail: str
    description: str
    photographer: str
    photographer_url: str


class ImageSearchClient:
    """Base class for image search clients.

    Provides type distinction for dependency injection.
    """

    async def search(self, term: str) -> list[Image]:
        """Search images for a normalized term.

        Raises:
            UpstreamError: If the search service fails
        """
        raise NotImplementedError


class UnsplashImageSearchClient(ImageSearchClient):
    """Unsplash ``/search/photos`` client."""

    def __init__(self, settings: ImageSearchSettings) -> None:
        """Initialize Unsplash client.

        Args:
            settings: Access key, endpoint and paging settings
        """
        self.settings = settings
        self.search_url = f"{settings.base_url.rstrip('/')}/search/photos"

    async def search(self, term: str) -> list[Image]:
        params = {
            "query": term,
            "per_page": str(self.settings.per_page),
            "orientation": self.settings.orientation,
        }

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await client.get(
                    self.search_url,
                    params=params,
                    headers={"Authorization": f"Client-ID {self.settings.access_key}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Image search HTTP error", term=term, error=str(e))
            raise UpstreamError(f"HTTP error during image search: {e}")

        if response.status_code == 401:
            logfire.error("Image search rejected credentials")
            raise UpstreamAuthError("Invalid image search credentials")

        if response.status_code != 200:
            logfire.error(
                "Image search failed",
                term=term,
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamError(f"Image search failed: {response.status_code}")

        results = response.json().get("results", [])
        logfire.info("Image search completed", term=term, count=len(results))
        return [to_image(result) for result in results]


def to_image(result: dict[str, Any]) -> Image:
    """Map one Unsplash photo payload to an Image."""
    urls = result.get("urls") or {}
    user = result.get("user") or {}
    return Image(
        id=str(result["id"]),
        url=urls.get("regular", ""),
        thumbnail=urls.get("small", ""),
        description=result.get("description")
        or result.get("alt_description")
        or "No description",
        photographer=user.get("name", ""),
        photographer_url=(user.get("links") or {}).get("html", ""),
    )


class MockImageSearchClient(ImageSearchClient):
    """Mock image search client for testing.

    Returns deterministic images. The term ``"upstream-down"`` simulates an
    outage.
    """

    def __init__(self, per_term: int = 3) -> None:
        self.per_term = per_term
        self.queries: list[str] = []

    async def search(self, term: str) -> list[Image]:
        self.queries.append(term)
        if term == "upstream-down":
            raise UpstreamError("Mock image search unavailable")
        return [
            Image(
                id=f"{term}-{i}",
                url=f"https://images.example.com/{term}/{i}.jpg",
                thumbnail=f"https://images.example.com/{term}/{i}_small.jpg",
                description=f"{term} {i}",
                photographer="Mock Photographer",
                photographer_url="https://images.example.com/@mock",
            )
            for i in range(self.per_term)
        ]
