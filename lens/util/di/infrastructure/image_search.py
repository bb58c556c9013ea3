"""Image search infrastructure providers."""

from dishka import Scope, provide

from lens.adapter.unsplash import ImageSearchClient, UnsplashImageSearchClient
from lens.config import ImageSearchSettings
from lens.util.di.base import ProviderBase


class ImageSearchProvider(ProviderBase):
    """Image search component base."""

    __mock_component__ = "image_search"


class ProdImageSearchProvider(ImageSearchProvider):
    """Production image search provider (Unsplash)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_search_client(
        self, settings: ImageSearchSettings
    ) -> ImageSearchClient:
        """Provide Unsplash image search client."""
        return UnsplashImageSearchClient(settings)
