"""Image search adapter."""

from .client import (
    Image,
    ImageSearchClient,
    MockImageSearchClient,
    UnsplashImageSearchClient,
)

__all__ = [
    "Image",
    "ImageSearchClient",
    "MockImageSearchClient",
    "UnsplashImageSearchClient",
]
