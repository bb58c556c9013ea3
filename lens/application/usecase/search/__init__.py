"""Search use cases."""

from .get_history import GetHistoryUseCase
from .get_top_searches import GetTopSearchesRequest, GetTopSearchesUseCase
from .search_images import (
    SearchImagesRequest,
    SearchImagesResponse,
    SearchImagesUseCase,
)

__all__ = [
    "GetHistoryUseCase",
    "GetTopSearchesRequest",
    "GetTopSearchesUseCase",
    "SearchImagesRequest",
    "SearchImagesResponse",
    "SearchImagesUseCase",
]
