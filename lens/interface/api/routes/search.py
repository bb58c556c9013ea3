"""Search routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from lens.application.usecase.auth import GetCurrentUserUseCase
from lens.application.usecase.search import (
    GetHistoryUseCase,
    GetTopSearchesRequest,
    GetTopSearchesUseCase,
    SearchImagesRequest,
    SearchImagesResponse,
    SearchImagesUseCase,
)
from lens.config import Settings
from lens.domain.value import HistoryEntry, TopSearch
from lens.interface.api.session import require_auth

router = APIRouter(prefix="/api", tags=["search"], route_class=DishkaRoute)


class SearchRequest(BaseModel):
    """Search request body."""

    # Any JSON value; the type is checked after authentication
    term: Any = None


@router.get("/top-searches", response_model=list[TopSearch])
async def get_top_searches(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    get_top_searches_use_case: FromDishka[GetTopSearchesUseCase],
    settings: FromDishka[Settings],
) -> list[TopSearch]:
    """Most searched terms across all users.

    Requires authentication.

    Returns:
        Up to 5 terms with counts, most frequent first, ties by term

    Example:
        GET /api/top-searches

        [{"term": "cat", "count": 5}, {"term": "bird", "count": 3}]
    """
    await require_auth(request, settings, get_current_user_use_case)
    return await get_top_searches_use_case.execute(GetTopSearchesRequest())


@router.post("/search", response_model=SearchImagesResponse)
async def search_images(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    search_images_use_case: FromDishka[SearchImagesUseCase],
    settings: FromDishka[Settings],
    body: SearchRequest | None = None,
) -> SearchImagesResponse:
    """Search images and record the search for the caller.

    Requires authentication.

    Args:
        body: Request body with the search term

    Returns:
        Normalized term, number of images and the images

    Raises:
        AuthenticationError: If not authenticated (401)
        ValidationError: If the term is missing, blank or not a string (400)
        UpstreamError: If the image search service fails (500)

    Example:
        POST /api/search
        {"term": "  Cat "}

        {"term": "cat", "count": 30, "images": [...]}
    """
    context = await require_auth(request, settings, get_current_user_use_case)
    return await search_images_use_case.execute(
        SearchImagesRequest(context=context, term=body.term if body else None)
    )


@router.get("/history", response_model=list[HistoryEntry])
async def get_history(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    get_history_use_case: FromDishka[GetHistoryUseCase],
    settings: FromDishka[Settings],
) -> list[HistoryEntry]:
    """The caller's latest searches.

    Requires authentication.

    Returns:
        Up to 20 entries, newest first
    """
    context = await require_auth(request, settings, get_current_user_use_case)
    return await get_history_use_case.execute(context)
