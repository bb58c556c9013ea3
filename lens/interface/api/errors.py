"""Exception handlers mapping domain and adapter errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from lens.adapter.error import UpstreamError
from lens.config import Settings
from lens.domain.error import (
    AuthenticationError,
    StoreUnavailableError,
    UnsupportedProviderError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Routes called by the frontend with fetch(); everything else is browser navigation
JSON_AUTH_PREFIXES = ("/api/", "/auth/user")


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
        settings: Application settings (environment, frontend URL)
    """

    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        if request.url.path.startswith(JSON_AUTH_PREFIXES):
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": str(exc)},
            )
        return RedirectResponse(
            url=f"{settings.api.frontend_url}/login",
            status_code=status.HTTP_302_FOUND,
        )

    async def handle_unsupported_provider(
        request: Request, exc: UnsupportedProviderError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": str(exc)},
        )

    async def handle_store_unavailable(
        request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        logger.error(f"Store unavailable on {request.url.path}: {exc}")
        content = {"error": "Store unavailable"}
        if settings.is_development:
            content["message"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content,
        )

    async def handle_upstream_error(
        request: Request, exc: UpstreamError
    ) -> JSONResponse:
        logger.error(f"Image search failed on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to search images", "message": str(exc)},
        )

    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(UnsupportedProviderError, handle_unsupported_provider)
    app.add_exception_handler(StoreUnavailableError, handle_store_unavailable)
    app.add_exception_handler(UpstreamError, handle_upstream_error)
