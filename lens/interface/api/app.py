"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lens.config import Settings
from lens.interface.api.errors import register_exception_handlers
from lens.interface.api.routes import auth, health, search
from lens.util.di.container import create_container, setup_di
from lens.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    yield
    # Disposes the database engine and other APP-scoped resources
    await app_instance.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve from; the production container
            is built from the environment when omitted (tests pass their own)
    """
    settings = Settings()

    # Instrument httpx for outbound OAuth and image search calls
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Lens API",
        description="Backend API for Lens - social login, image search and search telemetry",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Session cookie must travel with cross-origin fetches from the frontend
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    register_exception_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(search.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
