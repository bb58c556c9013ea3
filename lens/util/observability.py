"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Search recorded", identity_id=str(identity_id), term=term)

    with logfire.span("federation.resolve_identity", provider=provider.value):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from lens.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Development sends nothing to the cloud unless a token is present.
    OBSERVABILITY__SEND_TO_LOGFIRE overrides the token-based default.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "lens-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Add method, path and client host to request spans."""
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    # Cookies carry session tokens, keep headers out of spans
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument outbound httpx calls (OAuth providers, image search)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
