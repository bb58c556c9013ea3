#!/usr/bin/env python3
"""Remove expired sessions from the session store.

Meant to run periodically (cron or a scheduled container). Expired sessions
are already refused on use; this only reclaims their rows.
"""

import asyncio
import sys

import logfire

from lens.config import Settings
from lens.domain.service import SessionManager
from lens.util.di.container import create_container
from lens.util.observability import configure_logfire


async def purge() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            session_manager = await request_container.get(SessionManager)
            return await session_manager.purge_expired()
    finally:
        await container.close()


def main() -> int:
    """Purge expired sessions and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        removed = asyncio.run(purge())
        logfire.info("Session purge completed", removed=removed)
        return 0

    except Exception as e:
        logfire.error(
            "Session purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
