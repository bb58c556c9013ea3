"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lens.config import Settings
from lens.domain.error import StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


@contextmanager
def store_errors(store: str) -> Iterator[None]:
    """Translate driver failures into StoreUnavailableError.

    Constraint violations pass through unchanged.

    Args:
        store: Human-readable store name for the error message
    """
    try:
        yield
    except IntegrityError:
        raise
    except (DBAPIError, OSError) as e:
        raise StoreUnavailableError(f"{store} unavailable") from e
