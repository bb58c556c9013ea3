"""PostgreSQL repository implementations."""

from lens.persistence.repository.identity import PostgresIdentityRepository
from lens.persistence.repository.search_event import PostgresSearchEventRepository
from lens.persistence.repository.session import PostgresSessionRepository

__all__ = [
    "PostgresIdentityRepository",
    "PostgresSearchEventRepository",
    "PostgresSessionRepository",
]
