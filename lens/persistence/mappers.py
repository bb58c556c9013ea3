"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from lens.domain.model import Identity, SearchEvent, SessionRecord
from lens.domain.value import AuthProvider, IdentityId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Convert database row to Identity domain model.

    Args:
        row: Database row as dict

    Returns:
        Identity domain model
    """
    return Identity(
        id=IdentityId(_uuid(row["id"])),
        provider=AuthProvider(row["provider"]),
        provider_id=row["provider_id"],
        display_name=row["display_name"],
        email=row.get("email"),
        profile_photo=row.get("profile_photo"),
        created_at=row["created_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert Identity domain model to database dict.

    Args:
        identity: Identity domain model

    Returns:
        Dict suitable for database insertion
    """
    data = identity.model_dump()
    data["provider"] = identity.provider.value
    return data


def search_event_to_dict(event: SearchEvent) -> Dict[str, Any]:
    """Convert SearchEvent domain model to database dict."""
    return {
        "id": event.id,
        "identity_id": event.identity_id,
        "term": event.term.root,
        "timestamp": event.timestamp,
    }


def row_to_session(row: Dict[str, Any]) -> SessionRecord:
    """Convert database row to SessionRecord."""
    return SessionRecord(
        id=row["id"],
        identity_id=IdentityId(_uuid(row["identity_id"])),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        last_touched_at=row["last_touched_at"],
    )


def session_to_dict(record: SessionRecord) -> Dict[str, Any]:
    """Convert SessionRecord to database dict."""
    return record.model_dump()
