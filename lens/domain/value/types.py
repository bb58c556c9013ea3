"""Domain value objects for Lens.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from lens.domain.value.common import RootValueObject, ValueObject


class AuthProvider(str, Enum):
    """Supported authentication providers."""

    GOOGLE = "google"
    FACEBOOK = "facebook"
    GITHUB = "github"


class SearchTerm(RootValueObject[str]):
    """Normalized search term.

    Always trimmed and lower-cased, so "  Cat " and "cat" are the same term.
    """

    @field_validator("root")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Trim and lower-case the term."""
        normalized = v.strip().lower()
        if not normalized:
            raise ValueError("Search term must not be empty")
        return normalized


class IdentityRequest(ValueObject):
    """Provider-independent description of the identity to find or create.

    Produced by a provider adapter from that provider's profile payload.
    """

    provider: AuthProvider
    provider_id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    email: str | None = None
    profile_photo: str | None = None


class TopSearch(ValueObject):
    """One bucket of the most-searched-terms ranking."""

    term: str
    count: int = Field(ge=1)


class HistoryEntry(ValueObject):
    """One entry of an identity's search history."""

    term: str
    timestamp: datetime
