"""Identity entity.

One account bound to exactly one external authentication provider.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import AuthProvider, IdentityId


class Identity(DomainModel):
    """Canonical account for one (provider, provider_id) pair.

    Identities from different providers are never merged, even when the
    emails match. Profile fields are captured on first login only.
    """

    id: IdentityId
    provider: AuthProvider
    provider_id: str  # Permanent ID assigned by the provider
    display_name: str = Field(min_length=1)
    email: Optional[str] = None
    profile_photo: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
