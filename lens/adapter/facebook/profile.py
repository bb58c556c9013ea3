"""Facebook profile adapter."""

from typing import Any

from lens.domain.service.profile_adapter import ProviderAdapter
from lens.domain.value import AuthProvider, IdentityRequest


class FacebookProfileAdapter(ProviderAdapter):
    """Maps the Graph API ``/me?fields=id,name,email,picture`` payload.

    The photo is nested as ``picture.data.url``. Email is absent when the
    user declined the permission.
    """

    provider = AuthProvider.FACEBOOK

    def to_identity_request(self, profile: dict[str, Any]) -> IdentityRequest:
        picture = (profile.get("picture") or {}).get("data") or {}
        return self._build(
            provider_id=profile.get("id"),
            display_name=profile.get("name"),
            username=None,
            email=profile.get("email"),
            profile_photo=picture.get("url"),
        )
