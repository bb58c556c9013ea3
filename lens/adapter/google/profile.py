"""Google profile adapter."""

from typing import Any

from lens.domain.service.profile_adapter import ProviderAdapter
from lens.domain.value import AuthProvider, IdentityRequest


class GoogleProfileAdapter(ProviderAdapter):
    """Maps OpenID Connect userinfo.

    Payload: ``{"sub", "name", "given_name", "email", "picture"}``.
    Google has no username, so a profile without a name is rejected.
    """

    provider = AuthProvider.GOOGLE

    def to_identity_request(self, profile: dict[str, Any]) -> IdentityRequest:
        return self._build(
            provider_id=profile.get("sub"),
            display_name=profile.get("name"),
            username=None,
            email=profile.get("email"),
            profile_photo=profile.get("picture"),
        )
