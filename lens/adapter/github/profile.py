"""GitHub profile adapter."""

from typing import Any

from lens.domain.service.profile_adapter import ProviderAdapter
from lens.domain.value import AuthProvider, IdentityRequest


class GithubProfileAdapter(ProviderAdapter):
    """Maps the GitHub ``/user`` payload.

    ``id`` is numeric and stored as a string. ``name`` is often unset, in
    which case ``login`` is used. When the public ``email`` is missing the
    primary verified address from ``emails`` is used.
    """

    provider = AuthProvider.GITHUB

    def to_identity_request(self, profile: dict[str, Any]) -> IdentityRequest:
        return self._build(
            provider_id=profile.get("id"),
            display_name=profile.get("name"),
            username=profile.get("login"),
            email=profile.get("email") or _primary_email(profile.get("emails") or []),
            profile_photo=profile.get("avatar_url"),
        )


def _primary_email(emails: list[dict[str, Any]]) -> str | None:
    verified = [e for e in emails if e.get("verified")]
    for entry in verified:
        if entry.get("primary"):
            return entry.get("email")
    if verified:
        return verified[0].get("email")
    return None
