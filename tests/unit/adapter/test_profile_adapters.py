"""Unit tests for provider profile adapters."""

import pytest

from lens.adapter.facebook import FacebookProfileAdapter
from lens.adapter.github import GithubProfileAdapter
from lens.adapter.google import GoogleProfileAdapter
from lens.domain.error import ProfileIncompleteError, UnsupportedProviderError
from lens.domain.service import ProviderAdapterRegistry
from lens.domain.value import AuthProvider


class TestGoogleProfileAdapter:
    """Tests for GoogleProfileAdapter."""

    def test_maps_userinfo_payload(self):
        """Should map sub, name, email and picture."""
        # Arrange
        profile = {
            "sub": "1098",
            "name": "Ada Lovelace",
            "given_name": "Ada",
            "email": "ada@example.com",
            "picture": "https://lh3.googleusercontent.com/a/ada",
        }

        # Act
        request = GoogleProfileAdapter().to_identity_request(profile)

        # Assert
        assert request.provider == AuthProvider.GOOGLE
        assert request.provider_id == "1098"
        assert request.display_name == "Ada Lovelace"
        assert request.email == "ada@example.com"
        assert request.profile_photo == "https://lh3.googleusercontent.com/a/ada"

    def test_missing_name_is_rejected(self):
        """Should reject a profile with no name, Google has no username."""
        with pytest.raises(ProfileIncompleteError) as exc_info:
            GoogleProfileAdapter().to_identity_request(
                {"sub": "1098", "email": "ada@example.com"}
            )

        assert exc_info.value.missing == "display name"

    def test_missing_sub_is_rejected(self):
        """Should reject a profile with no provider id."""
        with pytest.raises(ProfileIncompleteError) as exc_info:
            GoogleProfileAdapter().to_identity_request({"name": "Ada"})

        assert exc_info.value.missing == "id"

    def test_optional_fields_default_to_none(self):
        """Should leave email and photo empty when not shared."""
        request = GoogleProfileAdapter().to_identity_request(
            {"sub": "1098", "name": "Ada"}
        )

        assert request.email is None
        assert request.profile_photo is None


class TestFacebookProfileAdapter:
    """Tests for FacebookProfileAdapter."""

    def test_reads_nested_picture_url(self):
        """Should take the photo from picture.data.url."""
        profile = {
            "id": "1016",
            "name": "Grace Hopper",
            "email": "grace@example.com",
            "picture": {"data": {"url": "https://graph.facebook.com/grace/picture"}},
        }

        request = FacebookProfileAdapter().to_identity_request(profile)

        assert request.provider == AuthProvider.FACEBOOK
        assert request.provider_id == "1016"
        assert request.display_name == "Grace Hopper"
        assert request.profile_photo == "https://graph.facebook.com/grace/picture"

    def test_declined_email_permission(self):
        """Should accept a profile without email or picture."""
        request = FacebookProfileAdapter().to_identity_request(
            {"id": "1016", "name": "Grace Hopper"}
        )

        assert request.email is None
        assert request.profile_photo is None


class TestGithubProfileAdapter:
    """Tests for GithubProfileAdapter."""

    def test_numeric_id_is_stored_as_string(self):
        """Should convert the numeric GitHub id to a string."""
        request = GithubProfileAdapter().to_identity_request(
            {"id": 583231, "login": "octocat", "name": "The Octocat"}
        )

        assert request.provider_id == "583231"
        assert request.display_name == "The Octocat"

    def test_display_name_falls_back_to_login(self):
        """Should use login when name is unset."""
        request = GithubProfileAdapter().to_identity_request(
            {"id": 583231, "login": "octocat", "name": None}
        )

        assert request.display_name == "octocat"

    def test_blank_name_falls_back_to_login(self):
        """Should treat a whitespace-only name as unset."""
        request = GithubProfileAdapter().to_identity_request(
            {"id": 583231, "login": "octocat", "name": "   "}
        )

        assert request.display_name == "octocat"

    def test_no_name_and_no_login_is_rejected(self):
        """Should reject a profile with neither name nor login."""
        with pytest.raises(ProfileIncompleteError):
            GithubProfileAdapter().to_identity_request({"id": 583231})

    def test_public_email_wins(self):
        """Should prefer the public email over the emails list."""
        request = GithubProfileAdapter().to_identity_request(
            {
                "id": 1,
                "login": "octocat",
                "email": "public@github.com",
                "emails": [
                    {"email": "primary@github.com", "primary": True, "verified": True}
                ],
            }
        )

        assert request.email == "public@github.com"

    def test_primary_verified_email_used_when_public_missing(self):
        """Should pick the primary verified address from emails."""
        request = GithubProfileAdapter().to_identity_request(
            {
                "id": 1,
                "login": "octocat",
                "email": None,
                "emails": [
                    {"email": "other@github.com", "primary": False, "verified": True},
                    {"email": "unverified@github.com", "primary": True, "verified": False},
                    {"email": "primary@github.com", "primary": True, "verified": True},
                ],
            }
        )

        assert request.email == "primary@github.com"

    def test_unverified_emails_are_ignored(self):
        """Should leave email empty when no address is verified."""
        request = GithubProfileAdapter().to_identity_request(
            {
                "id": 1,
                "login": "octocat",
                "emails": [
                    {"email": "x@github.com", "primary": True, "verified": False}
                ],
            }
        )

        assert request.email is None

    def test_avatar_url_is_profile_photo(self):
        """Should map avatar_url to the profile photo."""
        request = GithubProfileAdapter().to_identity_request(
            {
                "id": 1,
                "login": "octocat",
                "avatar_url": "https://avatars.githubusercontent.com/u/1",
            }
        )

        assert request.profile_photo == "https://avatars.githubusercontent.com/u/1"


class TestProviderAdapterRegistry:
    """Tests for ProviderAdapterRegistry."""

    def test_get_registered_adapter(self):
        """Should return the adapter registered for a provider."""
        adapter = GoogleProfileAdapter()
        registry = ProviderAdapterRegistry([adapter])

        assert registry.get(AuthProvider.GOOGLE) is adapter
        assert registry.providers == [AuthProvider.GOOGLE]

    def test_get_unregistered_adapter_raises(self):
        """Should raise for a provider without an adapter."""
        registry = ProviderAdapterRegistry([GoogleProfileAdapter()])

        with pytest.raises(UnsupportedProviderError):
            registry.get(AuthProvider.GITHUB)
