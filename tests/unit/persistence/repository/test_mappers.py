"""Unit tests for row mappers and store error translation."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from lens.domain.error import StoreUnavailableError
from lens.domain.model import SearchEvent
from lens.domain.value import AuthProvider, IdentityId, SearchEventId, SearchTerm
from lens.persistence.database import store_errors
from lens.persistence.mappers import (
    identity_to_dict,
    row_to_identity,
    row_to_session,
    search_event_to_dict,
)


class TestIdentityMapping:
    """Tests for identity row mapping."""

    def test_row_round_trips_through_dict(self):
        """Should rebuild the same identity from its stored form."""
        row = {
            "id": str(uuid4()),
            "provider": "github",
            "provider_id": "583231",
            "display_name": "octocat",
            "email": None,
            "profile_photo": "https://avatars.githubusercontent.com/u/583231",
            "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
        }

        identity = row_to_identity(row)
        stored = identity_to_dict(identity)

        assert identity.provider == AuthProvider.GITHUB
        assert str(identity.id) == row["id"]
        assert stored["provider"] == "github"
        assert stored["profile_photo"] == row["profile_photo"]


class TestSearchEventMapping:
    """Tests for search event mapping."""

    def test_term_stored_as_plain_text(self):
        """Should store the normalized term string."""
        event = SearchEvent(
            id=SearchEventId(uuid4()),
            identity_id=IdentityId(uuid4()),
            term=SearchTerm(" Cat "),
            timestamp=datetime.now(timezone.utc),
        )

        assert search_event_to_dict(event)["term"] == "cat"


class TestSessionMapping:
    """Tests for session row mapping."""

    def test_row_to_session(self):
        """Should map session rows including string ids."""
        now = datetime.now(timezone.utc)
        identity_id = uuid4()

        record = row_to_session(
            {
                "id": "abc",
                "identity_id": str(identity_id),
                "created_at": now,
                "expires_at": now,
                "last_touched_at": now,
            }
        )

        assert record.identity_id == identity_id


class TestStoreErrors:
    """Tests for store_errors()."""

    def test_connectivity_failure_becomes_store_unavailable(self):
        """Should translate operational errors."""
        with pytest.raises(StoreUnavailableError):
            with store_errors("identity store"):
                raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    def test_refused_connection_becomes_store_unavailable(self):
        """Should translate socket errors."""
        with pytest.raises(StoreUnavailableError):
            with store_errors("session store"):
                raise ConnectionRefusedError()

    def test_constraint_violation_passes_through(self):
        """Should leave integrity errors alone."""
        with pytest.raises(IntegrityError):
            with store_errors("identity store"):
                raise IntegrityError("INSERT", {}, Exception("duplicate key"))
