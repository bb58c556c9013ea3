"""Search telemetry domain service."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from lens.domain.error import StoreUnavailableError, ValidationError
from lens.domain.model.search_event import SearchEvent
from lens.domain.repository.search_event import SearchEventRepository
from lens.domain.value import (
    HistoryEntry,
    IdentityId,
    SearchEventId,
    SearchTerm,
    TopSearch,
)

from .base import Service

DEFAULT_TOP_LIMIT = 5
DEFAULT_HISTORY_LIMIT = 20


class SearchTelemetryService(Service):
    """Records searches and derives rankings and histories from them."""

    def __init__(self, search_event_repository: SearchEventRepository) -> None:
        """Initialize search telemetry service.

        Args:
            search_event_repository: Search event log
        """
        self.search_event_repository = search_event_repository

    @staticmethod
    def normalize(raw_term: Any) -> SearchTerm:
        """Normalize a user-supplied term.

        Anything but a string is rejected.

        Raises:
            ValidationError: If the term is missing, blank or not a string
        """
        if raw_term is None or (
            isinstance(raw_term, str) and raw_term.strip() == ""
        ):
            raise ValidationError("Search term is required")
        if not isinstance(raw_term, str):
            raise ValidationError("Search term must be a string")
        return SearchTerm(raw_term)

    async def record(self, identity_id: IdentityId, raw_term: Any) -> SearchEvent:
        """Append a search event for an identity.

        Args:
            identity_id: Identity that searched
            raw_term: Term as typed by the user

        Returns:
            The recorded event

        Raises:
            ValidationError: If the term is missing or blank
            StoreUnavailableError: If the log cannot be written
        """
        term = self.normalize(raw_term)
        event = SearchEvent(
            id=SearchEventId(uuid4()),
            identity_id=identity_id,
            term=term,
            timestamp=datetime.now(timezone.utc),
        )
        with logfire.span(
            "search.record", identity_id=str(identity_id), term=term.root
        ):
            saved = await self.search_event_repository.append(event)
            logfire.info(
                "Search recorded", identity_id=str(identity_id), term=term.root
            )
            return saved

    async def record_best_effort(
        self, identity_id: IdentityId, term: SearchTerm
    ) -> SearchEvent | None:
        """Record an already-validated term without failing the caller.

        Store failures are logged and swallowed so the search itself can
        still be served.

        Args:
            identity_id: Identity that searched
            term: Normalized term

        Returns:
            The recorded event, or None if the log was unavailable
        """
        try:
            return await self.record(identity_id, term.root)
        except StoreUnavailableError as e:
            logfire.error(
                "Search event not recorded",
                identity_id=str(identity_id),
                term=term.root,
                error=str(e),
            )
            return None

    async def top_searches(self, limit: int = DEFAULT_TOP_LIMIT) -> list[TopSearch]:
        """Most frequent terms across all identities.

        Ties are ordered by term so the ranking is reproducible.

        Args:
            limit: Maximum number of terms

        Returns:
            Up to ``limit`` term counts, most frequent first
        """
        if limit <= 0:
            return []
        with logfire.span("search.top_searches", limit=limit):
            return await self.search_event_repository.top_terms(limit)

    async def history(
        self, identity_id: IdentityId, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> list[HistoryEntry]:
        """Latest searches of one identity, newest first.

        Args:
            identity_id: Identity whose history to read
            limit: Maximum number of entries

        Returns:
            Up to ``limit`` entries
        """
        if limit <= 0:
            return []
        with logfire.span(
            "search.history", identity_id=str(identity_id), limit=limit
        ):
            return await self.search_event_repository.find_recent_by_identity(
                identity_id, limit
            )
