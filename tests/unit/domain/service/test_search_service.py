"""Unit tests for SearchTelemetryService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from lens.domain.error import StoreUnavailableError, ValidationError
from lens.domain.model.search_event import SearchEvent
from lens.domain.service import SearchTelemetryService
from lens.domain.value import IdentityId, SearchEventId, SearchTerm
from lens.persistence.repository.inmemory import InMemorySearchEventRepository


class UnavailableSearchEventRepository(InMemorySearchEventRepository):
    """Search event log whose writes always fail."""

    async def append(self, event: SearchEvent) -> SearchEvent:
        raise StoreUnavailableError("connection refused")


async def record_many(service: SearchTelemetryService, terms: dict[str, int]) -> None:
    identity_id = IdentityId(uuid4())
    for term, count in terms.items():
        for _ in range(count):
            await service.record(identity_id, term)


class TestNormalize:
    """Tests for SearchTelemetryService.normalize()."""

    def test_trims_and_lowercases(self):
        """Should trim and lower-case the term."""
        assert SearchTelemetryService.normalize("  Cat  ").root == "cat"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_blank_terms_rejected(self, raw):
        """Should reject missing and whitespace-only terms."""
        with pytest.raises(ValidationError):
            SearchTelemetryService.normalize(raw)

    @pytest.mark.parametrize("raw", [5, 1.5, True, ["cat"], {"term": "cat"}])
    def test_non_string_terms_rejected(self, raw):
        """Should reject JSON values that are not strings."""
        with pytest.raises(ValidationError, match="must be a string"):
            SearchTelemetryService.normalize(raw)


class TestRecord:
    """Tests for SearchTelemetryService.record()."""

    @pytest.mark.asyncio
    async def test_variants_share_one_bucket(self):
        """Should store '  Cat  ' and 'cat' as the same term."""
        # Arrange
        repo = InMemorySearchEventRepository()
        service = SearchTelemetryService(repo)
        identity_id = IdentityId(uuid4())

        # Act
        await service.record(identity_id, "  Cat  ")
        await service.record(identity_id, "cat")

        # Assert
        assert [event.term.root for event in repo.events] == ["cat", "cat"]
        top = await service.top_searches()
        assert [(t.term, t.count) for t in top] == [("cat", 2)]

    @pytest.mark.asyncio
    async def test_blank_term_writes_nothing(self):
        """Should reject a blank term before writing."""
        repo = InMemorySearchEventRepository()
        service = SearchTelemetryService(repo)

        with pytest.raises(ValidationError):
            await service.record(IdentityId(uuid4()), "   ")

        assert repo.events == []

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        """Should surface store failures to direct callers."""
        service = SearchTelemetryService(UnavailableSearchEventRepository())

        with pytest.raises(StoreUnavailableError):
            await service.record(IdentityId(uuid4()), "cat")


class TestRecordBestEffort:
    """Tests for SearchTelemetryService.record_best_effort()."""

    @pytest.mark.asyncio
    async def test_store_failure_is_contained(self):
        """Should return None instead of raising when the log is down."""
        service = SearchTelemetryService(UnavailableSearchEventRepository())

        result = await service.record_best_effort(
            IdentityId(uuid4()), SearchTerm("cat")
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_records_when_store_available(self):
        """Should record the event normally."""
        repo = InMemorySearchEventRepository()
        service = SearchTelemetryService(repo)

        event = await service.record_best_effort(IdentityId(uuid4()), SearchTerm("cat"))

        assert event is not None
        assert repo.events == [event]


class TestTopSearches:
    """Tests for SearchTelemetryService.top_searches()."""

    @pytest.mark.asyncio
    async def test_ties_ordered_by_term(self):
        """Should rank by count, then alphabetically."""
        # Arrange
        service = SearchTelemetryService(InMemorySearchEventRepository())
        await record_many(service, {"dog": 3, "cat": 5, "ant": 1, "bird": 3})

        # Act
        top = await service.top_searches()

        # Assert
        assert [(t.term, t.count) for t in top] == [
            ("cat", 5),
            ("bird", 3),
            ("dog", 3),
            ("ant", 1),
        ]

    @pytest.mark.asyncio
    async def test_limited_to_five(self):
        """Should return at most five terms by default."""
        service = SearchTelemetryService(InMemorySearchEventRepository())
        await record_many(service, {term: 1 for term in "abcdefg"})

        top = await service.top_searches()

        assert [t.term for t in top] == ["a", "b", "c", "d", "e"]

    @pytest.mark.asyncio
    async def test_counts_across_identities(self):
        """Should count searches of all identities together."""
        service = SearchTelemetryService(InMemorySearchEventRepository())
        await service.record(IdentityId(uuid4()), "cat")
        await service.record(IdentityId(uuid4()), "cat")

        top = await service.top_searches()

        assert top[0].count == 2

    @pytest.mark.asyncio
    async def test_empty_log(self):
        """Should return an empty ranking when nothing was searched."""
        service = SearchTelemetryService(InMemorySearchEventRepository())

        assert await service.top_searches() == []
        assert await service.top_searches(limit=0) == []


class TestHistory:
    """Tests for SearchTelemetryService.history()."""

    @pytest.mark.asyncio
    async def test_newest_twenty_newest_first(self):
        """Should return the latest 20 of 25 searches, newest first."""
        # Arrange
        repo = InMemorySearchEventRepository()
        service = SearchTelemetryService(repo)
        identity_id = IdentityId(uuid4())
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for i in range(25):
            await repo.append(
                SearchEvent(
                    id=SearchEventId(uuid4()),
                    identity_id=identity_id,
                    term=SearchTerm(f"term{i}"),
                    timestamp=start + timedelta(minutes=i),
                )
            )

        # Act
        history = await service.history(identity_id)

        # Assert
        assert len(history) == 20
        assert history[0].term == "term24"
        assert history[-1].term == "term5"
        timestamps = [entry.timestamp for entry in history]
        assert timestamps == sorted(timestamps, reverse=True)

    @pytest.mark.asyncio
    async def test_only_own_searches(self):
        """Should not include other identities' searches."""
        service = SearchTelemetryService(InMemorySearchEventRepository())
        me, other = IdentityId(uuid4()), IdentityId(uuid4())
        await service.record(me, "cat")
        await service.record(other, "dog")

        history = await service.history(me)

        assert [entry.term for entry in history] == ["cat"]

    @pytest.mark.asyncio
    async def test_repeated_searches_kept(self):
        """Should keep repeated identical searches as separate entries."""
        service = SearchTelemetryService(InMemorySearchEventRepository())
        me = IdentityId(uuid4())
        await service.record(me, "cat")
        await service.record(me, "Cat")

        history = await service.history(me)

        assert [entry.term for entry in history] == ["cat", "cat"]

    @pytest.mark.asyncio
    async def test_recording_order_wins_over_timestamps(self):
        """Should list the latest recorded search first even if the clock stepped back."""
        # Arrange
        repo = InMemorySearchEventRepository()
        service = SearchTelemetryService(repo)
        identity_id = IdentityId(uuid4())
        noon = datetime(2026, 1, 1, 12, tzinfo=timezone.utc)
        for term, timestamp in [
            ("cat", noon),
            ("dog", noon),
            ("bird", noon - timedelta(seconds=2)),
        ]:
            await repo.append(
                SearchEvent(
                    id=SearchEventId(uuid4()),
                    identity_id=identity_id,
                    term=SearchTerm(term),
                    timestamp=timestamp,
                )
            )

        # Act
        history = await service.history(identity_id)

        # Assert
        assert [entry.term for entry in history] == ["bird", "dog", "cat"]
