"""
Unit tests for the event query service.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from service_events.app.domain.models import Snapshot
from service_events.app.domain.parser import SnapshotParser
from service_events.app.domain.queries import EventQueryService
from shared.test_helpers import EventDataFactory


@pytest.fixture
def snapshot():
    return SnapshotParser().parse(EventDataFactory.create_event_document())


@pytest.fixture
def provider(snapshot):
    provider = MagicMock()
    provider.get_data = AsyncMock(return_value=snapshot)
    return provider


@pytest.fixture
def queries(provider):
    return EventQueryService(provider)


class TestEventQueryService:
    """Test cases for EventQueryService."""

    @pytest.mark.asyncio
    async def test_get_all_events(self, queries, snapshot):
        events = await queries.get_all_events()

        assert events == snapshot.events
        assert len(events) >= 1

    @pytest.mark.asyncio
    async def test_get_all_venues(self, queries, snapshot):
        venues = await queries.get_all_venues()

        assert venues == snapshot.venues
        assert len(venues) >= 1

    @pytest.mark.asyncio
    async def test_get_events_by_venue(self, queries):
        """Test only events at the venue are returned, in order."""
        events = await queries.get_events_by_venue(919)

        assert [e.id for e in events] == [10033, 10035]
        assert all(e.venue_id == 919 for e in events)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("venue_id", [919, 920, 921, 999, 0, -1])
    async def test_events_by_venue_only_matching(self, queries, snapshot, venue_id):
        events = await queries.get_events_by_venue(venue_id)

        assert events == [e for e in snapshot.events if e.venue_id == venue_id]

    @pytest.mark.asyncio
    async def test_events_by_unknown_venue_is_empty(self, queries):
        assert await queries.get_events_by_venue(12345) == []

    @pytest.mark.asyncio
    async def test_get_venue_by_event(self, queries):
        """Test event 10033 resolves to The TEG Observatory."""
        venue = await queries.get_venue_by_event(10033)

        assert venue is not None
        assert venue.id == 919
        assert venue.name == "The TEG Observatory"
        assert venue.capacity == 150
        assert venue.location == "Auckland, New Zealand"

    @pytest.mark.asyncio
    async def test_get_venue_by_unknown_event(self, queries):
        assert await queries.get_venue_by_event(100) is None

    @pytest.mark.asyncio
    async def test_get_venue_by_event_with_dangling_venue(self, queries):
        """Test an event whose venue is missing resolves to not found."""
        assert await queries.get_venue_by_event(10036) is None

    @pytest.mark.asyncio
    async def test_venue_matches_event_for_every_event(self, queries, snapshot):
        venue_ids = {v.id for v in snapshot.venues}
        for event in snapshot.events:
            venue = await queries.get_venue_by_event(event.id)
            if event.venue_id in venue_ids:
                assert venue.id == event.venue_id
            else:
                assert venue is None

    @pytest.mark.asyncio
    async def test_one_provider_cycle_per_query(self, queries, provider):
        await queries.get_venue_by_event(10033)
        await queries.get_events_by_venue(919)

        assert provider.get_data.await_count == 2

    @pytest.mark.asyncio
    async def test_empty_snapshot(self, provider, queries):
        provider.get_data = AsyncMock(return_value=Snapshot.empty())

        assert await queries.get_all_events() == []
        assert await queries.get_all_venues() == []
        assert await queries.get_events_by_venue(919) == []
        assert await queries.get_venue_by_event(10033) is None

    @pytest.mark.asyncio
    async def test_results_do_not_alias_snapshot(self, queries, snapshot):
        events = await queries.get_all_events()
        events.clear()

        assert len(snapshot.events) == 4
