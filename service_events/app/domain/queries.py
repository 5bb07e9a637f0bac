"""
Read-only queries over the provider's snapshot.
"""

from typing import List, Optional, TYPE_CHECKING

from .models import Event, Venue

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..provider.data_provider import EventDataProvider


class EventQueryService:
    """Event and venue lookups. Each call runs one provider cycle."""

    def __init__(self, provider: "EventDataProvider"):
        self.provider = provider

    async def get_all_events(self) -> List[Event]:
        snapshot = await self.provider.get_data()
        return list(snapshot.events)

    async def get_events_by_venue(self, venue_id: int) -> List[Event]:
        snapshot = await self.provider.get_data()
        return [event for event in snapshot.events if event.venue_id == venue_id]

    async def get_all_venues(self) -> List[Venue]:
        snapshot = await self.provider.get_data()
        return list(snapshot.venues)

    async def get_venue_by_event(self, event_id: int) -> Optional[Venue]:
        """Venue hosting ``event_id``; None if the event or its venue is unknown."""
        snapshot = await self.provider.get_data()
        event = next((e for e in snapshot.events if e.id == event_id), None)
        if event is None:
            return None
        return next((v for v in snapshot.venues if v.id == event.venue_id), None)
