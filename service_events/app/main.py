"""
Events service for the Event & Venue API.
"""

from typing import Dict, List, Optional

from shared.base_service import BaseService
from shared.config import ServiceConfig, retry_attempts
from shared.errors import NotFoundError
from shared.retry import RetryConfig

from .adapters.event_source_client import EventSourceClient
from .caching.snapshot_cache import SnapshotCache
from .domain.models import Event, Venue
from .domain.queries import EventQueryService
from .provider.data_provider import EventDataProvider


class EventsService(BaseService):
    """Events service implementation."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        source_client: Optional[EventSourceClient] = None,
        cache: Optional[SnapshotCache] = None,
    ):
        super().__init__("events", 8020, config=config)

        self.source_client = source_client or EventSourceClient(
            self.config.data_url,
            self.config.schema_url,
            timeout=self.config.fetch_timeout_seconds
        )
        self.snapshot_cache = cache or SnapshotCache(
            sliding_expiration_seconds=self.config.cache_sliding_expiration_seconds
        )
        self.provider = EventDataProvider(
            self.source_client,
            self.snapshot_cache,
            retry_config=RetryConfig(
                max_attempts=retry_attempts(self.config),
                base_delay=self.config.retry_base_delay_seconds,
                exponential_base=self.config.retry_backoff_base,
                jitter=False
            ),
            retry_validation_failures=self.config.retry_validation_failures,
            metrics=self.metrics
        )
        self.queries = EventQueryService(self.provider)

        self._setup_events_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.events_service = self

    def _setup_events_routes(self):
        """Set up event and venue routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "events",
                "message": "Event & Venue API - Events Service",
                "version": "1.0.0",
                "capabilities": ["schema_validation", "retry", "snapshot_cache"]
            }

        @self.app.get("/api/event/events", response_model=List[Event])
        async def get_events():
            """Get list of all events."""
            return await self.queries.get_all_events()

        @self.app.get("/api/event/venues/{venue_id}", response_model=List[Event])
        async def get_events_by_venue(venue_id: int):
            """Get all events happening at a venue."""
            return await self.queries.get_events_by_venue(venue_id)

        @self.app.get("/api/event/venues", response_model=List[Venue])
        async def get_venues():
            """Get list of all venues."""
            return await self.queries.get_all_venues()

        @self.app.get("/api/event/events/{event_id}", response_model=Venue)
        async def get_venue_by_event(event_id: int):
            """Get the venue connected to an event id."""
            venue = await self.queries.get_venue_by_event(event_id)
            if venue is None:
                raise NotFoundError(
                    f"No venue found for event {event_id}",
                    details={"event_id": event_id}
                )
            return venue

        @self.app.get("/cache/stats")
        async def get_cache_stats():
            """Get snapshot cache statistics."""
            return self.snapshot_cache.stats()

    async def _check_dependencies(self) -> Dict[str, str]:
        """Report snapshot cache state without running a data cycle."""
        return {
            "event_snapshot_cache": "warm" if self.snapshot_cache.is_warm() else "cold"
        }


def create_app():
    """Create events service application."""
    service = EventsService()
    return service.app


if __name__ == "__main__":
    service = EventsService()
    service.run()
