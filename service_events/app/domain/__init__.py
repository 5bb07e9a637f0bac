"""
Domain package for the Events Service: models, parser and queries.
"""

from .models import Event, Venue, Snapshot, DataOutcome, ProviderResult
from .parser import SnapshotParser
from .queries import EventQueryService

__all__ = [
    "Event",
    "Venue",
    "Snapshot",
    "DataOutcome",
    "ProviderResult",
    "SnapshotParser",
    "EventQueryService",
]
