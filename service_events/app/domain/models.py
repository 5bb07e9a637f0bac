"""
Event and venue data models for the Events Service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _integral_float_to_int(value: Any) -> Any:
    # JSON Schema treats 10033.0 as an integer
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


Identifier = Annotated[int, BeforeValidator(_integral_float_to_int)]


class Event(BaseModel):
    """Event record from the remote data document.

    Only ``id`` and ``venueId`` are interpreted. Every other field (name,
    start date, anything the source adds) is carried through untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", strict=True)

    id: Identifier = Field(..., description="Event ID")
    venue_id: Identifier = Field(..., alias="venueId", description="ID of the venue hosting the event")


class Venue(BaseModel):
    """Venue record from the remote data document."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", strict=True)

    id: Identifier = Field(..., description="Venue ID")
    name: str = Field(..., description="Venue name")
    capacity: Identifier = Field(..., description="Seated or standing capacity")
    location: str = Field(..., description="City and country")


class Snapshot(BaseModel):
    """Events and venues produced by one successful fetch/validate/parse cycle."""

    events: List[Event] = Field(default_factory=list)
    venues: List[Venue] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.events and not self.venues


class DataOutcome(str, Enum):
    """Terminal state of a data cycle."""
    FRESH = "fresh"
    CACHED = "cached"
    EMPTY = "empty"


@dataclass
class ProviderResult:
    """Snapshot returned by the provider and how it was obtained."""
    snapshot: Snapshot
    outcome: DataOutcome
    attempts: int
