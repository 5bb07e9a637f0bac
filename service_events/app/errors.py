"""
Data cycle faults for the Events Service.
"""

from enum import Enum
from typing import Any, Dict, Optional

from shared.errors import EventApiException


class FaultKind(str, Enum):
    """Stage of the data cycle that failed."""
    FETCH = "fetch"
    VALIDATION = "validation"
    PARSE = "parse"


class EventDataError(EventApiException):
    """A fetch, validation or parse fault inside one data cycle."""

    status_code = 502

    def __init__(self, kind: FaultKind, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"EVENT_DATA_{kind.name}_ERROR", message, details)
        self.kind = kind

    @property
    def retryable(self) -> bool:
        # Same inputs produce the same schema violations
        return self.kind is not FaultKind.VALIDATION
