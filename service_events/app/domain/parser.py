"""
Parser turning a validated event data document into a Snapshot.
"""

from typing import Any, Dict, List

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import EventDataError, FaultKind
from .models import Event, Snapshot, Venue


_EVENTS = TypeAdapter(List[Event])
_VENUES = TypeAdapter(List[Venue])


class SnapshotParser:
    """Deserializes the ``events`` and ``venues`` sub-documents."""

    def parse(self, document: Dict[str, Any]) -> Snapshot:
        events = self._parse_section(document, "events", _EVENTS)
        venues = self._parse_section(document, "venues", _VENUES)
        return Snapshot(events=events, venues=venues)

    @staticmethod
    def _parse_section(document: Dict[str, Any], section: str, adapter: TypeAdapter) -> list:
        if section not in document:
            raise EventDataError(
                FaultKind.PARSE,
                f"Event data has no '{section}' section",
                details={"section": section}
            )

        items = document[section]
        if not isinstance(items, list):
            raise EventDataError(
                FaultKind.PARSE,
                f"Event data '{section}' section is not a list",
                details={"section": section, "type": type(items).__name__}
            )

        try:
            return adapter.validate_python(items)
        except PydanticValidationError as exc:
            raise EventDataError(
                FaultKind.PARSE,
                f"Event data '{section}' section could not be parsed",
                details={"section": section, "errors": exc.errors(include_url=False)}
            ) from exc
