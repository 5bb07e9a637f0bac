"""
Unit tests for the snapshot parser and event/venue models.
"""

import pytest

from service_events.app.domain.models import Event, Snapshot, Venue
from service_events.app.domain.parser import SnapshotParser
from service_events.app.errors import EventDataError, FaultKind
from shared.test_helpers import EventDataFactory


class TestSnapshotParser:
    """Test cases for SnapshotParser."""

    @pytest.fixture
    def parser(self):
        return SnapshotParser()

    @pytest.fixture
    def document(self):
        return EventDataFactory.create_event_document()

    def test_parse_preserves_order(self, parser, document):
        """Test events and venues keep document order."""
        snapshot = parser.parse(document)

        assert [e.id for e in snapshot.events] == [10033, 10034, 10035, 10036]
        assert [v.id for v in snapshot.venues] == [919, 920, 921]

    def test_parse_maps_fields(self, parser, document):
        """Test camelCase fields map onto the models."""
        snapshot = parser.parse(document)

        event = snapshot.events[0]
        assert event.venue_id == 919
        assert event.model_dump(by_alias=True) == document["events"][0]

        venue = snapshot.venues[0]
        assert venue == Venue(id=919, name="The TEG Observatory", capacity=150, location="Auckland, New Zealand")

    def test_unknown_event_fields_pass_through(self, parser, document):
        """Test descriptive fields outside the model survive parsing."""
        document["events"][0]["ticketUrl"] = "https://tickets.example/10033"

        snapshot = parser.parse(document)

        dumped = snapshot.events[0].model_dump(by_alias=True)
        assert dumped["ticketUrl"] == "https://tickets.example/10033"
        assert dumped["venueId"] == 919

    def test_empty_sections(self, parser):
        """Test empty lists parse to an empty snapshot."""
        snapshot = parser.parse({"events": [], "venues": []})

        assert snapshot == Snapshot.empty()
        assert snapshot.is_empty

    @pytest.mark.parametrize("section", ["events", "venues"])
    def test_missing_section_is_parse_fault(self, parser, document, section):
        """Test a missing sub-document raises a parse fault."""
        del document[section]

        with pytest.raises(EventDataError) as exc_info:
            parser.parse(document)

        assert exc_info.value.kind is FaultKind.PARSE
        assert exc_info.value.retryable is True
        assert exc_info.value.details["section"] == section

    def test_non_list_section_is_parse_fault(self, parser, document):
        """Test a sub-document of the wrong shape raises a parse fault."""
        document["venues"] = {"919": document["venues"][0]}

        with pytest.raises(EventDataError) as exc_info:
            parser.parse(document)

        assert exc_info.value.kind is FaultKind.PARSE
        assert exc_info.value.details["type"] == "dict"

    def test_wrong_field_type_is_parse_fault(self, parser, document):
        """Test string ids are rejected rather than coerced."""
        document["events"][2]["venueId"] = "919"

        with pytest.raises(EventDataError) as exc_info:
            parser.parse(document)

        assert exc_info.value.kind is FaultKind.PARSE
        assert exc_info.value.code == "EVENT_DATA_PARSE_ERROR"

    def test_missing_required_venue_field_is_parse_fault(self, parser, document):
        """Test a venue lacking capacity cannot be parsed."""
        del document["venues"][1]["capacity"]

        with pytest.raises(EventDataError):
            parser.parse(document)

    def test_integral_float_ids_are_accepted(self, parser, document):
        """Test 10033.0 parses as an integer id, as JSON Schema allows."""
        document["events"][0]["id"] = 10033.0
        document["events"][0]["venueId"] = 919.0
        document["venues"][0]["capacity"] = 150.0

        snapshot = parser.parse(document)

        event = snapshot.events[0]
        assert event.id == 10033 and isinstance(event.id, int)
        assert event.venue_id == 919 and isinstance(event.venue_id, int)
        assert snapshot.venues[0].capacity == 150

    def test_fractional_id_is_parse_fault(self, parser, document):
        document["events"][0]["id"] = 10033.5

        with pytest.raises(EventDataError) as exc_info:
            parser.parse(document)

        assert exc_info.value.kind is FaultKind.PARSE

    def test_boolean_id_is_parse_fault(self, parser, document):
        document["events"][0]["venueId"] = True

        with pytest.raises(EventDataError):
            parser.parse(document)

    def test_descriptive_event_fields_are_opaque(self, parser, document):
        """Test name and startDate of any type pass through unchanged."""
        document["events"][0]["name"] = {"en": "Stargazing Night", "mi": "Pō Whetū"}
        document["events"][1]["startDate"] = 1700335800
        del document["events"][2]["name"]
        del document["events"][2]["startDate"]

        snapshot = parser.parse(document)

        assert [e.model_dump(by_alias=True) for e in snapshot.events] == document["events"]


class TestModels:
    """Test cases for the event data models."""

    def test_event_accepts_field_names_and_aliases(self):
        assert Event(id=1, venue_id=2) == Event.model_validate({"id": 1, "venueId": 2})

    def test_event_serializes_with_aliases(self):
        event = Event(id=1, venue_id=2, name="Gig", startDate="2024-01-01")

        assert event.model_dump(by_alias=True) == {
            "id": 1,
            "venueId": 2,
            "name": "Gig",
            "startDate": "2024-01-01"
        }

    def test_snapshot_equality(self):
        document = EventDataFactory.create_event_document()
        parser = SnapshotParser()

        assert parser.parse(document) == parser.parse(EventDataFactory.create_event_document())
