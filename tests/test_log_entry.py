# -*- coding: utf-8 -*-
"""
Tests for the log entry models and their stored format.
"""

import pytest

from athena.models.log_entry import (
    EntryType, VehicleEntry, VisitorEntry, entry_from_dict, entry_to_dict
)
from athena.services.exceptions import InvalidEntryError


@pytest.fixture
def visitor():
    return VisitorEntry(
        entry_id="v1",
        timestamp="2024-01-15T10:30:00.000Z",
        operator_name="Karim",
        access_point="P2",
        entry_time="10:30",
        visitor_name="Ali",
        person_visited="Dir",
        cin="AB123",
        is_announced=False,
    )


@pytest.fixture
def vehicle():
    return VehicleEntry(
        entry_id="c1",
        timestamp="2024-01-15T10:30:00.000Z",
        operator_name="Karim",
        access_point="P1",
        entry_time="09:00",
        registration="1234-A-5",
        company="ACME",
        vehicle_type="Camion",
        driver_name="Youssef",
        bon_number="B-42",
    )


class TestSerialization:
    """Stored record layout."""

    def test_visitor_keys(self, visitor):
        """Visitor records carry only visitor keys."""
        data = visitor.to_dict()
        assert set(data) == {
            "id", "timestamp", "chefPoste", "accessPoint", "type",
            "heureEntree", "heureSortie", "destination", "observation",
            "registration", "societe",
            "visitorName", "personVisited", "cin", "isAnnounced",
        }
        assert data["type"] == "VISITOR"
        assert data["chefPoste"] == "Karim"
        assert data["isAnnounced"] is False

    def test_vehicle_keys(self, vehicle):
        """Vehicle records carry the vehicle keys."""
        data = vehicle.to_dict()
        assert data["type"] == "VEHICLE"
        assert data["vehicleType"] == "Camion"
        assert data["bonNumber"] == "B-42"
        assert data["societe"] == "ACME"
        assert "visitorName" not in data
        assert "isAnnounced" not in data

    def test_stored_form_decodes_to_equal_entry(self, visitor, vehicle):
        """Stored dicts decode back to equal entries."""
        assert entry_from_dict(visitor.to_dict()) == visitor
        assert entry_from_dict(vehicle.to_dict()) == vehicle

    def test_entry_to_dict_rejects_other_objects(self):
        """Only log entries can be encoded."""
        with pytest.raises(InvalidEntryError):
            entry_to_dict({"id": "x"})


class TestDecoding:
    """Tolerant decoding of stored records."""

    def test_dispatches_on_type(self):
        """The type tag selects the entry class."""
        entry = entry_from_dict({"id": "1", "timestamp": "t", "type": "VEHICLE", "driverName": "Y"})
        assert isinstance(entry, VehicleEntry)
        assert entry.entry_type is EntryType.VEHICLE
        assert entry.display_name == "Y"

    def test_missing_fields_become_empty(self):
        """Missing or null fields decode as empty strings."""
        entry = entry_from_dict({"id": "1", "type": "VISITOR", "cin": None})
        assert entry.cin == ""
        assert entry.timestamp == ""
        assert entry.is_announced is True

    def test_announced_text_flag(self):
        """Textual "false" decodes as not announced."""
        entry = entry_from_dict({"id": "1", "type": "VISITOR", "isAnnounced": "false"})
        assert entry.is_announced is False

    def test_unknown_type_raises(self):
        """Unknown type tags are rejected."""
        with pytest.raises(InvalidEntryError) as exc_info:
            entry_from_dict({"id": "1", "type": "BICYCLE"})
        assert exc_info.value.field == "type"

    def test_missing_id_raises(self):
        """Records without an id are rejected."""
        with pytest.raises(InvalidEntryError):
            entry_from_dict({"type": "VISITOR"})

    def test_non_mapping_raises(self):
        """Non-dict records are rejected."""
        with pytest.raises(InvalidEntryError):
            entry_from_dict(["VISITOR"])


class TestEntryBehaviour:

    def test_entries_are_immutable(self, visitor):
        """Entries cannot be modified after creation."""
        with pytest.raises(AttributeError):
            visitor.visitor_name = "Other"

    def test_display_name(self, visitor, vehicle):
        """Visitors show the visitor name, vehicles the driver."""
        assert visitor.display_name == "Ali"
        assert vehicle.display_name == "Youssef"
