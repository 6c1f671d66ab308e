# -*- coding: utf-8 -*-
"""
Tests for building log entries from the wizard form state.
"""

import pytest

from athena.models.log_entry import EntryType, VehicleEntry, VisitorEntry
from athena.services.exceptions import InvalidEntryError
from athena.services.record_builder import build_entry, generate_entry_id
from athena.ui.wizards.entry_log.entry_context import EntryContext


@pytest.fixture
def context(fixed_now):
    ctx = EntryContext(now=fixed_now)
    ctx.operator_name = "Karim"
    ctx.access_point = "P2"
    ctx.registration = "1234-A-5"
    ctx.company = "ACME"
    ctx.visitor_name = "Ali"
    ctx.person_visited = "Dir"
    ctx.cin = "AB123"
    ctx.driver_name = "Youssef"
    ctx.bon_number = "B-42"
    return ctx


class TestBuildEntry:

    def test_visitor_entry(self, context, fixed_now):
        """Visitor form fields become a VisitorEntry."""
        context.entry_type = EntryType.VISITOR
        context.is_announced = False

        entry = build_entry(context, now=fixed_now, id_factory=lambda: "fixed")

        assert isinstance(entry, VisitorEntry)
        assert entry.entry_id == "fixed"
        assert entry.timestamp == "2024-01-15T10:30:00.000Z"
        assert entry.operator_name == "Karim"
        assert entry.access_point == "P2"
        assert entry.entry_time == "10:30"
        assert entry.visitor_name == "Ali"
        assert entry.is_announced is False
        assert "driverName" not in entry.to_dict()

    def test_vehicle_entry_uses_type_label(self, context, fixed_now):
        """Vehicle entries store the vehicle type label."""
        context.entry_type = EntryType.VEHICLE
        context.vehicle_type_id = "truck"

        entry = build_entry(context, now=fixed_now)

        assert isinstance(entry, VehicleEntry)
        assert entry.vehicle_type == "Camion"
        assert entry.driver_name == "Youssef"
        assert entry.registration == "1234-A-5"
        assert "visitorName" not in entry.to_dict()

    def test_unknown_vehicle_type_falls_back(self, context):
        """Unknown vehicle type ids store the "other" label."""
        context.entry_type = EntryType.VEHICLE
        context.vehicle_type_id = "spaceship"
        assert build_entry(context).vehicle_type == "Autre"

    def test_explicit_type_overrides_context(self, context):
        """An explicit type wins over the form type."""
        context.entry_type = EntryType.VISITOR
        entry = build_entry(context, entry_type=EntryType.VEHICLE)
        assert isinstance(entry, VehicleEntry)

    def test_missing_type_raises(self, context):
        """Building without a type raises InvalidEntryError."""
        with pytest.raises(InvalidEntryError):
            build_entry(context)

    def test_unknown_type_raises(self, context):
        """Unknown type tags raise InvalidEntryError."""
        context.entry_type = "BICYCLE"
        with pytest.raises(InvalidEntryError) as exc_info:
            build_entry(context)
        assert exc_info.value.field == "type"

    def test_empty_fields_are_accepted(self, fixed_now):
        """Empty form fields are stored as empty strings."""
        ctx = EntryContext(now=fixed_now)
        ctx.entry_type = EntryType.VISITOR
        entry = build_entry(ctx)
        assert entry.operator_name == ""
        assert entry.visitor_name == ""

    def test_generated_ids_are_unique(self):
        """Generated ids do not repeat."""
        ids = {generate_entry_id() for _ in range(100)}
        assert len(ids) == 100
