# -*- coding: utf-8 -*-
"""
Tests for the wizard framework: step navigator and entry form context.
"""

import pytest

from athena.models.log_entry import EntryType
from athena.ui.wizards.entry_log.entry_context import EntryContext
from athena.ui.wizards.framework import StepNavigator, StepValidationResult


def blocking_guard(from_step, to_step):
    result = StepValidationResult(is_valid=True, errors=[])
    if to_step == 3:
        result.add_error("blocked")
    return result


@pytest.fixture
def navigator(qapp, fixed_now):
    return StepNavigator(EntryContext(now=fixed_now), (1, 2, 3, 4), guard=blocking_guard)


class TestStepNavigator:

    def test_starts_on_first_step(self, navigator):
        """The navigator starts on the first step."""
        assert navigator.current_step == 1
        assert navigator.context.current_step == 1
        assert not navigator.can_go_previous()

    def test_next_and_previous(self, navigator):
        """Relative moves go one step at a time."""
        assert navigator.next_step()
        assert navigator.current_step == 2
        assert navigator.previous_step()
        assert navigator.current_step == 1

    def test_guard_blocks_and_signals(self, navigator):
        """A failing guard blocks the move and emits validation_failed."""
        failures = []
        navigator.validation_failed.connect(failures.append)
        navigator.goto_step(2)

        assert not navigator.goto_step(3)
        assert navigator.current_step == 2
        assert failures[0].errors == ["blocked"]

    def test_skip_validation(self, navigator):
        """skip_validation bypasses the guard."""
        assert navigator.goto_step(3, skip_validation=True)
        assert navigator.current_step == 3

    def test_invalid_step(self, navigator):
        """Unknown steps are refused."""
        assert not navigator.goto_step(7)
        assert navigator.current_step == 1

    def test_same_step_is_a_no_op(self, navigator):
        """Going to the current step emits nothing."""
        changes = []
        navigator.step_changed.connect(lambda old, new: changes.append(new))
        assert navigator.goto_step(1)
        assert changes == []

    def test_last_step_has_no_next(self, navigator):
        """There is no step after the last one."""
        navigator.goto_step(4)
        assert not navigator.can_go_next()
        assert not navigator.next_step()

    def test_reset(self, navigator):
        """Reset returns to the first step."""
        navigator.goto_step(4)
        navigator.reset()
        assert navigator.current_step == 1

    def test_empty_steps_rejected(self, qapp, fixed_now):
        """A navigator needs at least one step."""
        with pytest.raises(ValueError):
            StepNavigator(EntryContext(now=fixed_now), ())


class TestEntryContext:

    def test_defaults(self, fixed_now):
        """A new form has the default values."""
        context = EntryContext(now=fixed_now)
        assert context.operator_name == ""
        assert context.access_point == "P1"
        assert context.entry_type is None
        assert context.entry_time == "10:30"
        assert context.is_announced is True
        assert context.vehicle_type_id == "car"
        assert not context.has_operator

    def test_set_field(self, fixed_now):
        """set_field updates a known field."""
        context = EntryContext(now=fixed_now)
        context.set_field("driver_name", "Youssef")
        assert context.driver_name == "Youssef"

    def test_set_unknown_field(self, fixed_now):
        """Unknown fields raise AttributeError."""
        with pytest.raises(AttributeError):
            EntryContext(now=fixed_now).set_field("colour", "red")

    def test_reset_form_keeps_operator_and_type(self, fixed_now):
        """Form reset keeps operator, access point and type."""
        context = EntryContext()
        context.operator_name = "Karim"
        context.access_point = "P3"
        context.entry_type = EntryType.VEHICLE
        context.driver_name = "Youssef"
        context.vehicle_type_id = "truck"
        context.exit_time = "18:00"
        context.is_announced = False

        context.reset_form(now=fixed_now)

        assert context.operator_name == "Karim"
        assert context.access_point == "P3"
        assert context.entry_type == EntryType.VEHICLE
        assert context.driver_name == ""
        assert context.vehicle_type_id == "car"
        assert context.exit_time == ""
        assert context.is_announced is True
        assert context.entry_time == "10:30"

    def test_to_dict(self, fixed_now):
        """to_dict exposes the form state."""
        context = EntryContext(now=fixed_now)
        context.entry_type = EntryType.VISITOR
        data = context.to_dict()
        assert data["entry_type"] == "VISITOR"
        assert data["current_step"] == 1
        assert "wizard_id" in data
