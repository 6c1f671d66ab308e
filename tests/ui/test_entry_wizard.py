# -*- coding: utf-8 -*-
"""
Tests for the Entry Wizard screens.

Tests cover:
- Wizard initialization
- Operator step gate (Next button)
- Full visitor flow to the history
- Bottom navigation and language toggle
- Splash page dismissal
"""

import pytest
from openpyxl import load_workbook
from PyQt5.QtCore import Qt

from athena.app.config import Steps
from athena.app.main_window import MainWindow
from athena.controllers.wizard_controller import EntryWizardController
from athena.models.log_entry import EntryType, VisitorEntry
from athena.services.platform_bridge import NullPlatformBridge
from athena.services.translation_manager import tr
from athena.ui.components import ActionButton, EmptyState, EntryCard
from athena.ui.error_handler import ErrorHandler
from athena.ui.wizards.entry_log.entry_wizard import EntryWizard
from athena.ui.wizards.entry_log.steps import DetailsStep, HistoryStep, OperatorStep, TypeSelectionStep


@pytest.fixture
def dialogs(monkeypatch):
    """Record message boxes instead of showing them."""
    shown = []
    for name in ("show_error", "show_warning", "show_success"):
        monkeypatch.setattr(
            ErrorHandler, name,
            staticmethod(lambda parent, message, title=None, kind=name: shown.append((kind, message)))
        )
    return shown


@pytest.fixture
def controller(qapp, store):
    return EntryWizardController(store, platform=NullPlatformBridge())


@pytest.fixture
def wizard(qtbot, controller, dialogs):
    entry_wizard = EntryWizard(controller)
    qtbot.addWidget(entry_wizard)
    entry_wizard.show()
    return entry_wizard


class TestWizardInitialization:

    def test_has_four_steps(self, wizard):
        """The wizard holds the four steps in order."""
        assert [type(step) for step in wizard.steps] == [
            OperatorStep, TypeSelectionStep, DetailsStep, HistoryStep
        ]

    def test_starts_on_operator_step(self, wizard):
        """The operator step is shown first."""
        assert isinstance(wizard.step_container.currentWidget(), OperatorStep)

    def test_header(self, wizard):
        """The header shows the title and the language button."""
        assert wizard.title_label.text() == "Registre d'accès"
        assert wizard.language_button.text() == "AR"


class TestOperatorStep:

    def test_next_disabled_until_name_entered(self, wizard, qtbot):
        """Next is enabled once a name is typed."""
        step = wizard.get_step_widget(Steps.OPERATOR)
        assert not step.next_button.isEnabled()

        qtbot.keyClicks(step.operator_input, "Karim")

        assert step.next_button.isEnabled()
        assert wizard.controller.context.operator_name == "Karim"

        step.next_button.click()
        assert isinstance(wizard.step_container.currentWidget(), TypeSelectionStep)

    def test_access_point_selection(self, wizard):
        """Clicking an access point selects it."""
        step = wizard.get_step_widget(Steps.OPERATOR)
        step.access_point_buttons["P3"].click()
        assert wizard.controller.context.access_point == "P3"
        assert step.access_point_buttons["P3"].isChecked()

    def test_blocked_navigation_shows_warning(self, wizard, dialogs):
        """A blocked move shows a warning and stays put."""
        wizard.controller.navigate_to(Steps.TYPE_SELECTION)
        assert dialogs and dialogs[0][0] == "show_warning"
        assert isinstance(wizard.step_container.currentWidget(), OperatorStep)


class TestVisitorFlow:

    def test_save_visitor_reaches_history(self, wizard, qtbot, store):
        """A visitor saved through the form appears in the history."""
        operator_step = wizard.get_step_widget(Steps.OPERATOR)
        qtbot.keyClicks(operator_step.operator_input, "Karim")
        operator_step.next_button.click()

        wizard.get_step_widget(Steps.TYPE_SELECTION).visitor_button.click()
        details = wizard.get_step_widget(Steps.DETAILS)
        assert wizard.step_container.currentWidget() is details
        assert not details.visitor_block.isHidden()
        assert details.vehicle_block.isHidden()

        details.inputs["visitor_name"].setText("Ali")
        details.inputs["company"].setText("ACME")
        details.not_announced_button.click()
        details.save_button.click()

        assert len(store) == 1
        entry = store.entries[0]
        assert isinstance(entry, VisitorEntry)
        assert entry.visitor_name == "Ali"
        assert entry.is_announced is False

        history = wizard.get_step_widget(Steps.HISTORY)
        assert wizard.step_container.currentWidget() is history
        assert history.count_label.text() == "1 enregistrements"
        assert len(history._cards) == 1
        assert history._cards[0].name_label.text() == "Ali"
        assert history._cards[0].announced_badge is None

    def test_form_is_cleared_for_next_entry(self, wizard, qtbot):
        """The details form is empty for the next entry."""
        operator_step = wizard.get_step_widget(Steps.OPERATOR)
        qtbot.keyClicks(operator_step.operator_input, "Karim")
        wizard.controller.select_entry_type(EntryType.VISITOR)
        details = wizard.get_step_widget(Steps.DETAILS)
        details.inputs["visitor_name"].setText("Ali")
        details.save_button.click()

        wizard.get_step_widget(Steps.HISTORY).new_entry_button.click()
        wizard.get_step_widget(Steps.TYPE_SELECTION).visitor_button.click()

        assert details.inputs["visitor_name"].text() == ""
        assert details.announced_button.isChecked()

    def test_vehicle_block(self, wizard):
        """Vehicle entries show the vehicle block."""
        wizard.controller.set_operator_name("Karim")
        wizard.controller.select_entry_type(EntryType.VEHICLE)
        details = wizard.get_step_widget(Steps.DETAILS)

        assert not details.vehicle_block.isHidden()
        assert details.visitor_block.isHidden()
        details.vehicle_type_buttons["truck"].click()
        assert wizard.controller.context.vehicle_type_id == "truck"


class TestHistoryAndNavigation:

    def test_empty_history(self, wizard):
        """An empty history shows the empty state."""
        wizard._nav_buttons[Steps.HISTORY].click()
        history = wizard.get_step_widget(Steps.HISTORY)
        assert wizard.step_container.currentWidget() is history
        assert isinstance(history.empty_state, EmptyState)
        assert history.empty_state.title() == "Aucune donnée"
        assert history.excel_button.isEnabled()
        assert history.pdf_button.isEnabled()

    def test_export_empty_log(self, wizard, tmp_path, dialogs):
        """An empty log still exports a header-only workbook."""
        target = tmp_path / "empty.xlsx"
        wizard.get_step_widget(Steps.HISTORY).export_to("excel", target)

        assert target.exists()
        assert load_workbook(target).active.max_row == 1
        assert dialogs[-1][0] == "show_success"

    def test_nav_buttons_follow_step(self, wizard):
        """The bottom navigation tracks the current step."""
        wizard._nav_buttons[Steps.HISTORY].click()
        assert wizard._nav_buttons[Steps.HISTORY].isChecked()
        assert not wizard._nav_buttons[Steps.OPERATOR].isChecked()

        wizard._nav_buttons[Steps.OPERATOR].click()
        assert wizard._nav_buttons[Steps.OPERATOR].isChecked()

    def test_export_from_history(self, wizard, tmp_path, dialogs):
        """Export from the history writes the file and confirms."""
        wizard.controller.set_operator_name("Karim")
        wizard.controller.select_entry_type(EntryType.VISITOR)
        wizard.controller.save_entry()

        target = tmp_path / "out.xlsx"
        wizard.get_step_widget(Steps.HISTORY).export_to("excel", target)

        assert target.exists()
        assert dialogs[-1][0] == "show_success"

    def test_language_toggle(self, wizard):
        """The language button switches to Arabic and right-to-left."""
        wizard.language_button.click()

        assert wizard.layoutDirection() == Qt.RightToLeft
        assert wizard.language_button.text() == "FR"
        operator_step = wizard.get_step_widget(Steps.OPERATOR)
        assert operator_step.next_button.text() == tr("button.next", lang="ar")


class TestComponents:

    def test_unknown_button_variant(self, qapp):
        """Unknown button variants raise ValueError."""
        with pytest.raises(ValueError):
            ActionButton("x", variant="neon")

    def test_entry_card_lines(self, qtbot):
        """Entry cards show access point, time, company and registration."""
        entry = VisitorEntry(
            entry_id="1", timestamp="t", access_point="P2", entry_time="08:15",
            company="ACME", registration="1234-A-5", visitor_name="Ali", is_announced=True
        )
        card = EntryCard(entry)
        qtbot.addWidget(card)
        assert card.meta_label.text() == "P2 • 08:15"
        assert card.detail_label.text() == "ACME • 1234-A-5"
        assert card.announced_badge.text() == "Annoncé"


class TestMainWindow:

    def test_splash_then_wizard(self, qtbot, store, dialogs):
        """The splash page gives way to the wizard."""
        window = MainWindow(store, splash_ms=10)
        qtbot.addWidget(window)
        assert window.splash_visible

        qtbot.waitUntil(lambda: not window.splash_visible, timeout=2000)
        assert window.stack.currentWidget() is window.wizard
