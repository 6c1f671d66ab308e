# -*- coding: utf-8 -*-
"""
Entry Wizard Controller
=======================
Drives the four-step access-log wizard:

1. Operator identification (post chief + access point)
2. Entry-type selection (visitor / vehicle)
3. Detail form
4. History (with exports)

Only one rule blocks navigation: the wizard cannot reach steps 2 or 3 while
the operator name is empty. Every navigation action first asks the platform
bridge for tactile feedback; failures there are ignored.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from PyQt5.QtCore import pyqtSignal

from athena.app.config import Config, Steps
from athena.controllers.base_controller import BaseController, OperationResult
from athena.models.log_entry import EntryType, LogEntry
from athena.models.reference_data import get_vehicle_type
from athena.repositories.log_store import EntryLogStore
from athena.services.exceptions import AthenaError, ExportException
from athena.services.export_service import EntryExportService
from athena.services.platform_bridge import ImpactStyle, NullPlatformBridge, PlatformBridge, StatusBarStyle
from athena.services.record_builder import build_entry, generate_entry_id
from athena.services.translation_manager import TranslationManager, tr
from athena.ui.wizards.entry_log.entry_context import EntryContext
from athena.ui.wizards.framework.base_step import StepValidationResult
from athena.ui.wizards.framework.step_navigator import StepNavigator
from athena.utils.logger import get_logger

logger = get_logger(__name__)

# Steps that cannot be entered from the operator step without a name
OPERATOR_REQUIRED_STEPS = (Steps.TYPE_SELECTION, Steps.DETAILS)


class EntryWizardController(BaseController):
    """
    Controller owning the form state, the log store and the navigation.

    Signals:
        step_changed(old, new): the visible step changed
        validation_failed(result): a navigation was blocked
        entry_saved(entry): a record was appended to the log
        language_changed(code): the display language changed
        form_changed(): a form field was updated
    """

    step_changed = pyqtSignal(int, int)
    validation_failed = pyqtSignal(StepValidationResult)
    entry_saved = pyqtSignal(object)
    language_changed = pyqtSignal(str)
    form_changed = pyqtSignal()

    def __init__(
        self,
        store: EntryLogStore,
        context: Optional[EntryContext] = None,
        platform: Optional[PlatformBridge] = None,
        export_service: Optional[EntryExportService] = None,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = generate_entry_id,
        parent=None
    ):
        super().__init__(parent)
        self.store = store
        self.clock = clock
        self.id_factory = id_factory
        self.context = context or EntryContext(now=clock())
        self.platform = platform or NullPlatformBridge()
        self.export_service = export_service or EntryExportService()
        self.translator = TranslationManager()

        self.navigator = StepNavigator(self.context, Steps.ALL, guard=self._check_transition)
        self.navigator.step_changed.connect(self.step_changed.emit)
        self.navigator.validation_failed.connect(self.validation_failed.emit)

    # =========================================================================
    # Platform integration
    # =========================================================================

    def trigger_feedback(self):
        """Best-effort tactile feedback; never raises."""
        try:
            self.platform.impact(ImpactStyle.LIGHT)
        except Exception as e:
            logger.debug(f"Feedback request ignored: {e}")

    def apply_platform_style(self):
        """Best-effort status-bar styling; never raises."""
        try:
            self.platform.apply_status_bar_style(StatusBarStyle.DARK, Config.HEADER_COLOR)
        except Exception as e:
            logger.debug(f"Status bar styling ignored: {e}")

    # =========================================================================
    # Validation
    # =========================================================================

    @property
    def current_step(self) -> int:
        return self.navigator.current_step

    def can_leave_operator_step(self) -> bool:
        return self.context.has_operator

    def validate_step(self, step: int) -> StepValidationResult:
        """Validate the fields owned by a step. Only step 1 has a rule."""
        result = StepValidationResult(is_valid=True, errors=[])
        if step == Steps.OPERATOR and not self.can_leave_operator_step():
            result.add_error(tr("validation.operator_required"))
        return result

    def _check_transition(self, from_step: int, to_step: int) -> StepValidationResult:
        if from_step == Steps.OPERATOR and to_step in OPERATOR_REQUIRED_STEPS:
            return self.validate_step(Steps.OPERATOR)
        return StepValidationResult(is_valid=True, errors=[])

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate_to(self, step: int) -> OperationResult[int]:
        """Feedback, then move to a step if the transition is allowed."""
        self.trigger_feedback()
        if self.navigator.goto_step(step):
            return OperationResult.ok(data=self.current_step)

        result = self.navigator.check_transition(step) if step in Steps.ALL else None
        errors = result.errors if result else []
        return OperationResult.fail(
            message=errors[0] if errors else f"Cannot navigate to step {step}",
            errors=errors
        )

    def next_step(self) -> OperationResult[int]:
        if not self.navigator.can_go_next():
            return OperationResult.fail(message="Already at the last step")
        return self.navigate_to(self.navigator.steps[self.navigator.current_index + 1])

    def previous_step(self) -> OperationResult[int]:
        if not self.navigator.can_go_previous():
            return OperationResult.fail(message="Already at the first step")
        return self.navigate_to(self.navigator.steps[self.navigator.current_index - 1])

    def start_new_entry(self) -> OperationResult[int]:
        """From history: start another entry at the type selection."""
        return self.navigate_to(Steps.TYPE_SELECTION)

    def show_history(self) -> OperationResult[int]:
        return self.navigate_to(Steps.HISTORY)

    # =========================================================================
    # Form state
    # =========================================================================

    def update_field(self, name: str, value: Any):
        """Set one form field (no validation)."""
        self.context.set_field(name, value)
        self.form_changed.emit()

    def set_operator_name(self, name: str):
        self.update_field("operator_name", name)

    def select_access_point(self, label: str):
        self.trigger_feedback()
        self.update_field("access_point", label)

    def select_vehicle_type(self, type_id: str):
        self.trigger_feedback()
        if get_vehicle_type(type_id) is None:
            logger.warning(f"Unknown vehicle type id: {type_id}")
        self.update_field("vehicle_type_id", type_id)

    def set_announced(self, announced: bool):
        self.update_field("is_announced", bool(announced))

    def select_entry_type(self, entry_type: EntryType) -> OperationResult[int]:
        """Choose visitor/vehicle and open the detail form."""
        try:
            entry_type = EntryType(entry_type)
        except ValueError:
            logger.warning(f"Unknown entry type: {entry_type}")
            return OperationResult.fail(message=f"Unknown entry type: {entry_type}")
        self.update_field("entry_type", entry_type)
        return self.navigate_to(Steps.DETAILS)

    # =========================================================================
    # Save
    # =========================================================================

    def save_entry(self) -> OperationResult[LogEntry]:
        """
        Build a record from the form, append it to the log, reset the form
        and show the history.
        """
        self.trigger_feedback()

        try:
            entry = build_entry(self.context, now=self.clock(), id_factory=self.id_factory)
            self.store.append(entry)
        except AthenaError as e:
            self._emit_error("save_entry", str(e))
            return OperationResult.fail(message=tr("error.save_failed"), errors=[str(e)])

        self.context.reset_form(now=self.clock())
        self.navigator.goto_step(Steps.HISTORY, skip_validation=True)

        self._log_operation("save_entry", entry_id=entry.entry_id, type=entry.entry_type.value)
        self.entry_saved.emit(entry)
        self._emit_completed("save_entry", True)
        return OperationResult.ok(data=entry)

    # =========================================================================
    # Language
    # =========================================================================

    @property
    def language(self) -> str:
        return self.translator.get_language()

    def toggle_language(self) -> str:
        """Switch between French and Arabic."""
        self.trigger_feedback()
        return self.set_language(self.translator.other_language())

    def set_language(self, lang: str) -> str:
        previous = self.translator.get_language()
        self.translator.set_language(lang)
        current = self.translator.get_language()
        if current != previous:
            self.language_changed.emit(current)
        return current

    # =========================================================================
    # Export
    # =========================================================================

    def default_export_filename(self, format_name: str) -> str:
        return self.export_service.default_filename(format_name, now=self.clock())

    def export(self, format_name: str, file_path: Path) -> OperationResult[dict]:
        """Export the full log to a file."""
        try:
            summary = self.export_service.export(
                self.store.entries, format_name, Path(file_path), lang=self.language
            )
        except ExportException as e:
            self._emit_error("export", str(e))
            return OperationResult.fail(message=tr("export.failed"), errors=[str(e)])

        self._emit_completed("export", True)
        return OperationResult.ok(
            data=summary,
            message=tr("export.success", count=summary["record_count"], path=summary["file_path"])
        )
