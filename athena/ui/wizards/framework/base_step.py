# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's widgets
- retranslate_ui(): Refresh every visible string for the current language
- populate_data(): Refresh widgets from the wizard context (optional)
"""

from typing import List, Optional, TYPE_CHECKING
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass

from PyQt5.QtWidgets import QWidget, QVBoxLayout

if TYPE_CHECKING:
    from athena.controllers.wizard_controller import EntryWizardController


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Steps read and write form state through the wizard controller; they keep
    no state of their own beyond their widgets.
    """

    STEP_NUMBER: int = 0

    def __init__(self, controller: 'EntryWizardController', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            controller: The wizard controller owning context and store
            parent: Parent widget
        """
        super().__init__(parent)
        self.controller = controller
        self.context = controller.context
        self._is_initialized = False
        self._populating = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """Build the UI once."""
        if not self._is_initialized:
            self.setup_ui()
            self.retranslate_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the visible one."""
        self.initialize()
        self._populating = True
        try:
            self.populate_data()
        finally:
            self._populating = False

    def on_hide(self):
        """Called when the wizard moves to another step."""
        pass

    def on_language_changed(self, lang: str):
        if self._is_initialized:
            self.retranslate_ui()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts (called once)."""
        pass

    @abstractmethod
    def retranslate_ui(self):
        """Set all labels for the current language."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Refresh widgets from the context when the step is shown."""
        pass

    def get_step_title(self) -> str:
        return self.__class__.__name__

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def update_field(self, name: str, value):
        """Write one form field unless the widgets are being populated."""
        if not self._populating:
            self.controller.update_field(name, value)
