# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for wizards.

Provides unified wizard UI with:
- Header with title, current date and language toggle
- Step container
- Bottom navigation bar
- Validation handling
"""

from typing import Dict, List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget
)
from PyQt5.QtCore import Qt

from athena.services.translation_manager import get_layout_direction, tr
from athena.ui.design_system import Colors
from athena.ui.error_handler import ErrorHandler
from athena.utils.datetime_utils import display_date
from athena.utils.logger import get_logger

from .base_step import BaseStep, StepValidationResult

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    The controller owns state and navigation; the wizard only mirrors the
    controller's current step in its stacked widget.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - create_nav_items(): Bottom navigation entries
    """

    def __init__(self, controller, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)
        self.controller = controller
        self.context = controller.context

        self.steps = self.create_steps()
        self._step_widgets: Dict[int, BaseStep] = {step.STEP_NUMBER: step for step in self.steps}
        self._nav_buttons: Dict[int, QPushButton] = {}

        self.controller.step_changed.connect(self._on_step_changed)
        self.controller.validation_failed.connect(self._on_validation_failed)
        self.controller.language_changed.connect(self._on_language_changed)

        self._setup_ui()
        self.setLayoutDirection(get_layout_direction())
        self._show_step(self.controller.current_step)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """
        Create and return list of wizard steps.

        Returns:
            List of BaseStep instances, one per step number
        """
        pass

    @abstractmethod
    def create_nav_items(self) -> List[tuple]:
        """
        Bottom navigation entries.

        Returns:
            List of (target_step, translation_key, active_steps)
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return tr("app.header_title")

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title, date and language toggle."""
        header = QFrame()
        header.setObjectName("wizardHeader")
        header.setStyleSheet(f"""
            QFrame#wizardHeader {{
                background-color: {Colors.HEADER_BG};
            }}
        """)

        layout = QHBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        title_col = QVBoxLayout()
        title_col.setSpacing(2)
        self.title_label = QLabel(self.get_wizard_title())
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_ON_DARK}; font-size: 13pt; font-weight: bold;")
        title_col.addWidget(self.title_label)

        self.date_label = QLabel(display_date())
        self.date_label.setStyleSheet(f"color: {Colors.HEADER_ACCENT}; font-size: 8pt; font-weight: bold;")
        title_col.addWidget(self.date_label)
        layout.addLayout(title_col)
        layout.addStretch()

        self.language_button = QPushButton(tr("button.language"))
        self.language_button.setCursor(Qt.PointingHandCursor)
        self.language_button.setFixedHeight(32)
        self.language_button.setStyleSheet(f"""
            QPushButton {{
                background-color: rgba(255, 255, 255, 0.1);
                color: {Colors.TEXT_ON_DARK};
                border: 1px solid rgba(255, 255, 255, 0.2);
                border-radius: 8px;
                padding: 0 12px;
                font-weight: bold;
            }}
        """)
        self.language_button.clicked.connect(self._handle_language_toggle)
        layout.addWidget(self.language_button)

        return header

    def _create_footer(self) -> QWidget:
        """Create bottom navigation bar."""
        footer = QFrame()
        footer.setObjectName("wizardFooter")
        footer.setStyleSheet(f"""
            QFrame#wizardFooter {{
                background-color: {Colors.SURFACE};
                border-top: 1px solid {Colors.BORDER};
            }}
            QPushButton {{
                background: transparent;
                border: none;
                color: {Colors.TEXT_SECONDARY};
                font-weight: bold;
                padding: 12px;
            }}
            QPushButton:checked {{
                color: {Colors.PRIMARY};
            }}
        """)

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 4, 20, 4)
        layout.setSpacing(12)

        self._nav_items = self.create_nav_items()
        for target, key, _active_steps in self._nav_items:
            button = QPushButton(tr(key))
            button.setCheckable(True)
            button.setCursor(Qt.PointingHandCursor)
            button.clicked.connect(lambda checked, step=target: self._handle_nav(step))
            layout.addWidget(button)
            self._nav_buttons[target] = button

        return footer

    # =========================================================================
    # Handlers
    # =========================================================================

    def _handle_nav(self, step: int):
        self.controller.navigate_to(step)
        self._update_nav_buttons()

    def _handle_language_toggle(self):
        self.controller.toggle_language()

    def _on_step_changed(self, old_step: int, new_step: int):
        """Handle step change."""
        old_widget = self._step_widgets.get(old_step)
        if old_widget is not None:
            old_widget.on_hide()
        self._show_step(new_step)

    def _show_step(self, step: int):
        widget = self._step_widgets.get(step)
        if widget is None:
            logger.error(f"No widget for step {step}")
            return
        widget.on_show()
        self.step_container.setCurrentWidget(widget)
        self._update_nav_buttons()

    def _update_nav_buttons(self):
        current = self.controller.current_step
        for target, _key, active_steps in self._nav_items:
            self._nav_buttons[target].setChecked(current in active_steps)

    def _on_language_changed(self, lang: str):
        self.setLayoutDirection(get_layout_direction())
        self.title_label.setText(self.get_wizard_title())
        self.language_button.setText(tr("button.language"))
        for target, key, _active_steps in self._nav_items:
            self._nav_buttons[target].setText(tr(key))
        for step in self.steps:
            step.on_language_changed(lang)

    def _on_validation_failed(self, result: StepValidationResult):
        """Handle validation failure."""
        errors = "\n".join(f"• {error}" for error in result.errors)
        warnings = "\n".join(f"• {warning}" for warning in result.warnings)

        message = ""
        if errors:
            message += errors
        if warnings:
            if message:
                message += "\n"
            message += warnings

        ErrorHandler.show_warning(
            self,
            message or tr("validation.check_data"),
            tr("dialog.warning")
        )
