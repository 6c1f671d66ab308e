# -*- coding: utf-8 -*-
"""
Operator Step - Step 1 of the Entry Wizard.

Identifies the post chief on duty and the access point being logged.
The Next button stays disabled while the name field is empty.
"""

from PyQt5.QtWidgets import QButtonGroup, QFrame, QGridLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout
from PyQt5.QtCore import Qt

from athena.app.config import Steps
from athena.models.reference_data import access_points
from athena.services.translation_manager import tr
from athena.ui.components.action_button import ActionButton
from athena.ui.design_system import Colors, ComponentStyles
from athena.ui.wizards.framework import BaseStep
from athena.utils.logger import get_logger

logger = get_logger(__name__)


class OperatorStep(BaseStep):
    """Step 1: post chief name and access point."""

    STEP_NUMBER = Steps.OPERATOR

    def setup_ui(self):
        self.setStyleSheet(f"background-color: {Colors.BACKGROUND};")

        card = QFrame()
        card.setObjectName("operatorCard")
        card.setStyleSheet(ComponentStyles.get_card_style("operatorCard") + ComponentStyles.get_input_style())
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(12)

        self.operator_label = QLabel()
        self.operator_label.setStyleSheet(ComponentStyles.get_section_label_style())
        card_layout.addWidget(self.operator_label)

        self.operator_input = QLineEdit()
        self.operator_input.textChanged.connect(self._on_operator_changed)
        card_layout.addWidget(self.operator_input)

        self.access_point_label = QLabel()
        self.access_point_label.setStyleSheet(ComponentStyles.get_section_label_style())
        card_layout.addWidget(self.access_point_label)

        # One checkable button per access point
        grid = QGridLayout()
        grid.setSpacing(8)
        self.access_point_group = QButtonGroup(self)
        self.access_point_group.setExclusive(True)
        self.access_point_buttons = {}
        for column, label in enumerate(access_points()):
            button = QPushButton(label)
            button.setCheckable(True)
            button.setCursor(Qt.PointingHandCursor)
            button.setStyleSheet(ComponentStyles.get_choice_style())
            button.clicked.connect(lambda checked, value=label: self._on_access_point_clicked(value))
            self.access_point_group.addButton(button)
            self.access_point_buttons[label] = button
            grid.addWidget(button, 0, column)
        card_layout.addLayout(grid)

        self.main_layout.addWidget(card)
        self.main_layout.addStretch()

        self.next_button = ActionButton("", variant="primary")
        self.next_button.clicked.connect(self._on_next_clicked)
        self.main_layout.addWidget(self.next_button)

    def retranslate_ui(self):
        self.operator_label.setText(tr("form.operator"))
        self.operator_input.setPlaceholderText(tr("form.operator_placeholder"))
        self.access_point_label.setText(tr("form.access_point"))
        self.next_button.setText(tr("button.next"))

    def populate_data(self):
        if self.operator_input.text() != self.context.operator_name:
            self.operator_input.setText(self.context.operator_name)
        button = self.access_point_buttons.get(self.context.access_point)
        if button is not None:
            button.setChecked(True)
        self._refresh_next_button()

    def get_step_title(self) -> str:
        return tr("form.operator")

    # =========================================================================
    # Handlers
    # =========================================================================

    def _on_operator_changed(self, text: str):
        self.update_field("operator_name", text)
        self._refresh_next_button()

    def _on_access_point_clicked(self, label: str):
        self.controller.select_access_point(label)

    def _on_next_clicked(self):
        self.controller.next_step()

    def _refresh_next_button(self):
        self.next_button.setEnabled(self.controller.can_leave_operator_step())
