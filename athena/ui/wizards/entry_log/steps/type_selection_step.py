# -*- coding: utf-8 -*-
"""
Type Selection Step - Step 2 of the Entry Wizard.

Two large choices (visitor, vehicle); picking one opens the detail form.
"""

from PyQt5.QtWidgets import QHBoxLayout, QLabel, QPushButton
from PyQt5.QtCore import Qt

from athena.app.config import Steps
from athena.models.log_entry import EntryType
from athena.services.translation_manager import tr
from athena.ui.components.action_button import ActionButton
from athena.ui.design_system import BorderRadius, Colors
from athena.ui.wizards.framework import BaseStep


class TypeSelectionStep(BaseStep):
    """Step 2: visitor or vehicle."""

    STEP_NUMBER = Steps.TYPE_SELECTION

    def setup_ui(self):
        self.setStyleSheet(f"background-color: {Colors.BACKGROUND};")

        top_row = QHBoxLayout()
        self.back_button = ActionButton("", variant="ghost", height=32)
        self.back_button.clicked.connect(self._on_back_clicked)
        top_row.addWidget(self.back_button)
        top_row.addStretch()
        self.main_layout.addLayout(top_row)

        self.title_label = QLabel()
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY}; font-size: 16pt; font-weight: bold;")
        self.main_layout.addWidget(self.title_label)

        self.visitor_button = self._create_choice_button(Colors.PRIMARY, Colors.PRIMARY_LIGHT)
        self.visitor_button.clicked.connect(lambda: self._on_type_clicked(EntryType.VISITOR))
        self.main_layout.addWidget(self.visitor_button)

        self.vehicle_button = self._create_choice_button(Colors.SUCCESS, Colors.SUCCESS_LIGHT)
        self.vehicle_button.clicked.connect(lambda: self._on_type_clicked(EntryType.VEHICLE))
        self.main_layout.addWidget(self.vehicle_button)

        self.main_layout.addStretch()

    def _create_choice_button(self, accent: str, background: str) -> QPushButton:
        button = QPushButton()
        button.setCursor(Qt.PointingHandCursor)
        button.setMinimumHeight(140)
        button.setStyleSheet(f"""
            QPushButton {{
                background-color: {Colors.SURFACE};
                color: {Colors.TEXT_PRIMARY};
                border: 2px solid {Colors.BORDER};
                border-radius: {BorderRadius.LG}px;
                font-size: 14pt;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {background};
                border-color: {accent};
                color: {accent};
            }}
        """)
        return button

    def retranslate_ui(self):
        self.back_button.setText(tr("button.back"))
        self.title_label.setText(tr("wizard.type_selection"))
        self.visitor_button.setText(tr("entry.visitor"))
        self.vehicle_button.setText(tr("entry.vehicle"))

    def get_step_title(self) -> str:
        return tr("wizard.type_selection")

    def _on_back_clicked(self):
        self.controller.navigate_to(Steps.OPERATOR)

    def _on_type_clicked(self, entry_type: EntryType):
        self.controller.select_entry_type(entry_type)
