# -*- coding: utf-8 -*-
"""
Details Step - Step 3 of the Entry Wizard.

Shows the visitor block or the vehicle block depending on the chosen entry
type, followed by the fields common to both. No field is mandatory.
"""

from typing import Dict

from PyQt5.QtWidgets import (
    QButtonGroup, QFrame, QGridLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QScrollArea, QTimeEdit, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt, QTime

from athena.app.config import Steps
from athena.models.log_entry import EntryType
from athena.models.reference_data import VEHICLE_TYPES
from athena.services.translation_manager import get_language, tr
from athena.ui.components.action_button import ActionButton
from athena.ui.design_system import Colors, ComponentStyles
from athena.ui.error_handler import ErrorHandler
from athena.ui.wizards.framework import BaseStep
from athena.utils.logger import get_logger

logger = get_logger(__name__)

QT_TIME_FORMAT = "HH:mm"

# (field name, translation key) of plain text inputs per block
VISITOR_TEXT_FIELDS = (
    ("visitor_name", "form.visitor_name"),
    ("person_visited", "form.person_visited"),
    ("cin", "form.cin"),
)
VEHICLE_TEXT_FIELDS = (
    ("driver_name", "form.driver_name"),
    ("bon_number", "form.bon_number"),
)
COMMON_TEXT_FIELDS = (
    ("registration", "form.registration"),
    ("company", "form.company"),
    ("exit_time", "form.exit_time"),
    ("destination", "form.destination"),
    ("observation", "form.observation"),
)


class DetailsStep(BaseStep):
    """Step 3: visitor or vehicle details."""

    STEP_NUMBER = Steps.DETAILS

    def setup_ui(self):
        self.setStyleSheet(f"background-color: {Colors.BACKGROUND};" + ComponentStyles.get_input_style())
        self.inputs: Dict[str, QLineEdit] = {}
        self.labels: Dict[str, QLabel] = {}

        top_row = QHBoxLayout()
        self.back_button = ActionButton("", variant="ghost", height=32)
        self.back_button.clicked.connect(self._on_back_clicked)
        top_row.addWidget(self.back_button)
        top_row.addStretch()
        self.title_label = QLabel()
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY}; font-size: 14pt; font-weight: bold;")
        top_row.addWidget(self.title_label)
        self.main_layout.addLayout(top_row)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(16)

        self.visitor_block = self._create_visitor_block()
        content_layout.addWidget(self.visitor_block)

        self.vehicle_block = self._create_vehicle_block()
        content_layout.addWidget(self.vehicle_block)

        content_layout.addWidget(self._create_common_block())
        content_layout.addStretch()

        scroll.setWidget(content)
        self.main_layout.addWidget(scroll, 1)

        self.save_button = ActionButton("", variant="success")
        self.save_button.clicked.connect(self._on_save_clicked)
        self.main_layout.addWidget(self.save_button)

    # =========================================================================
    # Blocks
    # =========================================================================

    def _create_card(self, object_name: str):
        card = QFrame()
        card.setObjectName(object_name)
        card.setStyleSheet(ComponentStyles.get_card_style(object_name))
        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(8)
        return card, layout

    def _add_text_field(self, layout: QVBoxLayout, name: str, key: str):
        label = QLabel()
        label.setStyleSheet(ComponentStyles.get_section_label_style())
        label.setProperty("tr_key", key)
        line_edit = QLineEdit()
        line_edit.textChanged.connect(lambda text, field=name: self.update_field(field, text))
        layout.addWidget(label)
        layout.addWidget(line_edit)
        self.labels[name] = label
        self.inputs[name] = line_edit

    def _add_section_label(self, layout: QVBoxLayout, name: str, key: str) -> QLabel:
        label = QLabel()
        label.setStyleSheet(ComponentStyles.get_section_label_style())
        label.setProperty("tr_key", key)
        layout.addWidget(label)
        self.labels[name] = label
        return label

    def _create_visitor_block(self) -> QFrame:
        card, layout = self._create_card("visitorCard")
        for name, key in VISITOR_TEXT_FIELDS:
            self._add_text_field(layout, name, key)

        self._add_section_label(layout, "is_announced", "form.announced_status")
        row = QHBoxLayout()
        self.announced_group = QButtonGroup(self)
        self.announced_button = QPushButton()
        self.not_announced_button = QPushButton()
        for button, checked_bg in ((self.announced_button, Colors.SUCCESS),
                                   (self.not_announced_button, Colors.DANGER)):
            button.setCheckable(True)
            button.setCursor(Qt.PointingHandCursor)
            button.setStyleSheet(ComponentStyles.get_choice_style(checked_bg=checked_bg))
            self.announced_group.addButton(button)
            row.addWidget(button)
        self.announced_button.clicked.connect(lambda: self._on_announced_clicked(True))
        self.not_announced_button.clicked.connect(lambda: self._on_announced_clicked(False))
        layout.addLayout(row)
        return card

    def _create_vehicle_block(self) -> QFrame:
        card, layout = self._create_card("vehicleCard")

        self._add_section_label(layout, "vehicle_type_id", "form.vehicle_type")
        grid = QGridLayout()
        grid.setSpacing(8)
        self.vehicle_type_group = QButtonGroup(self)
        self.vehicle_type_buttons: Dict[str, QPushButton] = {}
        for index, vehicle_type in enumerate(VEHICLE_TYPES):
            button = QPushButton()
            button.setCheckable(True)
            button.setCursor(Qt.PointingHandCursor)
            button.setStyleSheet(ComponentStyles.get_choice_style(checked_bg=Colors.SUCCESS))
            button.clicked.connect(lambda checked, type_id=vehicle_type.type_id: self._on_vehicle_type_clicked(type_id))
            self.vehicle_type_group.addButton(button)
            self.vehicle_type_buttons[vehicle_type.type_id] = button
            grid.addWidget(button, index // 2, index % 2)
        layout.addLayout(grid)

        for name, key in VEHICLE_TEXT_FIELDS:
            self._add_text_field(layout, name, key)
        return card

    def _create_common_block(self) -> QFrame:
        card, layout = self._create_card("commonCard")

        self._add_section_label(layout, "entry_time", "form.entry_time")
        self.entry_time_edit = QTimeEdit()
        self.entry_time_edit.setDisplayFormat(QT_TIME_FORMAT)
        self.entry_time_edit.timeChanged.connect(self._on_entry_time_changed)
        layout.addWidget(self.entry_time_edit)

        for name, key in COMMON_TEXT_FIELDS:
            self._add_text_field(layout, name, key)
        self.inputs["exit_time"].setPlaceholderText("--:--")
        return card

    # =========================================================================
    # BaseStep hooks
    # =========================================================================

    def retranslate_ui(self):
        self.back_button.setText(tr("button.back"))
        self.save_button.setText(tr("button.save"))
        self.title_label.setText(self.get_step_title())
        for label in self.labels.values():
            label.setText(tr(label.property("tr_key")))
        self.announced_button.setText(tr("form.announced"))
        self.not_announced_button.setText(tr("form.not_announced"))
        lang = get_language()
        for vehicle_type in VEHICLE_TYPES:
            self.vehicle_type_buttons[vehicle_type.type_id].setText(vehicle_type.display_label(lang))

    def populate_data(self):
        is_vehicle = self.context.entry_type == EntryType.VEHICLE
        self.visitor_block.setVisible(not is_vehicle)
        self.vehicle_block.setVisible(is_vehicle)
        self.title_label.setText(self.get_step_title())

        for name, line_edit in self.inputs.items():
            value = getattr(self.context, name)
            if line_edit.text() != value:
                line_edit.setText(value)

        entry_time = QTime.fromString(self.context.entry_time, QT_TIME_FORMAT)
        if entry_time.isValid():
            self.entry_time_edit.setTime(entry_time)

        if self.context.is_announced:
            self.announced_button.setChecked(True)
        else:
            self.not_announced_button.setChecked(True)

        button = self.vehicle_type_buttons.get(self.context.vehicle_type_id)
        if button is not None:
            button.setChecked(True)

    def get_step_title(self) -> str:
        if self.context.entry_type == EntryType.VEHICLE:
            return tr("form.vehicle_title")
        return tr("form.visitor_title")

    # =========================================================================
    # Handlers
    # =========================================================================

    def _on_entry_time_changed(self, value: QTime):
        self.update_field("entry_time", value.toString(QT_TIME_FORMAT))

    def _on_announced_clicked(self, announced: bool):
        self.controller.set_announced(announced)

    def _on_vehicle_type_clicked(self, type_id: str):
        self.controller.select_vehicle_type(type_id)

    def _on_back_clicked(self):
        self.controller.navigate_to(Steps.TYPE_SELECTION)

    def _on_save_clicked(self):
        result = self.controller.save_entry()
        if not result.success:
            ErrorHandler.show_error(self, result.message)
