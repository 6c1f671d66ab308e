# -*- coding: utf-8 -*-
"""
History Step - Step 4 of the Entry Wizard.

Lists saved entries newest first, with Excel/PDF export of the full log and
a shortcut back to the type selection.
"""

from pathlib import Path

from PyQt5.QtWidgets import QFileDialog, QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt

from athena.app.config import Steps
from athena.services.export.export_manager import ExportManager
from athena.services.translation_manager import tr
from athena.ui.components.action_button import ActionButton
from athena.ui.components.empty_state import EmptyState
from athena.ui.components.entry_card import EntryCard
from athena.ui.design_system import BorderRadius, Colors
from athena.ui.error_handler import ErrorHandler
from athena.ui.wizards.framework import BaseStep
from athena.utils.logger import get_logger

logger = get_logger(__name__)

FILE_FILTERS = {
    ExportManager.EXCEL: "Excel (*.xlsx)",
    ExportManager.PDF: "PDF (*.pdf)",
}


class HistoryStep(BaseStep):
    """Step 4: saved entries and exports."""

    STEP_NUMBER = Steps.HISTORY

    def __init__(self, controller, parent=None):
        super().__init__(controller, parent)
        self._cards = []
        self.empty_state = None

    def setup_ui(self):
        self.setStyleSheet(f"background-color: {Colors.BACKGROUND};")

        header_row = QHBoxLayout()
        title_col = QVBoxLayout()
        title_col.setSpacing(2)
        self.title_label = QLabel()
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY}; font-size: 14pt; font-weight: bold;")
        self.count_label = QLabel()
        self.count_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 8pt; font-weight: bold;")
        title_col.addWidget(self.title_label)
        title_col.addWidget(self.count_label)
        header_row.addLayout(title_col)
        header_row.addStretch()

        self.excel_button = self._create_export_button(Colors.SUCCESS, Colors.SUCCESS_LIGHT)
        self.excel_button.clicked.connect(lambda: self._on_export_clicked(ExportManager.EXCEL))
        header_row.addWidget(self.excel_button)

        self.pdf_button = self._create_export_button(Colors.DANGER, Colors.DANGER_LIGHT)
        self.pdf_button.clicked.connect(lambda: self._on_export_clicked(ExportManager.PDF))
        header_row.addWidget(self.pdf_button)
        self.main_layout.addLayout(header_row)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        list_widget = QWidget()
        self.list_layout = QVBoxLayout(list_widget)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(12)
        self.list_layout.addStretch()
        scroll.setWidget(list_widget)
        self.main_layout.addWidget(scroll, 1)

        self.new_entry_button = ActionButton("", variant="dashed", height=48)
        self.new_entry_button.clicked.connect(self._on_new_entry_clicked)
        self.main_layout.addWidget(self.new_entry_button)

    def _create_export_button(self, color: str, background: str) -> QPushButton:
        button = QPushButton()
        button.setCursor(Qt.PointingHandCursor)
        button.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {color};
                border: none;
                border-radius: {BorderRadius.SM}px;
                padding: 8px 12px;
                font-size: 8pt;
                font-weight: bold;
            }}
        """)
        return button

    def retranslate_ui(self):
        self.title_label.setText(tr("history.title"))
        self.excel_button.setText(tr("history.export_excel"))
        self.pdf_button.setText(tr("history.export_pdf"))
        self.new_entry_button.setText(tr("history.new_entry"))
        if self._is_initialized:
            self.populate_data()
        else:
            self.count_label.setText(tr("history.count", count=len(self.controller.store)))

    def populate_data(self):
        """Rebuild the entry list from the store."""
        self.count_label.setText(tr("history.count", count=len(self.controller.store)))

        for card in self._cards:
            self.list_layout.removeWidget(card)
            card.deleteLater()
        self._cards = []
        if self.empty_state is not None:
            self.list_layout.removeWidget(self.empty_state)
            self.empty_state.deleteLater()
            self.empty_state = None

        entries = self.controller.store.entries
        if not entries:
            self.empty_state = EmptyState(title=tr("history.no_data"))
            self.list_layout.insertWidget(0, self.empty_state)
            return

        for index, entry in enumerate(entries):
            card = EntryCard(entry)
            self.list_layout.insertWidget(index, card)
            self._cards.append(card)

    def get_step_title(self) -> str:
        return tr("history.title")

    # =========================================================================
    # Handlers
    # =========================================================================

    def _on_new_entry_clicked(self):
        self.controller.start_new_entry()

    def _on_export_clicked(self, format_name: str):
        default_name = self.controller.default_export_filename(format_name)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            tr("export.save_dialog"),
            default_name,
            FILE_FILTERS.get(format_name, "")
        )
        if not file_path:
            return
        self.export_to(format_name, Path(file_path))

    def export_to(self, format_name: str, file_path: Path):
        result = self.controller.export(format_name, file_path)
        if result.success:
            ErrorHandler.show_success(self, result.message)
        else:
            logger.error(f"Export failed: {result.errors}")
            ErrorHandler.show_error(self, result.message)
