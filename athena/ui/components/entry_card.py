# -*- coding: utf-8 -*-
"""
Entry Card Component
One history row: type badge, "access point • entry time", announced badge,
display name, and "company • registration".
"""

from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout
from PyQt5.QtCore import Qt

from athena.models.log_entry import LogEntry, VehicleEntry, VisitorEntry
from athena.services.translation_manager import tr

from ..design_system import BorderRadius, Colors, ComponentStyles


class EntryCard(QFrame):
    """Read-only card for a single log entry."""

    def __init__(self, entry: LogEntry, parent=None):
        super().__init__(parent)
        self.entry = entry
        self.setObjectName("EntryCard")
        self.setStyleSheet(ComponentStyles.get_card_style("EntryCard"))
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        if isinstance(self.entry, VisitorEntry):
            glyph, fg, bg = "👤", Colors.PRIMARY, Colors.PRIMARY_LIGHT
        elif isinstance(self.entry, VehicleEntry):
            glyph, fg, bg = "🚚", Colors.SUCCESS, Colors.SUCCESS_LIGHT
        else:
            raise TypeError(f"Not a log entry: {type(self.entry).__name__}")

        self.type_badge = QLabel(glyph)
        self.type_badge.setFixedSize(48, 48)
        self.type_badge.setAlignment(Qt.AlignCenter)
        self.type_badge.setStyleSheet(
            f"background-color: {bg}; color: {fg}; border-radius: {BorderRadius.MD}px; font-size: 16pt;"
        )
        layout.addWidget(self.type_badge)

        text_col = QVBoxLayout()
        text_col.setSpacing(2)

        top_row = QHBoxLayout()
        self.meta_label = QLabel(f"{self.entry.access_point} • {self.entry.entry_time}")
        self.meta_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 8pt; font-weight: bold;")
        top_row.addWidget(self.meta_label)
        top_row.addStretch()

        self.announced_badge = None
        if isinstance(self.entry, VisitorEntry) and self.entry.is_announced:
            self.announced_badge = QLabel(tr("form.announced"))
            self.announced_badge.setStyleSheet(
                f"background-color: {Colors.SUCCESS_LIGHT}; color: {Colors.SUCCESS}; "
                f"border-radius: 8px; padding: 1px 8px; font-size: 7pt; font-weight: bold;"
            )
            top_row.addWidget(self.announced_badge)
        text_col.addLayout(top_row)

        self.name_label = QLabel(self.entry.display_name)
        self.name_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY}; font-size: 11pt; font-weight: bold;")
        text_col.addWidget(self.name_label)

        self.detail_label = QLabel(f"{self.entry.company} • {self.entry.registration}")
        self.detail_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 8pt; font-weight: bold;")
        text_col.addWidget(self.detail_label)

        layout.addLayout(text_col, 1)
