# -*- coding: utf-8 -*-
"""
Empty State Component
Shown in the history when the log has no entries.
"""

from PyQt5.QtWidgets import QFrame, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from ..design_system import BorderRadius, Colors


class EmptyState(QFrame):
    """Dashed card with an icon glyph and a single message line."""

    def __init__(self, icon_text: str = "📄", title: str = "", parent=None):
        super().__init__(parent)
        self.setObjectName("EmptyState")
        self.setStyleSheet(f"""
            QFrame#EmptyState {{
                background-color: {Colors.SURFACE};
                border: 2px dashed {Colors.BORDER};
                border-radius: {BorderRadius.LG}px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setContentsMargins(40, 48, 40, 48)
        layout.setSpacing(16)

        self._icon_label = QLabel(icon_text)
        self._icon_label.setAlignment(Qt.AlignCenter)
        self._icon_label.setStyleSheet(f"color: {Colors.BORDER}; font-size: 32pt; background: transparent;")
        layout.addWidget(self._icon_label)

        self._title_label = QLabel(title)
        self._title_label.setAlignment(Qt.AlignCenter)
        self._title_label.setStyleSheet(
            f"color: {Colors.TEXT_SECONDARY}; font-size: 10pt; font-weight: bold; background: transparent;"
        )
        layout.addWidget(self._title_label)

    def set_title(self, title: str):
        self._title_label.setText(title)

    def title(self) -> str:
        return self._title_label.text()
