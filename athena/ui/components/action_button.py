# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Variants:
- primary: blue solid (Next)
- success: green solid (Save)
- ghost: text-only (Back)
- dashed: light blue with dashed border (New entry)
"""

from PyQt5.QtWidgets import QPushButton, QSizePolicy
from PyQt5.QtCore import Qt

from ..design_system import BorderRadius, Colors


class ActionButton(QPushButton):
    """
    Full-width action button.

    Usage:
        btn = ActionButton(tr("button.next"), variant="primary")
        btn = ActionButton(tr("button.back"), variant="ghost", height=32)
    """

    def __init__(self, text: str, variant: str = "primary", height: int = 56, parent=None):
        super().__init__(text, parent)
        self.variant = variant
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumHeight(height)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self._apply_style(variant)

    def _apply_style(self, variant: str):
        if variant in ("primary", "success"):
            background = Colors.PRIMARY if variant == "primary" else Colors.SUCCESS
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {background};
                    color: {Colors.TEXT_ON_DARK};
                    border: none;
                    border-radius: {BorderRadius.LG}px;
                    font-size: 14pt;
                    font-weight: bold;
                }}
                QPushButton:disabled {{
                    background-color: {Colors.PRIMARY_BORDER};
                }}
            """)
        elif variant == "ghost":
            self.setSizePolicy(QSizePolicy.Maximum, QSizePolicy.Fixed)
            self.setStyleSheet(f"""
                QPushButton {{
                    background: transparent;
                    color: {Colors.TEXT_SECONDARY};
                    border: none;
                    font-size: 9pt;
                    font-weight: bold;
                }}
            """)
        elif variant == "dashed":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Colors.PRIMARY_LIGHT};
                    color: {Colors.PRIMARY};
                    border: 2px dashed {Colors.PRIMARY_BORDER};
                    border-radius: {BorderRadius.MD}px;
                    font-weight: bold;
                }}
            """)
        else:
            raise ValueError(f"Unknown button variant: {variant}")
