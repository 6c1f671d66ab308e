# -*- coding: utf-8 -*-
"""
ATHENA Design System

Colors, spacing and reusable stylesheet snippets for the access-log screens.
"""


class Colors:
    """Color palette."""
    HEADER_BG = "#1A2A44"  # Dark navy header / splash
    HEADER_ACCENT = "#93C5FD"

    PRIMARY = "#2563EB"
    PRIMARY_LIGHT = "#EFF6FF"
    PRIMARY_BORDER = "#BFDBFE"

    SUCCESS = "#16A34A"
    SUCCESS_LIGHT = "#F0FDF4"
    DANGER = "#DC2626"
    DANGER_LIGHT = "#FEF2F2"

    BACKGROUND = "#F8FAFC"
    SURFACE = "#FFFFFF"
    INPUT_BG = "#F1F5F9"
    BORDER = "#E2E8F0"

    TEXT_PRIMARY = "#1E293B"
    TEXT_SECONDARY = "#94A3B8"
    TEXT_ON_DARK = "#FFFFFF"


class BorderRadius:
    SM = 8
    MD = 16
    LG = 24


class ComponentStyles:
    """Reusable component stylesheets."""

    @staticmethod
    def get_card_style(object_name: str) -> str:
        return f"""
            QFrame#{object_name} {{
                background-color: {Colors.SURFACE};
                border: 1px solid {Colors.BORDER};
                border-radius: {BorderRadius.LG}px;
            }}
        """

    @staticmethod
    def get_input_style() -> str:
        return f"""
            QLineEdit, QTextEdit, QTimeEdit {{
                background-color: {Colors.INPUT_BG};
                border: 2px solid transparent;
                border-radius: {BorderRadius.MD}px;
                padding: 12px;
                color: {Colors.TEXT_PRIMARY};
                font-size: 11pt;
            }}
            QLineEdit:focus, QTextEdit:focus, QTimeEdit:focus {{
                border-color: {Colors.PRIMARY};
                background-color: {Colors.SURFACE};
            }}
        """

    @staticmethod
    def get_choice_style(checked_bg: str = Colors.PRIMARY, checked_fg: str = Colors.TEXT_ON_DARK) -> str:
        """Toggle-like buttons (access points, vehicle types, announced status)."""
        return f"""
            QPushButton {{
                background-color: {Colors.INPUT_BG};
                color: {Colors.TEXT_SECONDARY};
                border: 2px solid transparent;
                border-radius: {BorderRadius.MD}px;
                padding: 12px 8px;
                font-weight: bold;
            }}
            QPushButton:checked {{
                background-color: {checked_bg};
                color: {checked_fg};
                border-color: {checked_bg};
            }}
        """

    @staticmethod
    def get_section_label_style() -> str:
        return f"color: {Colors.TEXT_SECONDARY}; font-size: 8pt; font-weight: bold; background: transparent;"
