# -*- coding: utf-8 -*-
"""
Platform bridge - optional host integrations.

The form logic asks the bridge for status-bar styling and tactile feedback
without knowing what the host supports. NullPlatformBridge does nothing;
DesktopPlatformBridge maps the calls onto Qt equivalents.
"""

from abc import ABC, abstractmethod
from typing import Optional

from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import QApplication, QMainWindow

from athena.app.config import Config
from athena.utils.logger import get_logger

logger = get_logger(__name__)


class StatusBarStyle:
    DARK = "dark"
    LIGHT = "light"


class ImpactStyle:
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class PlatformBridge(ABC):
    """Capability interface for host-platform integrations."""

    @abstractmethod
    def apply_status_bar_style(self, style: str, color: str):
        """Style the host status bar."""
        pass

    @abstractmethod
    def impact(self, style: str = ImpactStyle.LIGHT):
        """Request a short tactile (or audible) feedback."""
        pass


class NullPlatformBridge(PlatformBridge):
    """Bridge for hosts without any of the integrations."""

    def apply_status_bar_style(self, style: str, color: str):
        pass

    def impact(self, style: str = ImpactStyle.LIGHT):
        pass


class DesktopPlatformBridge(PlatformBridge):
    """
    Desktop mapping of the integrations.

    - status bar: colours the main window's QStatusBar
    - impact: system beep, only when Config.FEEDBACK_BEEP is enabled
    """

    def __init__(self, window: Optional[QMainWindow] = None, beep: Optional[bool] = None):
        self.window = window
        self.beep = Config.FEEDBACK_BEEP if beep is None else beep

    def apply_status_bar_style(self, style: str, color: str):
        if self.window is None:
            return

        background = QColor(color)
        if not background.isValid():
            raise ValueError(f"Invalid status bar color: {color}")

        foreground = "#FFFFFF" if style == StatusBarStyle.DARK else "#1A2A44"
        self.window.statusBar().setStyleSheet(
            f"QStatusBar {{ background-color: {background.name()}; color: {foreground}; }}"
        )

    def impact(self, style: str = ImpactStyle.LIGHT):
        if self.beep:
            QApplication.beep()
