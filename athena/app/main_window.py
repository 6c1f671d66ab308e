# -*- coding: utf-8 -*-
"""
Main application window: splash page, then the entry wizard.
"""

from typing import Optional

from PyQt5.QtWidgets import QFrame, QLabel, QMainWindow, QShortcut, QStackedWidget, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QKeySequence

from athena.app.config import Config
from athena.controllers.wizard_controller import EntryWizardController
from athena.repositories.log_store import EntryLogStore
from athena.services.platform_bridge import DesktopPlatformBridge
from athena.services.translation_manager import get_layout_direction, tr
from athena.ui.design_system import Colors
from athena.ui.wizards.entry_log.entry_wizard import EntryWizard
from athena.utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Top-level window hosting the splash page and the wizard."""

    def __init__(self, store: EntryLogStore, splash_ms: Optional[int] = None, parent=None):
        super().__init__(parent)
        self.store = store
        self.controller = EntryWizardController(
            store,
            platform=DesktopPlatformBridge(window=self),
            parent=self
        )
        self.controller.language_changed.connect(self._on_language_changed)

        self._setup_window()
        self._create_widgets()
        self._setup_shortcuts()

        self.controller.apply_platform_style()
        self._start_splash(Config.SPLASH_DURATION_MS if splash_ms is None else splash_ms)

    def _setup_window(self):
        self.setWindowTitle(tr("app.title"))
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())
        self.setStyleSheet(f"QMainWindow {{ background-color: {Colors.BACKGROUND}; }}")

    def _create_widgets(self):
        self.stack = QStackedWidget()
        self.splash = self._create_splash()
        self.wizard = EntryWizard(self.controller)
        self.stack.addWidget(self.splash)
        self.stack.addWidget(self.wizard)
        self.setCentralWidget(self.stack)

    def _create_splash(self) -> QWidget:
        splash = QFrame()
        splash.setObjectName("splash")
        splash.setStyleSheet(f"QFrame#splash {{ background-color: {Colors.HEADER_BG}; }}")
        layout = QVBoxLayout(splash)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(8)

        title = QLabel(Config.APP_NAME)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Colors.TEXT_ON_DARK}; font-size: 32pt; font-weight: bold; letter-spacing: 6px;")
        layout.addWidget(title)

        self.splash_subtitle = QLabel(tr("app.subtitle"))
        self.splash_subtitle.setAlignment(Qt.AlignCenter)
        self.splash_subtitle.setStyleSheet(f"color: {Colors.HEADER_ACCENT}; font-size: 9pt; font-weight: bold;")
        layout.addWidget(self.splash_subtitle)
        return splash

    def _setup_shortcuts(self):
        # Language toggle: Ctrl+L
        self.lang_shortcut = QShortcut(QKeySequence("Ctrl+L"), self)
        self.lang_shortcut.activated.connect(self.controller.toggle_language)

    def _start_splash(self, duration_ms: int):
        self.stack.setCurrentWidget(self.splash)
        QTimer.singleShot(max(0, duration_ms), self.show_wizard)

    def show_wizard(self):
        """Dismiss the splash page."""
        if self.stack.currentWidget() is not self.wizard:
            logger.info("Splash dismissed")
            self.stack.setCurrentWidget(self.wizard)

    @property
    def splash_visible(self) -> bool:
        return self.stack.currentWidget() is self.splash

    def _on_language_changed(self, lang: str):
        self.setLayoutDirection(get_layout_direction())
        self.setWindowTitle(tr("app.title"))
        self.splash_subtitle.setText(tr("app.subtitle"))
