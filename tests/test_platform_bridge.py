# -*- coding: utf-8 -*-
"""
Tests for the desktop platform bridge.
"""

import pytest
from PyQt5.QtWidgets import QApplication, QMainWindow

from athena.services.platform_bridge import DesktopPlatformBridge, NullPlatformBridge, StatusBarStyle


@pytest.fixture
def window(qtbot):
    main_window = QMainWindow()
    qtbot.addWidget(main_window)
    return main_window


def test_status_bar_is_coloured(window):
    """Status bar is painted with the requested colour."""
    DesktopPlatformBridge(window=window).apply_status_bar_style(StatusBarStyle.DARK, "#1A2A44")
    assert "#1a2a44" in window.statusBar().styleSheet()


def test_invalid_colour_raises(window):
    """Invalid colours raise ValueError."""
    with pytest.raises(ValueError):
        DesktopPlatformBridge(window=window).apply_status_bar_style(StatusBarStyle.DARK, "not-a-colour")


def test_without_window_is_silent():
    """Styling without a window does nothing."""
    DesktopPlatformBridge().apply_status_bar_style(StatusBarStyle.LIGHT, "#FFFFFF")


def test_beep_only_when_enabled(qapp, monkeypatch):
    """Feedback beeps only when beeping is enabled."""
    beeps = []
    monkeypatch.setattr(QApplication, "beep", staticmethod(lambda: beeps.append(1)))

    DesktopPlatformBridge(beep=False).impact()
    assert beeps == []

    DesktopPlatformBridge(beep=True).impact()
    assert beeps == [1]


def test_null_bridge_does_nothing():
    """The null bridge accepts every request."""
    bridge = NullPlatformBridge()
    bridge.impact()
    bridge.apply_status_bar_style(StatusBarStyle.DARK, "#000000")
