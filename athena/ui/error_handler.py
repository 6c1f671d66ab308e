# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from athena.services.translation_manager import tr


class ErrorHandler:
    """Shows translated message dialogs."""

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        """Show error dialog with translated title."""
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = None):
        """Show warning dialog with translated title."""
        QMessageBox.warning(parent, title or tr("dialog.warning"), message)

    @staticmethod
    def show_success(parent: QWidget, message: str, title: str = None):
        """Show success dialog with translated title."""
        QMessageBox.information(parent, title or tr("dialog.success"), message)
