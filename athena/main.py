# -*- coding: utf-8 -*-
"""
ATHENA - Visitor and vehicle access log
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from athena.app.config import Config
from athena.app.main_window import MainWindow
from athena.repositories.local_storage import LocalStorage
from athena.repositories.log_store import EntryLogStore
from athena.utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        logger.info(f"Loading access log from {Config.DATA_DIR}")
        store = EntryLogStore(LocalStorage(Config.DATA_DIR))
        store.load()
        logger.info(f">> {len(store)} entries loaded")

        window = MainWindow(store)
        window.show()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        print(f"\n[ERROR] Fatal error during application startup: {e}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
