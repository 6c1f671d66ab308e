# -*- coding: utf-8 -*-
"""
Application logging.

Everything logs under the "athena" logger: a rotating file in Config.LOGS_DIR
keeps DEBUG and up, the console shows INFO and up.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from athena.app.config import Config

ROOT_NAME = "athena"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_configured = False


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str = None) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def setup_logger() -> logging.Logger:
    """Attach the file and console handlers, replacing any from a previous call."""
    global _configured

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger(ROOT_NAME)
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    root.addHandler(_handler(
        RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        ),
        logging.DEBUG, FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root.addHandler(_handler(logging.StreamHandler(sys.stdout), logging.INFO, CONSOLE_FORMAT))

    _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, e.g. get_logger(__name__) in athena.services.x gives
    "athena.services.x". Configures logging on first use.
    """
    if not _configured:
        setup_logger()
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(ROOT_NAME).getChild(name)
