# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent.parent

_DATA_DIR = Path(os.getenv("ATHENA_DATA_DIR", str(_PROJECT_ROOT / "data")))
_LOGS_DIR = Path(os.getenv("ATHENA_LOGS_DIR", str(_PROJECT_ROOT / "logs")))

# "fr" or "ar"
_DEFAULT_LANGUAGE = os.getenv("ATHENA_LANGUAGE", "fr").lower()

# Comma-separated gate labels, e.g. "P1,P2,P3"
_ACCESS_POINTS = tuple(
    label.strip()
    for label in os.getenv("ATHENA_ACCESS_POINTS", "P1,P2,P3").split(",")
    if label.strip()
)

_SPLASH_DURATION_MS = int(os.getenv("ATHENA_SPLASH_MS", "2500"))
_FEEDBACK_BEEP = os.getenv("ATHENA_FEEDBACK_BEEP", "false").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "ATHENA"
    APP_TITLE: str = "ATHENA - Registre d'accès"
    APP_TITLE_AR: str = "أثينا - سجل الدخول"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "ATHENA Surveillance"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = _LOGS_DIR

    # Local storage: one JSON file per key under DATA_DIR
    STORAGE_KEY: str = "athena_logs"

    # Language
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE
    SUPPORTED_LANGUAGES: Tuple[str, ...] = ("fr", "ar")

    # Reference data
    ACCESS_POINTS: Tuple[str, ...] = _ACCESS_POINTS or ("P1", "P2", "P3")

    # Startup
    SPLASH_DURATION_MS: int = _SPLASH_DURATION_MS

    # Platform feedback (desktop stand-in for haptics)
    FEEDBACK_BEEP: bool = _FEEDBACK_BEEP

    # Logging
    LOG_FILE: str = "athena.log"
    LOG_PATH: Path = _LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 420
    WINDOW_MIN_HEIGHT: int = 760

    # Branding Colors
    PRIMARY_COLOR: str = "#2563EB"
    HEADER_COLOR: str = "#1A2A44"
    SUCCESS_COLOR: str = "#16A34A"
    ERROR_COLOR: str = "#DC2626"
    BACKGROUND_COLOR: str = "#F8FAFC"

    # Date/Time Formats
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"
    TIME_FORMAT: str = "%H:%M"
    EXPORT_DATE_FORMAT: str = "%Y-%m-%d"


# Wizard step numbers
class Steps:
    OPERATOR = 1
    TYPE_SELECTION = 2
    DETAILS = 3
    HISTORY = 4

    ALL = (OPERATOR, TYPE_SELECTION, DETAILS, HISTORY)
