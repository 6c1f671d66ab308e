# -*- coding: utf-8 -*-
"""
ATHENA Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import utc_timestamp, time_of_day, display_date, export_date

__all__ = [
    "get_logger",
    "setup_logger",
    "utc_timestamp",
    "time_of_day",
    "display_date",
    "export_date",
]
