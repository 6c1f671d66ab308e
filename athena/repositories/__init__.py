# -*- coding: utf-8 -*-
"""
ATHENA persistence layer.
"""

from .local_storage import LocalStorage
from .log_store import EntryLogStore

__all__ = ["LocalStorage", "EntryLogStore"]
