# -*- coding: utf-8 -*-
"""
Access-log wizard: operator, entry type, details, history.
"""

from .entry_context import EntryContext

__all__ = ["EntryContext"]
