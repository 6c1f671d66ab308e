# -*- coding: utf-8 -*-
"""
Reusable UI components.
"""

from .action_button import ActionButton
from .empty_state import EmptyState
from .entry_card import EntryCard

__all__ = ["ActionButton", "EmptyState", "EntryCard"]
