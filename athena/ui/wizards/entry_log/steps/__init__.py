# -*- coding: utf-8 -*-
"""
Entry wizard steps.
"""

from .operator_step import OperatorStep
from .type_selection_step import TypeSelectionStep
from .details_step import DetailsStep
from .history_step import HistoryStep

__all__ = ["OperatorStep", "TypeSelectionStep", "DetailsStep", "HistoryStep"]
