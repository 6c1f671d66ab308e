# -*- coding: utf-8 -*-
"""
Entry Wizard - the four-step access-log screen.
"""

from typing import List

from athena.app.config import Steps
from athena.ui.wizards.framework import BaseStep
from athena.ui.wizards.framework.base_wizard import BaseWizard

from .steps import DetailsStep, HistoryStep, OperatorStep, TypeSelectionStep


class EntryWizard(BaseWizard):
    """Operator → type → details → history."""

    def create_steps(self) -> List[BaseStep]:
        return [
            OperatorStep(self.controller),
            TypeSelectionStep(self.controller),
            DetailsStep(self.controller),
            HistoryStep(self.controller),
        ]

    def create_nav_items(self) -> List[tuple]:
        return [
            (Steps.OPERATOR, "nav.form", (Steps.OPERATOR, Steps.TYPE_SELECTION, Steps.DETAILS)),
            (Steps.HISTORY, "nav.history", (Steps.HISTORY,)),
        ]

    def get_step_widget(self, step: int) -> BaseStep:
        return self._step_widgets[step]
