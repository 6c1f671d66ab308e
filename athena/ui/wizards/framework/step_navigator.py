# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous/direct)
- Transition checks before navigation
- Step state signals
"""

from typing import Callable, Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from athena.utils.logger import get_logger

from .base_step import StepValidationResult
from .wizard_context import WizardContext

logger = get_logger(__name__)

# (from_step, to_step) -> result; an invalid result blocks the move
TransitionGuard = Callable[[int, int], StepValidationResult]


class StepNavigator(QObject):
    """
    Tracks the current step number and moves between steps.

    Steps are identified by their number (e.g. 1..4), not by widget. Every
    move is checked by the optional transition guard unless validation is
    skipped explicitly.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    validation_failed = pyqtSignal(StepValidationResult)

    def __init__(
        self,
        context: WizardContext,
        steps: Sequence[int],
        guard: Optional[TransitionGuard] = None
    ):
        """
        Initialize the navigator.

        Args:
            context: Wizard context (its current_step is kept in sync)
            steps: Ordered step numbers
            guard: Optional transition check
        """
        super().__init__()
        if not steps:
            raise ValueError("A wizard needs at least one step")
        self.context = context
        self.steps = tuple(steps)
        self.guard = guard
        self.context.current_step = self.steps[0]

    @property
    def current_step(self) -> int:
        return self.context.current_step

    @property
    def current_index(self) -> int:
        return self.steps.index(self.current_step)

    def can_go_next(self) -> bool:
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def check_transition(self, target: int) -> StepValidationResult:
        """Run the guard for a move from the current step to target."""
        if self.guard is None:
            return StepValidationResult(is_valid=True, errors=[])
        return self.guard(self.current_step, target)

    def next_step(self, skip_validation: bool = False) -> bool:
        """Navigate to the following step."""
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_step})")
            return False
        return self.goto_step(self.steps[self.current_index + 1], skip_validation)

    def previous_step(self, skip_validation: bool = False) -> bool:
        """Navigate to the preceding step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_step})")
            return False
        return self.goto_step(self.steps[self.current_index - 1], skip_validation)

    def goto_step(self, step: int, skip_validation: bool = False) -> bool:
        """
        Navigate to a specific step.

        Args:
            step: Target step number
            skip_validation: If True, skip the transition guard

        Returns:
            True if the wizard is on the target step afterwards
        """
        if step not in self.steps:
            logger.error(f"Invalid step: {step} (valid: {self.steps})")
            return False

        if step == self.current_step:
            return True

        if not skip_validation:
            result = self.check_transition(step)
            if not result.is_valid:
                logger.warning(f"Step {self.current_step} -> {step} blocked: {result.errors}")
                self.validation_failed.emit(result)
                return False

        old_step = self.current_step
        self.context.current_step = step
        self.context.touch()

        logger.info(f"Navigation complete: step {old_step} -> {step}")
        self.step_changed.emit(old_step, step)
        return True

    def reset(self):
        """Return to the first step without checks."""
        self.goto_step(self.steps[0], skip_validation=True)
