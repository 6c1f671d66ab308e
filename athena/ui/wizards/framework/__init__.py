# -*- coding: utf-8 -*-
"""
Wizard Framework.

Provides base classes for multi-step wizards with consistent navigation,
transition checks and shared state.
"""

from .base_step import BaseStep, StepValidationResult
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseStep',
    'StepValidationResult',
    'WizardContext',
    'StepNavigator'
]
