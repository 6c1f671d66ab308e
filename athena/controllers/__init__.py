# -*- coding: utf-8 -*-
"""
ATHENA Controllers
"""

from .base_controller import BaseController, OperationResult
from .wizard_controller import EntryWizardController

__all__ = ["BaseController", "OperationResult", "EntryWizardController"]
