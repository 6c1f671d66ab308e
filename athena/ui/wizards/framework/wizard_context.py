# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for in-flight wizard state.

Provides:
- Current step tracking
- Serialization for logging and diagnostics
"""

from typing import Dict, Any, Optional
from datetime import datetime
from abc import ABC, abstractmethod
import uuid


class WizardContext(ABC):
    """
    Base class for wizard context.

    Subclasses hold their form fields as attributes and implement
    reset_form() to return them to their defaults after a submission.
    """

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step: int = 1

    def touch(self):
        """Record a modification."""
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step": self.current_step,
        }

    @abstractmethod
    def reset_form(self, now: Optional[datetime] = None):
        """Return form fields to their defaults after a submission."""
        pass
