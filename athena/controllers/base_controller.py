# -*- coding: utf-8 -*-
"""
Controller base for the access-log screens.

Controllers never raise into the UI. Every public operation answers with an
OperationResult and reports storage or export failures through signals.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from athena.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a controller call, with the payload on success."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        return cls(True, data, message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        return cls(False, None, message, list(errors or []))


class BaseController(QObject):
    """
    Shared signals for controllers.

    operation_completed carries (operation, success) once a write finished;
    operation_error carries (operation, message) when storage or export failed.
    """

    operation_completed = pyqtSignal(str, bool)
    operation_error = pyqtSignal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._last_error = ""

    @property
    def last_error(self) -> str:
        """Message of the most recent failed operation, empty if none failed."""
        return self._last_error

    def _log_operation(self, operation: str, **details):
        summary = ", ".join(f"{key}={value}" for key, value in details.items())
        logger.info(f"{operation} ({summary})" if summary else operation)

    def _emit_completed(self, operation: str, success: bool):
        if success:
            self._last_error = ""
        self.operation_completed.emit(operation, success)

    def _emit_error(self, operation: str, error: str):
        self._last_error = error
        logger.error(f"{operation} failed: {error}")
        self.operation_error.emit(operation, error)
