# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class AthenaError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class InvalidEntryError(AthenaError):
    """Raised when a record cannot be built or decoded."""

    def __init__(self, message: str, field: str = None, context: str = None):
        super().__init__(message, context=context)
        self.field = field


class DuplicateEntryError(AthenaError):
    """Raised when a record identifier is already present in the log."""

    def __init__(self, entry_id: str):
        super().__init__(f"Entry {entry_id} already exists in the log", context="log_store")
        self.entry_id = entry_id


class StorageException(AthenaError):
    """Raised when local storage cannot be written."""

    def __init__(self, message: str, key: str = None, original_error: Exception = None):
        super().__init__(message, context="storage")
        self.key = key
        self.original_error = original_error


class ExportException(AthenaError):
    """Raised when an export file cannot be produced."""

    def __init__(self, message: str, format_name: str = None, original_error: Exception = None):
        super().__init__(message, context="export")
        self.format_name = format_name
        self.original_error = original_error
