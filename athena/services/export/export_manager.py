# -*- coding: utf-8 -*-
"""
Export Manager - Manages and dispatches export strategies.

Provides a central point for registering and executing different export formats.
"""

from typing import Dict, List, Optional

from athena.utils.logger import get_logger

from .export_strategy import Columns, ExcelExportStrategy, ExportStrategy, PdfExportStrategy, Rows

logger = get_logger(__name__)


class ExportManager:
    """
    Registry of export strategies keyed by format name.
    """

    EXCEL = "excel"
    PDF = "pdf"

    def __init__(self):
        """Initialize the export manager with default strategies."""
        self._strategies: Dict[str, ExportStrategy] = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        """Register built-in export strategies."""
        self.register_strategy(self.EXCEL, ExcelExportStrategy())
        self.register_strategy(self.PDF, PdfExportStrategy())

    def register_strategy(self, format_name: str, strategy: ExportStrategy):
        """
        Register an export strategy for a specific format.

        Args:
            format_name: Format identifier (e.g., 'excel', 'pdf')
            strategy: ExportStrategy implementation
        """
        self._strategies[format_name.lower()] = strategy

    def get_strategy(self, format_name: str) -> Optional[ExportStrategy]:
        """Get a registered export strategy by format name, or None."""
        return self._strategies.get(format_name.lower())

    def export(self, rows: Rows, file_path: str, columns: Columns,
               format_name: str = EXCEL, **kwargs) -> bool:
        """
        Export rows using the specified format strategy.

        Returns:
            True if export succeeded, False otherwise
        """
        strategy = self.get_strategy(format_name)
        if not strategy:
            logger.error(f"Export format '{format_name}' not registered")
            return False

        return strategy.export(rows, file_path, columns, **kwargs)

    def get_available_formats(self) -> List[str]:
        return list(self._strategies.keys())

    def get_file_extension(self, format_name: str) -> Optional[str]:
        """File extension (e.g. '.pdf') for a format, or None if not registered."""
        strategy = self.get_strategy(format_name)
        return strategy.get_file_extension() if strategy else None
