# -*- coding: utf-8 -*-
"""Export services package."""

from .export_strategy import ExportStrategy, ExcelExportStrategy, PdfExportStrategy
from .export_manager import ExportManager

__all__ = ['ExportStrategy', 'ExcelExportStrategy', 'PdfExportStrategy', 'ExportManager']
