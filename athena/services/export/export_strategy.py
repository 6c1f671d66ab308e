# -*- coding: utf-8 -*-
"""
Export Strategy Pattern - Abstract interface for export strategies.

Each strategy receives the same tabular input:
- columns: ordered (key, header) pairs
- rows: one dict per record; a value of None means "does not apply"
and writes it in its own format.
"""

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from athena.utils.logger import get_logger

logger = get_logger(__name__)

Columns = Sequence[Tuple[str, str]]
Rows = List[Dict[str, Any]]


class ExportStrategy(ABC):
    """
    Abstract base class for export strategies.

    Each strategy implements a specific export format (Excel, PDF, ...)
    """

    @abstractmethod
    def export(self, rows: Rows, file_path: str, columns: Columns, **kwargs) -> bool:
        """
        Export rows to a file in the strategy's format.

        Args:
            rows: List of dictionaries, one per record
            file_path: Target file path for export
            columns: Ordered (key, header) pairs
            **kwargs: Additional format-specific options

        Returns:
            True if export succeeded, False otherwise
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """
        Get the file extension for this export format.

        Returns:
            File extension including the dot (e.g., '.xlsx')
        """
        pass


class ExcelExportStrategy(ExportStrategy):
    """Strategy for exporting rows to an .xlsx workbook (one row per record)."""

    HEADER_COLOR = "1A2A44"
    MIN_WIDTH = 10
    MAX_WIDTH = 40

    def export(self, rows: Rows, file_path: str, columns: Columns, **kwargs) -> bool:
        """
        Export rows to an Excel file.

        Args:
            rows: List of dictionaries to export
            file_path: Target .xlsx path
            columns: Ordered (key, header) pairs
            **kwargs: Optional parameters:
                - sheet_title: Worksheet title (default: 'Log')
                - rtl: Right-to-left sheet view (default: False)

        Returns:
            True if export succeeded, False otherwise
        """
        try:
            wb = Workbook()
            ws = wb.active
            ws.title = str(kwargs.get('sheet_title', 'Log'))[:31]
            ws.sheet_view.rightToLeft = bool(kwargs.get('rtl', False))

            header_font = Font(bold=True, color="FFFFFF")
            header_fill = PatternFill(start_color=self.HEADER_COLOR, end_color=self.HEADER_COLOR, fill_type="solid")
            header_alignment = Alignment(horizontal="center", vertical="center")
            thin_border = Border(
                left=Side(style="thin"),
                right=Side(style="thin"),
                top=Side(style="thin"),
                bottom=Side(style="thin")
            )

            # Headers
            for col, (_, header) in enumerate(columns, 1):
                cell = ws.cell(row=1, column=col, value=header)
                cell.font = header_font
                cell.fill = header_fill
                cell.alignment = header_alignment
                cell.border = thin_border

            # Data rows
            widths = [len(header) for _, header in columns]
            for row_num, row in enumerate(rows, 2):
                for col, (key, _) in enumerate(columns, 1):
                    value = row.get(key)
                    cell = ws.cell(row=row_num, column=col, value=value)
                    cell.border = thin_border
                    if value is not None:
                        widths[col - 1] = max(widths[col - 1], len(str(value)))

            # Adjust column widths
            for col, width in enumerate(widths, 1):
                ws.column_dimensions[get_column_letter(col)].width = min(
                    max(width + 2, self.MIN_WIDTH), self.MAX_WIDTH
                )

            ws.freeze_panes = "A2"
            wb.save(file_path)
            return True

        except Exception as e:
            logger.error(f"Excel export failed: {e}", exc_info=True)
            return False

    def get_file_extension(self) -> str:
        """Return Excel file extension."""
        return '.xlsx'


class PdfExportStrategy(ExportStrategy):
    """Strategy for exporting rows to a PDF document (one section per record)."""

    # Fonts able to render Arabic glyphs, tried in order
    FONT_CANDIDATES = (
        "C:/Windows/Fonts/arial.ttf",
        "C:/Windows/Fonts/tahoma.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/Library/Fonts/Arial Unicode.ttf",
    )
    FONT_NAME = "AthenaUnicode"
    FONT_REGISTERED = False

    def __init__(self):
        self._register_font()

    def _register_font(self):
        """Register a Unicode TTF font if one is available."""
        if PdfExportStrategy.FONT_REGISTERED:
            return

        for path in self.FONT_CANDIDATES:
            if os.path.exists(path):
                try:
                    pdfmetrics.registerFont(TTFont(self.FONT_NAME, path))
                    PdfExportStrategy.FONT_REGISTERED = True
                    logger.info(f"Registered PDF font: {path}")
                    break
                except Exception as e:
                    logger.warning(f"Could not register font {path}: {e}")

    def _font_name(self) -> str:
        return self.FONT_NAME if PdfExportStrategy.FONT_REGISTERED else "Helvetica"

    def _get_styles(self, rtl: bool) -> Dict[str, ParagraphStyle]:
        styles = getSampleStyleSheet()
        font_name = self._font_name()
        alignment = TA_RIGHT if rtl else TA_LEFT

        return {
            'title': ParagraphStyle(
                'AthenaTitle',
                parent=styles['Title'],
                fontName=font_name,
                fontSize=18,
                alignment=TA_CENTER
            ),
            'section': ParagraphStyle(
                'AthenaSection',
                parent=styles['Heading2'],
                fontName=font_name,
                fontSize=12,
                alignment=alignment,
                textColor=colors.HexColor('#1A2A44')
            ),
            'cell': ParagraphStyle(
                'AthenaCell',
                parent=styles['Normal'],
                fontName=font_name,
                fontSize=9,
                alignment=alignment
            ),
            'footer': ParagraphStyle(
                'AthenaFooter',
                parent=styles['Normal'],
                fontName=font_name,
                fontSize=8,
                alignment=TA_CENTER,
                textColor=colors.gray
            ),
        }

    def export(self, rows: Rows, file_path: str, columns: Columns, **kwargs) -> bool:
        """
        Export rows to a PDF file.

        Args:
            rows: List of dictionaries to export
            file_path: Target .pdf path
            columns: Ordered (key, header) pairs
            **kwargs: Optional parameters:
                - title: Document title
                - subtitle: Line under the title (e.g. generation date)
                - section_key: Row key used as each section's heading
                - rtl: Right-to-left alignment (default: False)

        Returns:
            True if export succeeded, False otherwise
        """
        rtl = bool(kwargs.get('rtl', False))
        section_key = kwargs.get('section_key')

        try:
            doc = SimpleDocTemplate(
                str(file_path),
                pagesize=A4,
                rightMargin=2*cm,
                leftMargin=2*cm,
                topMargin=2*cm,
                bottomMargin=2*cm,
                title=str(kwargs.get('title', '')),
            )

            styles = self._get_styles(rtl)
            story = []

            story.append(Paragraph(str(kwargs.get('title', '')), styles['title']))
            if kwargs.get('subtitle'):
                story.append(Paragraph(str(kwargs['subtitle']), styles['footer']))
            story.append(Spacer(1, 0.8*cm))

            for index, row in enumerate(rows, 1):
                heading = f"{index}. {row.get(section_key, '')}" if section_key else f"{index}."
                table_data = []
                for key, header in columns:
                    value = row.get(key)
                    if value is None:
                        continue
                    label_cell = Paragraph(header, styles['cell'])
                    value_cell = Paragraph(_escape(value), styles['cell'])
                    table_data.append([value_cell, label_cell] if rtl else [label_cell, value_cell])

                table = Table(table_data, colWidths=[11*cm, 6*cm] if rtl else [6*cm, 11*cm])
                table.setStyle(TableStyle([
                    ('BACKGROUND', (1 if rtl else 0, 0), (1 if rtl else 0, -1), colors.HexColor('#F1F5F9')),
                    ('FONTNAME', (0, 0), (-1, -1), self._font_name()),
                    ('VALIGN', (0, 0), (-1, -1), 'TOP'),
                    ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
                    ('TOPPADDING', (0, 0), (-1, -1), 4),
                    ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#CBD5E1')),
                ]))

                story.append(KeepTogether([
                    Paragraph(_escape(heading), styles['section']),
                    table,
                    Spacer(1, 0.5*cm),
                ]))

            doc.build(story)
            return True

        except Exception as e:
            logger.error(f"PDF export failed: {e}", exc_info=True)
            return False

    def get_file_extension(self) -> str:
        """Return PDF file extension."""
        return '.pdf'


def _escape(value: Any) -> str:
    """Escape text for reportlab's paragraph markup."""
    text = str(value)
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
