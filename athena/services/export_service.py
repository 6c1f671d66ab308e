# -*- coding: utf-8 -*-
"""
Export service for the access log (Excel and PDF).

Flattens the log into one row per entry: common fields first, then visitor
fields, then vehicle fields. Fields that do not apply to an entry's type are
left empty.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from athena.models.log_entry import LogEntry, VehicleEntry, VisitorEntry
from athena.services.exceptions import ExportException
from athena.services.export import ExportManager
from athena.services.translation_manager import get_language, tr
from athena.utils.datetime_utils import export_date
from athena.utils.logger import get_logger

logger = get_logger(__name__)

# row key -> translation key of its header
COMMON_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("id", "column.id"),
    ("timestamp", "column.timestamp"),
    ("type", "column.type"),
    ("chefPoste", "form.operator"),
    ("accessPoint", "form.access_point"),
    ("heureEntree", "form.entry_time"),
    ("heureSortie", "form.exit_time"),
    ("destination", "form.destination"),
    ("observation", "form.observation"),
    ("registration", "form.registration"),
    ("societe", "form.company"),
)

VISITOR_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("visitorName", "form.visitor_name"),
    ("personVisited", "form.person_visited"),
    ("cin", "form.cin"),
    ("isAnnounced", "form.announced_status"),
)

VEHICLE_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("vehicleType", "form.vehicle_type"),
    ("driverName", "form.driver_name"),
    ("bonNumber", "form.bon_number"),
)

SECTION_KEY = "_section"


class EntryExportService:
    """Service for exporting the access log to spreadsheet and document files."""

    def __init__(self, manager: Optional[ExportManager] = None):
        self.manager = manager or ExportManager()

    def get_columns(self, lang: Optional[str] = None) -> List[Tuple[str, str]]:
        """Ordered (row key, localized header) pairs."""
        all_columns = COMMON_COLUMNS + VISITOR_COLUMNS + VEHICLE_COLUMNS
        return [(key, tr(label_key, lang=lang)) for key, label_key in all_columns]

    def entry_to_row(self, entry: LogEntry, lang: Optional[str] = None) -> Dict[str, Any]:
        """Flatten one entry; keys of the other variant are set to None."""
        data = entry.to_dict()
        row: Dict[str, Any] = {key: data.get(key, "") for key, _ in COMMON_COLUMNS}

        if isinstance(entry, VisitorEntry):
            row["type"] = tr("entry.visitor", lang=lang)
            row.update({key: data.get(key, "") for key, _ in VISITOR_COLUMNS})
            row["isAnnounced"] = tr(
                "form.announced" if entry.is_announced else "form.not_announced", lang=lang
            )
            row.update({key: None for key, _ in VEHICLE_COLUMNS})
            name = entry.visitor_name
        elif isinstance(entry, VehicleEntry):
            row["type"] = tr("entry.vehicle", lang=lang)
            row.update({key: None for key, _ in VISITOR_COLUMNS})
            row.update({key: data.get(key, "") for key, _ in VEHICLE_COLUMNS})
            name = entry.driver_name
        else:
            raise ExportException(f"Cannot export {type(entry).__name__}")

        row[SECTION_KEY] = f"{row['type']} - {name}" if name else row["type"]
        return row

    def default_filename(self, format_name: str, now: Optional[datetime] = None) -> str:
        extension = self.manager.get_file_extension(format_name) or ""
        return f"athena_log_{export_date(now)}{extension}"

    def export(
        self,
        entries: Sequence[LogEntry],
        format_name: str,
        file_path: Path,
        lang: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Export the full log.

        Args:
            entries: Log entries, newest first
            format_name: 'excel' or 'pdf'
            file_path: Output file path
            lang: Header language (default: current UI language)

        Returns:
            Export summary dict

        Raises:
            ExportException: unknown format or writer failure
        """
        lang = lang or get_language()
        if self.manager.get_strategy(format_name) is None:
            raise ExportException(f"Unsupported export format: {format_name}", format_name=format_name)

        file_path = Path(file_path)
        rows = [self.entry_to_row(entry, lang=lang) for entry in entries]
        columns = self.get_columns(lang=lang)
        generated_at = datetime.now()

        ok = self.manager.export(
            rows,
            str(file_path),
            columns,
            format_name=format_name,
            sheet_title=tr("export.sheet_title", lang=lang),
            title=tr("export.document_title", lang=lang),
            subtitle=tr("export.generated_at", lang=lang, date=generated_at.strftime("%d/%m/%Y %H:%M")),
            section_key=SECTION_KEY,
            rtl=(lang == "ar"),
        )
        if not ok:
            raise ExportException(f"Failed to write {format_name} export to {file_path}", format_name=format_name)

        logger.info(f"Exported {len(rows)} entries to {file_path}")

        return {
            "file_path": str(file_path),
            "record_count": len(rows),
            "format": format_name,
            "exported_at": generated_at.isoformat()
        }

    def export_excel(self, entries: Sequence[LogEntry], file_path: Path, lang: Optional[str] = None) -> Dict[str, Any]:
        return self.export(entries, ExportManager.EXCEL, file_path, lang=lang)

    def export_pdf(self, entries: Sequence[LogEntry], file_path: Path, lang: Optional[str] = None) -> Dict[str, Any]:
        return self.export(entries, ExportManager.PDF, file_path, lang=lang)
