from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from treescan.core.common.enums import ReportFormat
from treescan.core.config.settings import settings
from treescan.features.source_scanner.domain.models import FileRecord
from ..data.json_writer import JsonReportWriter
from ..data.sqlite_writer import SqliteReportWriter
from ..domain.interfaces import IReportWriter
from ..domain.models import OutputDocument

def build_report(
    inventory: Sequence[FileRecord],
    flags: Optional[Dict[str, Any]] = None,
    host: Optional[Dict[str, Any]] = None,
) -> OutputDocument:
    """
    Public API: wraps the finished inventory in the output envelope.
    Pure: no I/O, no failure modes.
    """
    return OutputDocument(
        file_data=list(inventory),
        host_data=dict(host or {}),
        flag_data=dict(flags or {}),
    )

def detect_format(destination: Path) -> ReportFormat:
    """SQLite for .db/.sqlite/.sqlite3 destinations, JSON otherwise."""
    if destination.suffix.lower() in settings.SQLITE_SUFFIXES:
        return ReportFormat.SQLITE
    return ReportFormat.JSON

def get_writer(report_format: ReportFormat) -> IReportWriter:
    if report_format == ReportFormat.SQLITE:
        return SqliteReportWriter()
    return JsonReportWriter()

def write_report(document: OutputDocument, destination: Path) -> ReportFormat:
    """
    Public API: writes the document once, overwriting any existing file.
    Raises ReportWriteError on failure. Returns the format that was written.
    """
    report_format = detect_format(destination)
    get_writer(report_format).write(document, destination)
    return report_format
