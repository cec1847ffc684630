import json
import logging
from pathlib import Path

from treescan.core.exceptions import ReportWriteError
from ..domain.interfaces import IReportWriter
from ..domain.models import OutputDocument

logger = logging.getLogger(__name__)

class JsonReportWriter(IReportWriter):
    def write(self, document: OutputDocument, destination: Path) -> None:
        """
        Serializes the full document in memory, then writes it with a single call.
        """
        payload = json.dumps(document.to_dict(), indent=2)

        try:
            destination.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write report to {destination}: {e}")
            raise ReportWriteError(f"Cannot write report to {destination}: {e}") from e

        logger.info(f"Wrote {len(document.file_data)} records to {destination}")
