import logging
from typing import Any, Callable, Dict, Optional

from treescan.core.host import collect_host_info

# Cross-Feature Import (Service calls Service)
from treescan.features.report.service.api import build_report, write_report

from ..domain.interfaces import IAggregator, IFileWalker
from ..domain.models import ScanRequest, ScanSummary
from ..data.aggregator import ParallelAggregator
from ..data.file_processor import LocalFileProcessor
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class SourceScanner:
    """
    Service responsible for one full inventory run:
    enumerate -> process in parallel -> build report -> write report.
    """

    def __init__(
        self,
        walker: Optional[IFileWalker] = None,
        aggregator: Optional[IAggregator] = None,
        host_info: Callable[[], Dict[str, Any]] = collect_host_info,
    ):
        # Built per request unless injected (tests)
        self.walker = walker
        self.aggregator = aggregator
        self.host_info = host_info

    def scan(self, request: ScanRequest) -> ScanSummary:
        """
        Runs the whole pipeline for one request.

        Raises:
            ScanRootError: root cannot be listed (nothing processed).
            DirectoryListError: a subdirectory cannot be listed in strict mode.
            ReportWriteError: the report cannot be written (all work already done).
        """
        summary = ScanSummary(output_path=str(request.output_path))
        walker = self.walker or LocalFileWalker(strict=request.strict_walk)
        aggregator = self.aggregator or ParallelAggregator(
            LocalFileProcessor(chunk_size=request.chunk_size),
            max_workers=request.max_workers,
        )

        logger.info(f"Starting scan of: {request.root_path} (recursive={request.recursive})")

        # 1. Enumerate everything before processing begins (root failure is fatal)
        paths = walker.walk(request.root_path, request.recursive)
        summary.files_found = len(paths)
        summary.dirs_skipped = len(getattr(walker, "skipped_dirs", []))

        # 2. Fan out; per-file failures are dropped here
        result = aggregator.aggregate(paths)
        summary.files_processed = len(result.records)
        summary.files_skipped = len(result.failed)
        summary.errors.extend(f"Skipped {path}" for path in result.failed)

        # 3. Wrap and write (single full-document write)
        document = build_report(result.records, flags=request.as_flags(), host=self.host_info())
        write_report(document, request.output_path)

        logger.info(
            f"Scan complete. Processed: {summary.files_processed}/{summary.files_found} "
            f"(skipped files: {summary.files_skipped}, skipped dirs: {summary.dirs_skipped})"
        )
        return summary

# Singleton Instance for easy import
scanner = SourceScanner()
