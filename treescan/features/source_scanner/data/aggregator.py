import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from threading import Lock
from typing import List, Sequence

from treescan.core.config.settings import settings
from ..domain.interfaces import IAggregator, IFileProcessor
from ..domain.models import AggregationResult, FileRecord

logger = logging.getLogger(__name__)

class ParallelAggregator(IAggregator):
    """
    Fans paths out over a thread pool and merges successful records.

    Every aggregate() call owns its own lock and result lists, so one
    instance can serve concurrent calls. The lock is only held for the
    append itself. Leaving the executor context is the barrier: results
    are read only after every worker has returned.
    """

    def __init__(self, processor: IFileProcessor, max_workers: int = settings.MAX_WORKERS):
        self.processor = processor
        self.max_workers = max_workers

    def aggregate(self, paths: Sequence[Path]) -> AggregationResult:
        lock = Lock()
        records: List[FileRecord] = []
        failed: List[Path] = []

        def process_one(path: Path) -> None:
            try:
                record = self.processor.process(path)
            except OSError as e:
                # Per-file failures are not retried and never escalate
                logger.debug(f"Skipping {path}: {e}")
                with lock:
                    failed.append(path)
                return

            with lock:
                records.append(record)

        logger.info(f"Processing {len(paths)} entries with {self.max_workers} workers")

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="treescan") as pool:
            futures = [pool.submit(process_one, path) for path in paths]

        # Barrier passed. Surface programming errors (anything but OSError).
        for future in futures:
            future.result()

        return AggregationResult(records=records, failed=failed)
