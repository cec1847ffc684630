from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence
from .models import AggregationResult, FileRecord

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Produces the complete path list before any processing begins.
    """
    @abstractmethod
    def walk(self, root: Path, recursive: bool) -> List[Path]:
        """
        Returns every non-directory entry under root (descending only if recursive).
        Raises ScanRootError if root itself cannot be listed.
        """
        pass

class IFileProcessor(ABC):
    """
    Contract for turning one path into an inventory record.
    """
    @abstractmethod
    def process(self, path: Path) -> FileRecord:
        """
        Reads metadata and (for non-directories) digests the content in one pass.
        Raises OSError if metadata cannot be read or the file cannot be read.
        """
        pass

class IAggregator(ABC):
    """
    Contract for fanning paths out to workers and merging their records.
    """
    @abstractmethod
    def aggregate(self, paths: Sequence[Path]) -> AggregationResult:
        """
        Processes every path; failures are discarded, successes collected.
        Returns only after every worker has finished.
        """
        pass
