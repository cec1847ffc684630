from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from treescan.core.config.settings import settings
from treescan.core.exceptions import ScanConfigError, ScanRootError
from treescan.features.hashing.domain.models import FileDigests

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to inventory a specific directory.
    Lives for one run only.
    """
    root_path: Path
    recursive: bool = False
    output_path: Path = Path(settings.OUTPUT_FILE)
    max_workers: int = settings.MAX_WORKERS
    chunk_size: int = settings.CHUNK_SIZE
    strict_walk: bool = settings.STRICT_WALK
    debug: bool = False

    def __post_init__(self):
        try:
            exists = self.root_path.exists()
            is_dir = exists and self.root_path.is_dir()
        except OSError as e:
            raise ScanRootError(f"Cannot access scan root {self.root_path}: {e}") from e
        if not exists:
            raise ScanRootError(f"Scan root not found: {self.root_path}")
        if not is_dir:
            raise ScanRootError(f"Scan root is not a directory: {self.root_path}")
        if self.max_workers < 1:
            raise ScanConfigError(f"Worker count must be at least 1, got {self.max_workers}.")
        # Power of two so every full read is the same size
        if self.chunk_size < 1 or self.chunk_size & (self.chunk_size - 1):
            raise ScanConfigError(f"Chunk size must be a positive power of two, got {self.chunk_size}.")

    def as_flags(self) -> Dict[str, Any]:
        """Effective run options, as recorded in the report's flag_data block."""
        return {
            "debug": self.debug,
            "start_dir": str(self.root_path),
            "scan_sub_dirs": self.recursive,
            "output_file": str(self.output_path),
            "concurrency": self.max_workers,
            "chunk_size": self.chunk_size,
            "strict": self.strict_walk,
        }

@dataclass(frozen=True)
class FileRecord:
    """
    One inventory entry: filesystem metadata plus content digests.
    Directories carry empty digests and were never opened.
    """
    path: str
    name: str
    extension: str
    size: int
    modified_at: datetime
    is_dir: bool
    permissions: int
    digests: FileDigests

    def __post_init__(self):
        if self.is_dir and not self.digests.is_empty:
            raise ValueError(f"Directory record cannot carry digests: {self.path}")
        if not self.is_dir and self.digests.is_empty:
            raise ValueError(f"File record is missing digests: {self.path}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.path,
            "file_name": self.name,
            "extension": self.extension,
            "size": self.size,
            "mod_time": self.modified_at.isoformat(),
            "is_dir": self.is_dir,
            "permissions": self.permissions,
            "md5": self.digests.md5,
            "sha1": self.digests.sha1,
            "sha256": self.digests.sha256,
        }

@dataclass
class AggregationResult:
    """
    Output of the parallel fan-out.
    records is the inventory (completion order); failed lists the discarded paths.
    """
    records: List[FileRecord] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

@dataclass
class ScanSummary:
    """
    Report returned after scanning completes.
    """
    files_found: int = 0
    files_processed: int = 0
    files_skipped: int = 0
    dirs_skipped: int = 0
    output_path: str = ""
    errors: List[str] = field(default_factory=list)
