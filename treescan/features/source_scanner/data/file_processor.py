import errno
import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from treescan.core.config.settings import settings
from treescan.features.hashing.domain.models import FileDigests
from treescan.features.hashing.service.api import digest_stream
from ..domain.interfaces import IFileProcessor
from ..domain.models import FileRecord

logger = logging.getLogger(__name__)

# Only POSIX has meaningful mode bits
_HAS_PERMISSIONS = os.name == "posix"

class LocalFileProcessor(IFileProcessor):
    """
    Reads one entry's metadata and streams its content once through the digest set.
    """

    def __init__(self, chunk_size: int = settings.CHUNK_SIZE):
        self.chunk_size = chunk_size

    def process(self, path: Path) -> FileRecord:
        logger.debug(f"Processing file: {path}")

        # 1. Metadata (follows symlinks, like the later open() does)
        st = os.stat(path)
        is_dir = stat.S_ISDIR(st.st_mode)

        # 2. Content digests
        if is_dir:
            digests = FileDigests.empty()
        elif stat.S_ISREG(st.st_mode):
            with open(path, "rb") as f:
                digests = digest_stream(f, self.chunk_size)
        else:
            # FIFOs, sockets and devices never reach EOF reliably
            raise OSError(errno.EINVAL, "Not a regular file", str(path))

        return FileRecord(
            path=str(path),
            name=path.name,
            extension=self._extension(path),
            size=0 if is_dir else st.st_size,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            is_dir=is_dir,
            permissions=st.st_mode if _HAS_PERMISSIONS else 0,
            digests=digests,
        )

    @staticmethod
    def _extension(path: Path) -> str:
        """Text after the last dot, without the dot. Leading-dot names have none."""
        return path.suffix[1:]
