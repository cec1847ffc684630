import logging
import os
from pathlib import Path
from typing import List, Optional, Set, Tuple

from treescan.core.exceptions import DirectoryListError, ScanRootError
from ..domain.interfaces import IFileWalker

logger = logging.getLogger(__name__)

# (st_dev, st_ino): identity of a directory regardless of the path used to reach it
DirKey = Tuple[int, int]

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using os.scandir for efficiency.

    Directories, including symlinks to directories, are never emitted as
    paths: they are either descended into (recursive) or skipped. Each
    directory is descended at most once, so symlink loops terminate.
    """

    def __init__(self, strict: bool = False):
        # strict: an unreadable subdirectory aborts the walk instead of being skipped
        self.strict = strict
        self.skipped_dirs: List[Path] = []

    def walk(self, root: Path, recursive: bool) -> List[Path]:
        self.skipped_dirs = []

        try:
            root_entries = self._list_dir(root)
            seen: Set[DirKey] = {self._dir_key(root)}
        except OSError as e:
            raise ScanRootError(f"Cannot list scan root {root}: {e}") from e

        paths: List[Path] = []
        # Explicit stack instead of recursion: deep trees must not hit the recursion limit
        pending = [root_entries]
        while pending:
            for entry in pending.pop():
                if not self._is_dir(entry):
                    paths.append(Path(entry.path))
                    continue

                if not recursive:
                    continue

                directory = Path(entry.path)
                try:
                    key = self._dir_key(directory)
                except OSError:
                    key = None
                if key is not None:
                    if key in seen:
                        logger.debug(f"Already visited, not descending again: {directory}")
                        continue
                    seen.add(key)

                sub_entries = self._list_subdir(directory)
                if sub_entries is not None:
                    pending.append(sub_entries)

        logger.debug(f"Enumerated {len(paths)} entries under {root} (recursive={recursive})")
        return paths

    def _list_subdir(self, directory: Path) -> Optional[List[os.DirEntry]]:
        try:
            return self._list_dir(directory)
        except OSError as e:
            if self.strict:
                raise DirectoryListError(f"Cannot list directory {directory}: {e}") from e
            logger.warning(f"Skipping unreadable directory {directory}: {e}")
            self.skipped_dirs.append(directory)
            return None

    @staticmethod
    def _list_dir(directory: Path) -> List[os.DirEntry]:
        # Materialize the listing so no directory handle stays open while we descend
        with os.scandir(directory) as it:
            return list(it)

    @staticmethod
    def _dir_key(directory: Path) -> DirKey:
        # os.stat, not DirEntry.stat: the latter reports st_ino 0 on Windows
        st = os.stat(directory)
        return st.st_dev, st.st_ino

    @staticmethod
    def _is_dir(entry: os.DirEntry) -> bool:
        try:
            # Follows symlinks: a link to a directory is a directory
            return entry.is_dir()
        except OSError:
            # Unknown type: emit it and let the processor decide
            return False
