import hashlib
from typing import Any, Dict, Optional

from treescan.core.common.enums import HashAlgorithm
from treescan.core.exceptions import AccumulatorFinalizedError
from ..domain.interfaces import IDigestAccumulatorSet
from ..domain.models import FileDigests

class HashlibAccumulatorSet(IDigestAccumulatorSet):
    """
    MD5 + SHA1 + SHA256 contexts from hashlib, updated with every chunk.
    Owned by a single file read; never shared across files or threads.
    """

    # Fixed feed order, identical for every file
    ALGORITHMS = (HashAlgorithm.MD5, HashAlgorithm.SHA1, HashAlgorithm.SHA256)

    def __init__(self):
        self._contexts: Optional[Dict[HashAlgorithm, Any]] = {
            algo: hashlib.new(algo.value) for algo in self.ALGORITHMS
        }

    @property
    def finalized(self) -> bool:
        return self._contexts is None

    def feed(self, chunk: bytes) -> None:
        if self._contexts is None:
            raise AccumulatorFinalizedError("Cannot feed a finalized accumulator set.")
        for algo in self.ALGORITHMS:
            self._contexts[algo].update(chunk)

    def finalize(self) -> FileDigests:
        if self._contexts is None:
            raise AccumulatorFinalizedError("Accumulator set was already finalized.")

        # Detach first: the set is unusable from here on
        contexts, self._contexts = self._contexts, None
        return FileDigests(
            md5=contexts[HashAlgorithm.MD5].hexdigest(),
            sha1=contexts[HashAlgorithm.SHA1].hexdigest(),
            sha256=contexts[HashAlgorithm.SHA256].hexdigest(),
        )
