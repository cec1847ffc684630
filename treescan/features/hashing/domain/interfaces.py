from abc import ABC, abstractmethod
from .models import FileDigests

class IDigestAccumulatorSet(ABC):
    """
    Contract for a set of streaming hash contexts fed in lock-step.
    Lifecycle: accepting chunks -> finalized. There is no way back.
    """

    @abstractmethod
    def feed(self, chunk: bytes) -> None:
        """
        Updates every accumulator with the same chunk.
        Chunks must arrive in file order, none skipped or repeated.
        """
        pass

    @abstractmethod
    def finalize(self) -> FileDigests:
        """
        Produces the hex digests and releases the accumulators.
        May be called exactly once.
        """
        pass
