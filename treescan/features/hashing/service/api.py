from typing import BinaryIO, Iterable
from ..data.accumulator import HashlibAccumulatorSet
from ..domain.models import FileDigests

def digest_chunks(chunks: Iterable[bytes]) -> FileDigests:
    """
    Public API: feeds chunks, in iteration order, through a fresh accumulator set.
    The set never escapes this call, so it is finalized exactly once.
    """
    accumulators = HashlibAccumulatorSet()
    for chunk in chunks:
        accumulators.feed(chunk)
    return accumulators.finalize()

def digest_stream(stream: BinaryIO, chunk_size: int) -> FileDigests:
    """
    Reads an open binary stream to EOF in chunk_size pieces (single pass, no seeking).
    Memory use is bounded by chunk_size regardless of stream length.
    """
    return digest_chunks(iter(lambda: stream.read(chunk_size), b""))
