"""
Input Chunking
==============

Both encoders walk the input in groups of at most 16 bytes. Each chunk is
yielded with its byte offset from the start of the input; every chunk but
the last is full, and empty input yields nothing.

    >>> list(iter_chunks(b"ABCDEFGHIJKLMNOPQR"))
    [(0, b'ABCDEFGHIJKLMNOP'), (16, b'QR')]
"""

from typing import Iterator, Union

BytesLike = Union[bytes, bytearray, memoryview]

# Bytes per S1 record and per DC.B line
CHUNK_SIZE = 16


def byte_view(data: BytesLike) -> memoryview:
    """
    View the input as a flat sequence of bytes.

    Memoryviews over wider items (e.g. array("H")) are cast so that
    lengths and slices count bytes, not items.
    """
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def iter_chunks(data: BytesLike, size: int = CHUNK_SIZE) -> Iterator[tuple[int, bytes]]:
    """
    Yield (offset, chunk) pairs covering the input.

    Args:
        data: Input buffer (not modified)
        size: Maximum chunk length

    Yields:
        Tuples of byte offset and chunk bytes
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")

    view = byte_view(data)
    for offset in range(0, len(view), size):
        yield offset, bytes(view[offset:offset + size])


def chunk_count(length: int, size: int = CHUNK_SIZE) -> int:
    """Number of chunks iter_chunks() yields for an input of this length."""
    return -(-length // size)
