"""
S-Record Document Encoder
=========================

This module turns a byte buffer into a complete S-Record file.

Output Layout
-------------
    S0  header record, address 0, data = header label
    S1  one record per 16 bytes of input, address = offset in input
    ... (last S1 record may be shorter, none for empty input)
    S5  record count, address field = number of S1 records
    S9  terminator, address 0

Usage
-----
    >>> from binencode.srec import encode_srec
    >>> print(encode_srec(b"\\x00\\xFF"), end="")
    S008000042494E454E8B
    S105000000FFFB
    S5030001FB
    S9030000FC

A custom header label:

    >>> encoder = SrecEncoder(header=b"ROM01")
    >>> text = encoder.encode(Path("rom.bin").read_bytes())

Limits
------
Addresses are 16-bit, so the input may be at most 64KB. The S5 count field
is 16-bit as well; inputs needing more than 65535 S1 records raise
RecordCountOverflow before any output is produced.
"""

from dataclasses import dataclass
from typing import Iterator
import logging

from binencode.chunks import CHUNK_SIZE, BytesLike, byte_view, chunk_count, iter_chunks
from binencode.errors import (
    AddressOverflow,
    AllocationFailure,
    PayloadTooLong,
    RecordCountOverflow,
)
from binencode.srec.checksum import ADDRESS_MAX
from binencode.srec.records import MAX_HEADER_SIZE, RecordKind, SRecord

# Logger for this module
logger = logging.getLogger(__name__)


# Label written in the S0 record unless another is configured
DEFAULT_HEADER = b"BINEN"

# The S5 address field holds the S1 record count
MAX_RECORD_COUNT = 0xFFFF

# Largest input whose S1 addresses all fit in 16 bits
MAX_INPUT_SIZE = ADDRESS_MAX + 1


def record_count(size: int) -> int:
    """Number of S1 records needed for an input of `size` bytes."""
    return chunk_count(size, CHUNK_SIZE)


@dataclass(frozen=True)
class SrecEncoder:
    """
    Encoder for S0/S1/S5/S9 S-Record files.

    Attributes:
        header: Label bytes carried by the S0 record
    """
    header: bytes = DEFAULT_HEADER

    def __post_init__(self):
        object.__setattr__(self, "header", bytes(self.header))
        if len(self.header) > MAX_HEADER_SIZE:
            raise PayloadTooLong(RecordKind.HEADER.tag, len(self.header), MAX_HEADER_SIZE)

    def check_size(self, size: int) -> int:
        """
        Validate that an input size can be encoded.

        Args:
            size: Input length in bytes

        Returns:
            The number of S1 records the input needs

        Raises:
            RecordCountOverflow: If the S5 field cannot hold the record count
            AddressOverflow: If the last S1 address exceeds 0xFFFF
        """
        count = record_count(size)
        if count > MAX_RECORD_COUNT:
            raise RecordCountOverflow(count, MAX_RECORD_COUNT)
        if size > MAX_INPUT_SIZE:
            raise AddressOverflow((count - 1) * CHUNK_SIZE, ADDRESS_MAX)
        return count

    def iter_records(self, data: BytesLike) -> Iterator[SRecord]:
        """
        Yield every record of the file in order.

        The input size is validated before the first record is produced.
        """
        data = byte_view(data)
        expected = self.check_size(len(data))
        logger.debug(f"Encoding {len(data)} bytes as {expected} S1 records")

        yield SRecord.build_header(self.header)

        count = 0
        for offset, chunk in iter_chunks(data, CHUNK_SIZE):
            yield SRecord.build_data(offset, chunk)
            count += 1

        yield SRecord.build_count(count)
        yield SRecord.build_terminator()

    def iter_lines(self, data: BytesLike) -> Iterator[str]:
        """Yield the file one newline-terminated line at a time."""
        for record in self.iter_records(data):
            yield record.to_line()

    def encode(self, data: BytesLike) -> str:
        """
        Encode a buffer as a complete S-Record file.

        Args:
            data: Input bytes (may be empty)

        Returns:
            The S-Record text, one record per line

        Raises:
            RecordCountOverflow: Input needs more than 65535 S1 records
            AddressOverflow: Input is larger than 64KB
            AllocationFailure: Output text could not be built
        """
        data = byte_view(data)
        try:
            return "".join(self.iter_lines(data))
        except MemoryError as e:
            raise AllocationFailure("unable to allocate S-Record output", len(data)) from e


def encode_srec(data: BytesLike, header: bytes = DEFAULT_HEADER) -> str:
    """
    Encode a buffer as an S-Record file.

    Convenience wrapper around SrecEncoder.
    """
    return SrecEncoder(header=header).encode(data)
