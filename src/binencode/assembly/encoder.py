"""
DC.B Listing Encoder
====================

Renders a byte buffer as Motorola-style assembler source, suitable for
including binary data in a 68000/6800-family program:

    dc.b	$48, $65, $6C, $6C, $6F, $2C, $20, $77, $6F, $72, $6C, $64, $21, $0A, $00, $FF
    dc.b	$01, $02

Each line holds up to 16 bytes. The directive is followed by a tab and the
bytes are written as `$` plus two uppercase hex digits, separated by ", ".
Empty input produces empty output. There is no checksum, address or
header in this format.
"""

from dataclasses import dataclass
from typing import Iterator
import logging

from binencode.chunks import CHUNK_SIZE, BytesLike, byte_view, iter_chunks
from binencode.errors import AllocationFailure

logger = logging.getLogger(__name__)


DEFAULT_DIRECTIVE = "dc.b"

BYTE_SEPARATOR = ", "


def format_byte(value: int) -> str:
    """Format one byte as an assembler hex literal, e.g. '$0A'."""
    return f"${value:02X}"


@dataclass(frozen=True)
class AssemblyEncoder:
    """
    Encoder for DC.B byte-table listings.

    Attributes:
        directive: Assembler directive starting each line
    """
    directive: str = DEFAULT_DIRECTIVE

    def __post_init__(self):
        if not self.directive or self.directive != self.directive.strip():
            raise ValueError(f"Invalid directive: {self.directive!r}")

    def format_line(self, chunk: bytes) -> str:
        """Render one group of bytes as a newline-terminated directive line."""
        values = BYTE_SEPARATOR.join(format_byte(b) for b in chunk)
        return f"{self.directive}\t{values}\n"

    def iter_lines(self, data: BytesLike) -> Iterator[str]:
        """Yield one line per 16-byte group of the input."""
        for _offset, chunk in iter_chunks(data, CHUNK_SIZE):
            yield self.format_line(chunk)

    def encode(self, data: BytesLike) -> str:
        """
        Encode a buffer as a DC.B listing.

        Args:
            data: Input bytes (may be empty)

        Returns:
            The listing text; empty string for empty input

        Raises:
            AllocationFailure: Output text could not be built
        """
        data = byte_view(data)
        logger.debug(f"Encoding {len(data)} bytes as {self.directive} listing")
        try:
            return "".join(self.iter_lines(data))
        except MemoryError as e:
            raise AllocationFailure("unable to allocate listing output", len(data)) from e


def encode_assembly(data: BytesLike, directive: str = DEFAULT_DIRECTIVE) -> str:
    """
    Encode a buffer as a DC.B listing.

    Convenience wrapper around AssemblyEncoder.
    """
    return AssemblyEncoder(directive=directive).encode(data)
