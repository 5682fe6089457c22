"""
S-Record Type Definitions
=========================

This module defines the single-record layer of the Motorola S-Record
encoder: the supported record types and the formatting of one record line.

Record Format
-------------
Every record is one line of uppercase hexadecimal text:

    S<t> <cc> <aaaa> <dd...> <ss>

    S<t>:   Record type tag (S0, S1, S5 or S9)
    cc:     Byte count - bytes that follow (address + data + checksum)
    aaaa:   16-bit address, big-endian
    dd...:  Data bytes, two hex digits each
    ss:     Checksum (see checksum.py)

The line is written without spaces and ends with a newline.

Record Types
------------
- S0: Header. Address 0, data is a short identifying label.
- S1: Data with a 16-bit load address.
- S5: Count. The address field holds the number of S1 records.
- S9: Terminator for 16-bit files. Address 0, no data.

24-bit and 32-bit types (S2/S3/S7/S8) are not supported.

Reference
---------
- Motorola S-record format: https://en.wikipedia.org/wiki/SREC_(file_format)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from binencode.errors import AddressOverflow, PayloadTooLong, UnsupportedRecordKind
from binencode.srec.checksum import (
    ADDRESS_MAX,
    ADDRESS_SIZE,
    address_to_bytes,
    calculate_record_checksum,
)


# =============================================================================
# Size Limits
# =============================================================================

# Maximum payload of an S1 record written by this encoder
MAX_DATA_SIZE = 16

# The byte count field is one byte and includes address (2) and checksum (1)
MAX_HEADER_SIZE = 0xFF - ADDRESS_SIZE - 1


# =============================================================================
# Record Type Enumeration
# =============================================================================

class RecordKind(IntEnum):
    """
    Supported S-record types.

    The integer value is the digit written after the 'S' tag.
    """
    HEADER = 0          # S0
    DATA16 = 1          # S1
    COUNT16 = 5         # S5
    TERMINATOR = 9      # S9

    @classmethod
    def from_value(cls, value: Union["RecordKind", int]) -> "RecordKind":
        """
        Resolve a record type number.

        Args:
            value: A RecordKind or the digit following 'S'

        Returns:
            The matching RecordKind

        Raises:
            UnsupportedRecordKind: For any type outside S0/S1/S5/S9
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedRecordKind(value)
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedRecordKind(value) from None

    @property
    def tag(self) -> str:
        """Wire tag, e.g. 'S1'."""
        return f"S{self.value:X}"

    def get_max_data_size(self) -> int:
        """Longest payload this record type may carry."""
        if self is RecordKind.DATA16:
            return MAX_DATA_SIZE
        if self is RecordKind.HEADER:
            return MAX_HEADER_SIZE
        return 0

    def get_description(self) -> str:
        """Get a human-readable description."""
        descriptions = {
            RecordKind.HEADER: "S0 Header",
            RecordKind.DATA16: "S1 Data (16-bit address)",
            RecordKind.COUNT16: "S5 Record Count (16-bit)",
            RecordKind.TERMINATOR: "S9 Terminator (16-bit)",
        }
        return descriptions[self]


# =============================================================================
# Record
# =============================================================================

@dataclass(frozen=True)
class SRecord:
    """
    A single S-record.

    Attributes:
        kind: Record type
        address: Load address (S1), record count (S5), or 0 (S0/S9)
        data: Payload bytes
    """
    kind: RecordKind
    address: int = 0
    data: bytes = field(default_factory=bytes)

    def __post_init__(self):
        object.__setattr__(self, "kind", RecordKind.from_value(self.kind))
        object.__setattr__(self, "data", bytes(self.data))
        self.validate()

    def validate(self) -> None:
        """
        Check that the address and payload fit the record fields.

        Raises:
            AddressOverflow: If the address is not in 0..0xFFFF
            TypeError: If the address is not an integer
            PayloadTooLong: If the payload is longer than the type allows
        """
        if isinstance(self.address, bool) or not isinstance(self.address, int):
            raise TypeError(f"Record address must be an integer, got {self.address!r}")
        if not 0 <= self.address <= ADDRESS_MAX:
            raise AddressOverflow(self.address, ADDRESS_MAX)

        limit = self.kind.get_max_data_size()
        if len(self.data) > limit:
            raise PayloadTooLong(self.kind.tag, len(self.data), limit)

    @property
    def address_bytes(self) -> bytes:
        """The 2-byte big-endian address field."""
        return address_to_bytes(self.address, ADDRESS_SIZE)

    @property
    def byte_count(self) -> int:
        """Value of the count field: address + data + checksum byte."""
        return ADDRESS_SIZE + len(self.data) + 1

    @property
    def checksum(self) -> int:
        """One's complement of the low byte of count + address + data."""
        return calculate_record_checksum(self.byte_count, self.address_bytes, self.data)

    def to_line(self) -> str:
        """Format the record as one newline-terminated text line."""
        return (
            f"{self.kind.tag}{self.byte_count:02X}{self.address:04X}"
            f"{self.data.hex().upper()}{self.checksum:02X}\n"
        )

    def __str__(self) -> str:
        return self.to_line().rstrip("\n")

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def build_header(cls, data: bytes) -> "SRecord":
        """Create an S0 header record carrying a label."""
        return cls(RecordKind.HEADER, 0, data)

    @classmethod
    def build_data(cls, address: int, data: bytes) -> "SRecord":
        """Create an S1 data record."""
        return cls(RecordKind.DATA16, address, data)

    @classmethod
    def build_count(cls, count: int) -> "SRecord":
        """Create an S5 record holding the number of S1 records."""
        return cls(RecordKind.COUNT16, count)

    @classmethod
    def build_terminator(cls) -> "SRecord":
        """Create an S9 terminator record."""
        return cls(RecordKind.TERMINATOR, 0)


def encode_record(kind: Union[RecordKind, int], address: int, data: bytes = b"") -> str:
    """
    Encode one S-record line.

    Args:
        kind: Record type (RecordKind or the digit after 'S')
        address: Address field value
        data: Payload bytes

    Returns:
        The record as a newline-terminated line

    Raises:
        UnsupportedRecordKind: If kind is not S0, S1, S5 or S9
        AddressOverflow: If address does not fit in 16 bits
        TypeError: If address is not an integer
        PayloadTooLong: If data is longer than the type allows

    Example:
        >>> encode_record(RecordKind.DATA16, 0, bytes([0x00, 0xFF]))
        'S105000000FFFB\\n'
    """
    return SRecord(RecordKind.from_value(kind), address, data).to_line()
