"""
binencode Error Hierarchy
=========================

This module defines the exception hierarchy for the encoders. All exceptions
inherit from EncoderError, allowing callers to catch every encoding failure
with a single except clause if desired.

Exception Hierarchy
-------------------
EncoderError (base)
├── RecordError (single S-record construction)
│   ├── UnsupportedRecordKind - record type outside S0/S1/S5/S9
│   ├── AddressOverflow - address does not fit the 16-bit field
│   └── PayloadTooLong - payload exceeds what the record type allows
├── RecordCountOverflow - too many S1 records for the S5 count field
└── AllocationFailure - output text could not be built

None of these are transient: the encoders do no I/O, so nothing is retried.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class EncoderError(Exception):
    """
    Base exception for all binencode errors.

        try:
            text = encode_srec(data)
        except EncoderError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Record Exceptions
# =============================================================================

class RecordError(EncoderError):
    """Base exception for errors building a single S-record."""
    pass


class UnsupportedRecordKind(RecordError):
    """
    Requested record type is not one of S0, S1, S5 or S9.

    Only 16-bit addressing is supported, so S2/S3/S7/S8 are rejected
    along with any value that is not a valid record type at all.
    """

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(
            f"unsupported record type {kind!r} (supported: S0, S1, S5, S9)"
        )


class AddressOverflow(RecordError):
    """Address (or S5 record count) does not fit in 16 bits."""

    def __init__(self, address: int, limit: int = 0xFFFF):
        self.address = address
        self.limit = limit
        super().__init__(
            f"address 0x{address:X} outside 16-bit range 0x0000-0x{limit:04X}"
        )


class PayloadTooLong(RecordError):
    """Payload is longer than the record type can carry."""

    def __init__(self, kind_name: str, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"{kind_name} payload of {length} bytes exceeds limit of {limit}"
        )


# =============================================================================
# Document Exceptions
# =============================================================================

class RecordCountOverflow(EncoderError):
    """
    Input needs more S1 records than the S5 count field can hold.

    The S5 record stores the data record count in its 16-bit address
    field, so at most 65535 data records can be described.
    """

    def __init__(self, count: int, limit: int = 0xFFFF):
        self.count = count
        self.limit = limit
        super().__init__(
            f"input requires {count} data records, S5 count field holds at most {limit}"
        )


class AllocationFailure(EncoderError):
    """Output text could not be allocated."""

    def __init__(self, message: str = "unable to allocate output buffer",
                 size: Optional[int] = None):
        self.size = size
        if size is not None:
            message = f"{message} ({size} input bytes)"
        super().__init__(message)
