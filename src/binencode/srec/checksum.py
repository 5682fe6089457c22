"""
S-Record Checksum Calculations
==============================

Each S-record ends with a one-byte checksum covering everything after the
type tag:

    checksum = ~(byte_count + address bytes + data bytes) & 0xFF

That is, the one's complement of the low byte of the sum. A consequence is
that adding the checksum back to the sum always gives 0xFF in the low byte,
which is how loaders verify a record.

Address Field
-------------
All supported records (S0, S1, S5, S9) carry a 2-byte big-endian address.
"""

from typing import Iterable

# Width of the address field in bytes for S0/S1/S5/S9
ADDRESS_SIZE = 2

# Largest value the 16-bit address field can hold
ADDRESS_MAX = 0xFFFF


def address_to_bytes(address: int, size: int = ADDRESS_SIZE) -> bytes:
    """
    Split an address into big-endian bytes.

    Args:
        address: Unsigned address value
        size: Address field width in bytes

    Returns:
        The address as `size` bytes, most significant first

    Raises:
        OverflowError: If the address does not fit in `size` bytes
    """
    return address.to_bytes(size, "big")


def calculate_record_checksum(byte_count: int, address_bytes: Iterable[int],
                              data: Iterable[int]) -> int:
    """
    Calculate an S-record checksum.

    Args:
        byte_count: Value of the record's count field
        address_bytes: The address field bytes
        data: The payload bytes

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> calculate_record_checksum(0x05, b"\\x00\\x00", b"\\x00\\xFF")
        251
    """
    total = byte_count + sum(address_bytes) + sum(data)
    return ~total & 0xFF


def verify_record_checksum(byte_count: int, address_bytes: Iterable[int],
                           data: Iterable[int], checksum: int) -> bool:
    """
    Check that a checksum closes the record sum to 0xFF.

    Returns:
        True if (byte_count + address + data + checksum) & 0xFF == 0xFF
    """
    total = byte_count + sum(address_bytes) + sum(data) + checksum
    return (total & 0xFF) == 0xFF
