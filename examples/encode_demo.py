#!/usr/bin/env python3
"""
binencode Demo
==============

This script demonstrates how to use the encoders to:
1. Build individual S-records
2. Encode a buffer as a complete S-Record file
3. Encode the same buffer as a DC.B listing
4. Handle inputs that cannot be encoded

Usage:
    python examples/encode_demo.py
"""

from binencode import (
    AddressOverflow,
    RecordKind,
    SrecEncoder,
    encode_assembly,
    encode_record,
    encode_srec,
)


def main():
    data = b"Hello, S-Records!\n\x00\xff"

    # ==========================================================================
    # 1. Single records
    # ==========================================================================
    print("Single records:")
    print("  " + encode_record(RecordKind.DATA16, 0x0000, b"\x00\xff"), end="")
    print("  " + encode_record(RecordKind.COUNT16, 1), end="")
    print("  " + encode_record(RecordKind.TERMINATOR, 0), end="")

    # ==========================================================================
    # 2. Whole file as S-Records
    # ==========================================================================
    print(f"\nS-Record file for {len(data)} bytes:")
    print(encode_srec(data), end="")

    print("\nWith a custom S0 label:")
    print(SrecEncoder(header=b"DEMO1").encode(data), end="")

    # ==========================================================================
    # 3. Whole file as a DC.B listing
    # ==========================================================================
    print("\nDC.B listing:")
    print(encode_assembly(data), end="")

    # ==========================================================================
    # 4. Limits
    # ==========================================================================
    # S1 addresses are 16-bit, so at most 64KB can be encoded
    try:
        encode_srec(bytes(0x10001))
    except AddressOverflow as e:
        print(f"\nRejected oversized input: {e}")


if __name__ == "__main__":
    main()
