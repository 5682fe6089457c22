"""
S-Record Encoding
=================

Motorola S-Record output using 16-bit addressing:

- **records**: Record types and single-line encoding (S0, S1, S5, S9)
- **checksum**: Record checksum and address field helpers
- **encoder**: Whole-file encoding of a byte buffer
"""

from binencode.srec.checksum import (
    ADDRESS_MAX,
    ADDRESS_SIZE,
    address_to_bytes,
    calculate_record_checksum,
    verify_record_checksum,
)
from binencode.srec.records import (
    MAX_DATA_SIZE,
    MAX_HEADER_SIZE,
    RecordKind,
    SRecord,
    encode_record,
)
from binencode.srec.encoder import (
    DEFAULT_HEADER,
    MAX_INPUT_SIZE,
    MAX_RECORD_COUNT,
    SrecEncoder,
    encode_srec,
    record_count,
)

__all__ = [
    # Checksum
    "ADDRESS_MAX",
    "ADDRESS_SIZE",
    "address_to_bytes",
    "calculate_record_checksum",
    "verify_record_checksum",
    # Records
    "MAX_DATA_SIZE",
    "MAX_HEADER_SIZE",
    "RecordKind",
    "SRecord",
    "encode_record",
    # Encoder
    "DEFAULT_HEADER",
    "MAX_INPUT_SIZE",
    "MAX_RECORD_COUNT",
    "SrecEncoder",
    "encode_srec",
    "record_count",
]
