"""
binencode - Binary to S-Record and DC.B Listing Encoder
=======================================================

This package converts raw binary data into text that other tools can load
or assemble:

- **srec**: Motorola S-Record files using S0/S1/S5/S9 records
    One header, one S1 record per 16 bytes, a record count and a terminator

- **assembly**: Assembler source made of DC.B directives
    One line of up to 16 `$XX` byte literals per 16 bytes of input

- **cli**: The binenc command-line tool

Quick Start
-----------
    >>> from binencode import encode_srec, encode_assembly
    >>> encode_assembly(b"\\x01\\x02")
    'dc.b\\t$01, $02\\n'
    >>> text = encode_srec(Path("rom.bin").read_bytes())

Or use the command-line tool:
    $ binenc -i rom.bin -s rec

Both encoders are pure functions of their input and safe to call from
several threads at once.
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from binencode.errors import (
    EncoderError,
    RecordError,
    UnsupportedRecordKind,
    AddressOverflow,
    PayloadTooLong,
    RecordCountOverflow,
    AllocationFailure,
)
from binencode.srec import (
    DEFAULT_HEADER,
    RecordKind,
    SRecord,
    SrecEncoder,
    encode_record,
    encode_srec,
)
from binencode.assembly import (
    AssemblyEncoder,
    encode_assembly,
)
from binencode.config import EncoderConfig

__all__ = [
    "__version__",
    # Errors
    "EncoderError",
    "RecordError",
    "UnsupportedRecordKind",
    "AddressOverflow",
    "PayloadTooLong",
    "RecordCountOverflow",
    "AllocationFailure",
    # S-Records
    "DEFAULT_HEADER",
    "RecordKind",
    "SRecord",
    "SrecEncoder",
    "encode_record",
    "encode_srec",
    # Assembly
    "AssemblyEncoder",
    "encode_assembly",
    # Configuration
    "EncoderConfig",
]
