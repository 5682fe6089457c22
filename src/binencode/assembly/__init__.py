"""
Assembly Listing Encoding
=========================

Renders a byte buffer as assembler source: one DC.B directive per
16 bytes of input.
"""

from binencode.assembly.encoder import (
    DEFAULT_DIRECTIVE,
    AssemblyEncoder,
    encode_assembly,
    format_byte,
)

__all__ = [
    "DEFAULT_DIRECTIVE",
    "AssemblyEncoder",
    "encode_assembly",
    "format_byte",
]
