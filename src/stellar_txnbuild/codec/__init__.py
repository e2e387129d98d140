"""
Stellar XDR Codec Module

Provides RFC 4506 encoding/decoding of the set options wire records.

Key components:
- writer.py: XDR writer with big-endian integers and 4-byte padding
- reader.py: XDR reader mirroring the writer with bounds checks
- operation_codec.py: SetOptionsOp and Operation encoding and decoding
"""

from .operation_codec import (
    decode_operation,
    decode_set_options_op,
    encode_operation,
    encode_set_options_op,
)
from .reader import XdrReader
from .writer import XdrWriter

__all__ = [
    "XdrReader",
    "XdrWriter",
    "encode_operation",
    "encode_set_options_op",
    "decode_operation",
    "decode_set_options_op",
]
