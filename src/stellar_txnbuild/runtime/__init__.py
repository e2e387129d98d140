"""Runtime helpers: error model and StrKey address codec"""

from .errors import (
    AddressError,
    BuilderError,
    EncodingError,
    EnvelopeConstructionError,
    ErrorCode,
    FieldTooLongError,
    InvalidAddressError,
    MarshalError,
    TxnBuildError,
    UnmarshalError,
)
from .strkey import AddressCodec, decode_check, encode_check, is_valid

__all__ = [
    "AddressCodec",
    "AddressError",
    "BuilderError",
    "EncodingError",
    "EnvelopeConstructionError",
    "ErrorCode",
    "FieldTooLongError",
    "InvalidAddressError",
    "MarshalError",
    "TxnBuildError",
    "UnmarshalError",
    "decode_check",
    "encode_check",
    "is_valid",
]
