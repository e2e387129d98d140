"""
Stellar txnbuild - operation builders

Builds set options operations from sparse requests into canonical XDR
records ready for inclusion in a transaction.
"""

from .enums import *
from .xdr_types import *
from .runtime.errors import *
from .runtime.strkey import AddressCodec
from .crypto import Keypair, KeypairError
from .tx import *

__version__ = "0.1.0"
__all__ = [
    # Enums
    "AccountFlag",
    "AuthRequired",
    "AuthRevocable",
    "AuthImmutable",
    "OperationType",
    "PublicKeyType",
    "SignerKeyType",
    "VersionByte",

    # Wire records
    "PublicKey",
    "SignerKey",
    "Signer",
    "SetOptionsOp",
    "OperationBody",
    "Operation",

    # Errors
    "ErrorCode",
    "TxnBuildError",
    "AddressError",
    "EncodingError",
    "InvalidAddressError",
    "FieldTooLongError",
    "EnvelopeConstructionError",
    "MarshalError",
    "UnmarshalError",
    "BuilderError",

    # Addresses and keys
    "AddressCodec",
    "Keypair",
    "KeypairError",

    # Building
    "BuilderParams",
    "OperationEnvelope",
    "SetOptions",
    "SignerSpec",
    "SetOptionsBuilder",
    "build_set_options",
    "build_set_options_op",
    "merge_flags",
]
