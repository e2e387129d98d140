"""
Operation building for the Stellar network.

Request models, the field-handler pipeline that turns them into wire
records, the operation envelope and fluent builders.
"""

from .builders import BaseOperationBuilder, SetOptionsBuilder
from .envelope import OperationEnvelope
from .params import BuilderParams, default_params
from .set_options import (
    FIELD_HANDLERS,
    SetOptions,
    SignerSpec,
    build_set_options,
    build_set_options_op,
    merge_flags,
)

__all__ = [
    "BaseOperationBuilder",
    "BuilderParams",
    "FIELD_HANDLERS",
    "OperationEnvelope",
    "SetOptions",
    "SetOptionsBuilder",
    "SignerSpec",
    "build_set_options",
    "build_set_options_op",
    "default_params",
    "merge_flags",
]
