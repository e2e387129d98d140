"""
Operation Codec

Encodes and decodes the set options records in the ledger's XDR layout:

    SetOptionsOp = inflationDest*, clearFlags*, setFlags*, masterWeight*,
                   lowThreshold*, medThreshold*, highThreshold*,
                   homeDomain* (string<32>), signer*
    Operation    = sourceAccount*, int32 type, body arm
"""

from typing import Callable, Optional, TypeVar

from pydantic import ValidationError

from ..enums import OperationType, PublicKeyType, SignerKeyType
from ..runtime.errors import MarshalError, UnmarshalError
from ..xdr_types import (
    HOME_DOMAIN_MAX_LENGTH, Operation, OperationBody, PublicKey, SetOptionsOp, Signer, SignerKey
)
from .reader import XdrReader
from .writer import XdrWriter

T = TypeVar('T')

KEY_SIZE = 32


# =============================================================================
# Encoding
# =============================================================================

def _write_optional(writer: XdrWriter, value: Optional[T], write: Callable[[XdrWriter, T], None]) -> None:
    writer.optional(value is not None)
    if value is not None:
        write(writer, value)


def _write_public_key(writer: XdrWriter, key: PublicKey) -> None:
    writer.int32(int(key.type))
    writer.opaque_fixed(key.ed25519, KEY_SIZE)


def _write_signer(writer: XdrWriter, signer: Signer) -> None:
    writer.int32(int(signer.key.type))
    writer.opaque_fixed(signer.key.key, KEY_SIZE)
    writer.uint32(signer.weight)


def _write_uint32(writer: XdrWriter, value: int) -> None:
    writer.uint32(value)


def _write_home_domain(writer: XdrWriter, value: str) -> None:
    writer.string(value, HOME_DOMAIN_MAX_LENGTH)


def _write_set_options_op(writer: XdrWriter, op: SetOptionsOp) -> None:
    _write_optional(writer, op.inflation_dest, _write_public_key)
    _write_optional(writer, op.clear_flags, _write_uint32)
    _write_optional(writer, op.set_flags, _write_uint32)
    _write_optional(writer, op.master_weight, _write_uint32)
    _write_optional(writer, op.low_threshold, _write_uint32)
    _write_optional(writer, op.med_threshold, _write_uint32)
    _write_optional(writer, op.high_threshold, _write_uint32)
    _write_optional(writer, op.home_domain, _write_home_domain)
    _write_optional(writer, op.signer, _write_signer)


def encode_set_options_op(op: SetOptionsOp) -> bytes:
    """
    Encode a SetOptionsOp as XDR.

    Raises:
        MarshalError: If a value does not fit its XDR type
    """
    writer = XdrWriter()
    try:
        _write_set_options_op(writer, op)
    except ValueError as e:
        raise MarshalError(f"Failed to marshal SetOptionsOp: {e}", cause=e) from e
    return writer.to_bytes()


def encode_operation(op: Operation) -> bytes:
    """
    Encode an Operation as XDR.

    Raises:
        MarshalError: If a value does not fit its XDR type or the body arm is unknown
    """
    writer = XdrWriter()
    try:
        _write_optional(writer, op.source_account, _write_public_key)
        writer.int32(int(op.body.type))
        if op.body.type == OperationType.SET_OPTIONS:
            _write_set_options_op(writer, op.body.set_options_op)
        else:
            raise MarshalError(f"No encoder for operation type {op.body.type.name}")
    except ValueError as e:
        raise MarshalError(f"Failed to marshal Operation: {e}", cause=e) from e
    return writer.to_bytes()


# =============================================================================
# Decoding
# =============================================================================

def _read_optional(reader: XdrReader, read: Callable[[XdrReader], T]) -> Optional[T]:
    if reader.optional():
        return read(reader)
    return None


def _read_public_key(reader: XdrReader) -> PublicKey:
    key_type = PublicKeyType(reader.int32())
    return PublicKey(type=key_type, ed25519=reader.opaque_fixed(KEY_SIZE))


def _read_signer(reader: XdrReader) -> Signer:
    key_type = SignerKeyType(reader.int32())
    key = SignerKey(type=key_type, key=reader.opaque_fixed(KEY_SIZE))
    return Signer(key=key, weight=reader.uint32())


def _read_uint32(reader: XdrReader) -> int:
    return reader.uint32()


def _read_home_domain(reader: XdrReader) -> str:
    return reader.string(HOME_DOMAIN_MAX_LENGTH)


def _read_set_options_op(reader: XdrReader) -> SetOptionsOp:
    return SetOptionsOp(
        inflation_dest=_read_optional(reader, _read_public_key),
        clear_flags=_read_optional(reader, _read_uint32),
        set_flags=_read_optional(reader, _read_uint32),
        master_weight=_read_optional(reader, _read_uint32),
        low_threshold=_read_optional(reader, _read_uint32),
        med_threshold=_read_optional(reader, _read_uint32),
        high_threshold=_read_optional(reader, _read_uint32),
        home_domain=_read_optional(reader, _read_home_domain),
        signer=_read_optional(reader, _read_signer),
    )


def _decode(data: bytes, read: Callable[[XdrReader], T], name: str) -> T:
    reader = XdrReader(data)
    try:
        value = read(reader)
    except (ValueError, ValidationError) as e:
        raise UnmarshalError(f"Failed to unmarshal {name}: {e}", cause=e) from e
    if not reader.eof:
        raise UnmarshalError(
            f"Failed to unmarshal {name}: {reader.remaining} trailing bytes",
            details={"trailing": reader.remaining},
        )
    return value


def decode_set_options_op(data: bytes) -> SetOptionsOp:
    """
    Decode a SetOptionsOp from XDR.

    Raises:
        UnmarshalError: If the data is truncated, malformed or has trailing bytes
    """
    return _decode(data, _read_set_options_op, "SetOptionsOp")


def _read_operation(reader: XdrReader) -> Operation:
    source_account = _read_optional(reader, _read_public_key)
    op_type = OperationType(reader.int32())
    if op_type != OperationType.SET_OPTIONS:
        raise ValueError(f"No decoder for operation type {op_type.name}")
    body = OperationBody(type=op_type, set_options_op=_read_set_options_op(reader))
    return Operation(source_account=source_account, body=body)


def decode_operation(data: bytes) -> Operation:
    """
    Decode an Operation from XDR.

    Raises:
        UnmarshalError: If the data is truncated, malformed, has trailing bytes
            or carries an operation type without a decoder
    """
    return _decode(data, _read_operation, "Operation")


__all__ = [
    "encode_set_options_op",
    "encode_operation",
    "decode_set_options_op",
    "decode_operation",
]
