"""
StrKey address codec.

Converts the ledger's human-readable account and signer addresses
(``G...``, ``T...``, ``X...``) to and from their binary keys. A StrKey is
the unpadded base32 form of ``version byte || payload || crc16``, with the
checksum stored little-endian.
"""

from __future__ import annotations
import base64
import binascii
import struct
from typing import Dict

from ..enums import PublicKeyType, SignerKeyType, VersionByte
from ..xdr_types import PublicKey, SignerKey
from .errors import AddressError, ErrorCode

# version byte + 32 byte key + 2 byte checksum, base32 encoded
ENCODED_LENGTH = 56

_SIGNER_KEY_TYPES: Dict[VersionByte, SignerKeyType] = {
    VersionByte.ACCOUNT_ID: SignerKeyType.ED25519,
    VersionByte.PRE_AUTH_TX: SignerKeyType.PRE_AUTH_TX,
    VersionByte.SHA256_HASH: SignerKeyType.HASH_X,
}

_SIGNER_PREFIXES: Dict[str, VersionByte] = {
    "G": VersionByte.ACCOUNT_ID,
    "T": VersionByte.PRE_AUTH_TX,
    "X": VersionByte.SHA256_HASH,
}


def crc16_xmodem(data: bytes) -> int:
    """CRC-16/XMODEM (polynomial 0x1021, initial value 0)."""
    crc = 0x0000
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def encode_check(version: VersionByte, payload: bytes) -> str:
    """
    Encode a binary key as StrKey text.

    Args:
        version: Version byte selecting the key kind
        payload: Raw key bytes

    Returns:
        Base32 StrKey text
    """
    data = bytes([int(version)]) + bytes(payload)
    checksum = struct.pack('<H', crc16_xmodem(data))
    return base64.b32encode(data + checksum).decode('ascii').rstrip('=')


def decode_check(version: VersionByte, text: str) -> bytes:
    """
    Decode StrKey text and verify its version byte and checksum.

    Args:
        version: Expected version byte
        text: StrKey text

    Returns:
        Raw key bytes

    Raises:
        AddressError: If the text is not a canonical StrKey of this version
    """
    if not isinstance(text, str):
        raise AddressError(f"Address must be a string, got {type(text).__name__}")
    if len(text) != ENCODED_LENGTH:
        raise AddressError(
            f"Address must be {ENCODED_LENGTH} characters, got {len(text)}",
            details={"address": text},
        )

    try:
        raw = base64.b32decode(text)
    except (binascii.Error, ValueError) as e:
        raise AddressError("Address is not valid base32", details={"address": text}, cause=e) from e

    if raw[0] != int(version):
        raise AddressError(
            f"Invalid version byte: expected {int(version)}, got {raw[0]}",
            code=ErrorCode.INVALID_VERSION_BYTE,
            details={"address": text},
        )

    data, checksum = raw[:-2], raw[-2:]
    if struct.unpack('<H', checksum)[0] != crc16_xmodem(data):
        raise AddressError("Invalid checksum", code=ErrorCode.INVALID_CHECKSUM, details={"address": text})

    return data[1:]


def is_valid(version: VersionByte, text: str) -> bool:
    """Check whether text is a valid StrKey of the given version."""
    try:
        decode_check(version, text)
    except AddressError:
        return False
    return True


class AddressCodec:
    """
    Resolves textual addresses to the binary keys carried on the wire.

    Stateless; a single instance may be shared between builds and threads.
    """

    def resolve(self, address: str) -> PublicKey:
        """
        Resolve an account address (``G...``) to its public key.

        Raises:
            AddressError: If the address is malformed
        """
        key = decode_check(VersionByte.ACCOUNT_ID, address)
        return PublicKey(type=PublicKeyType.ED25519, ed25519=key)

    def resolve_signer_key(self, address: str) -> SignerKey:
        """
        Resolve a signer address to its signer key.

        Accepts ed25519 account addresses (``G...``), pre-authorized
        transaction hashes (``T...``) and sha256 hash-x keys (``X...``).

        Raises:
            AddressError: If the address is malformed or of another kind
        """
        if not isinstance(address, str) or not address:
            raise AddressError("Signer address cannot be empty")

        version = _SIGNER_PREFIXES.get(address[0])
        if version is None:
            raise AddressError(
                f"Unsupported signer key prefix: {address[0]!r}",
                code=ErrorCode.INVALID_VERSION_BYTE,
                details={"address": address},
            )
        key = decode_check(version, address)
        return SignerKey(type=_SIGNER_KEY_TYPES[version], key=key)


__all__ = [
    "AddressCodec",
    "crc16_xmodem",
    "encode_check",
    "decode_check",
    "is_valid",
]
