"""
Ed25519 keypairs with StrKey addresses.

Produces the ``G...`` account addresses and ``S...`` secret seeds the
builders consume.
"""

from __future__ import annotations
import os
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ..enums import VersionByte
from ..runtime.errors import AddressError
from ..runtime.strkey import decode_check, encode_check

SEED_LENGTH = 32


class KeypairError(AddressError):
    """Invalid key material."""
    pass


class Keypair:
    """
    Ed25519 keypair.

    A keypair built from a public key alone can verify but not sign.
    """

    def __init__(self, public_key: bytes, seed: Optional[bytes] = None):
        """
        Initialize from raw key material.

        Args:
            public_key: 32-byte Ed25519 public key
            seed: Optional 32-byte private seed

        Raises:
            KeypairError: If key material has the wrong length
        """
        if len(public_key) != 32:
            raise KeypairError(f"Ed25519 public key must be 32 bytes, got {len(public_key)}")
        self._public_key = Ed25519PublicKey.from_public_bytes(public_key)
        self._raw_public_key = bytes(public_key)

        self._private_key: Optional[Ed25519PrivateKey] = None
        self._seed = None
        if seed is not None:
            if len(seed) != SEED_LENGTH:
                raise KeypairError(f"Ed25519 seed must be {SEED_LENGTH} bytes, got {len(seed)}")
            self._private_key = Ed25519PrivateKey.from_private_bytes(seed)
            self._seed = bytes(seed)

    @classmethod
    def from_raw_seed(cls, seed: bytes) -> Keypair:
        """Create a signing keypair from a 32-byte seed."""
        if len(seed) != SEED_LENGTH:
            raise KeypairError(f"Ed25519 seed must be {SEED_LENGTH} bytes, got {len(seed)}")
        private_key = Ed25519PrivateKey.from_private_bytes(seed)
        public_key = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return cls(public_key, seed)

    @classmethod
    def random(cls) -> Keypair:
        """Generate a new random signing keypair."""
        return cls.from_raw_seed(os.urandom(SEED_LENGTH))

    @classmethod
    def from_secret(cls, secret: str) -> Keypair:
        """Create a signing keypair from an ``S...`` secret seed."""
        return cls.from_raw_seed(decode_check(VersionByte.SEED, secret))

    @classmethod
    def from_address(cls, address: str) -> Keypair:
        """Create a verify-only keypair from a ``G...`` address."""
        return cls(decode_check(VersionByte.ACCOUNT_ID, address))

    def raw_public_key(self) -> bytes:
        """Get the 32-byte public key."""
        return self._raw_public_key

    def address(self) -> str:
        """Get the ``G...`` account address."""
        return encode_check(VersionByte.ACCOUNT_ID, self._raw_public_key)

    def secret(self) -> str:
        """Get the ``S...`` secret seed."""
        if self._seed is None:
            raise KeypairError("Keypair has no private key")
        return encode_check(VersionByte.SEED, self._seed)

    def can_sign(self) -> bool:
        return self._private_key is not None

    def sign(self, data: bytes) -> bytes:
        """
        Sign data.

        Returns:
            64-byte Ed25519 signature

        Raises:
            KeypairError: If the keypair has no private key
        """
        if self._private_key is None:
            raise KeypairError("Keypair has no private key")
        return self._private_key.sign(data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Verify a signature over data."""
        try:
            self._public_key.verify(signature, data)
        except InvalidSignature:
            return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Keypair):
            return False
        return self._raw_public_key == other._raw_public_key

    def __hash__(self) -> int:
        return hash(self._raw_public_key)

    def __repr__(self) -> str:
        return f"Keypair('{self.address()}')"
