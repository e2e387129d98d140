"""
Test factories for creating test data consistently.

Provides utilities for creating keypairs, StrKey addresses and set options
requests and builders.
"""

from __future__ import annotations
import hashlib
import secrets
from typing import Union

from stellar_txnbuild.crypto import Keypair
from stellar_txnbuild.enums import VersionByte
from stellar_txnbuild.runtime.strkey import encode_check
from stellar_txnbuild.tx import SetOptions, SetOptionsBuilder


def mk_seed(seed: Union[int, bytes, None] = None) -> bytes:
    """
    Create a 32-byte seed.

    Args:
        seed: Optional int or bytes for deterministic generation

    Returns:
        32 seed bytes
    """
    if seed is None:
        return secrets.token_bytes(32)
    if isinstance(seed, int):
        return seed.to_bytes(32, 'big')
    if len(seed) == 32:
        return seed
    return hashlib.sha256(seed).digest()


def mk_keypair(seed: Union[int, bytes, None] = None) -> Keypair:
    """Create a deterministic Ed25519 keypair for testing."""
    return Keypair.from_raw_seed(mk_seed(seed))


def mk_address(seed: Union[int, bytes, None] = None) -> str:
    """Create a ``G...`` account address."""
    return mk_keypair(seed).address()


def mk_pre_auth_tx_address(tx_hash: bytes = b"tx") -> str:
    """Create a ``T...`` pre-authorized transaction signer address."""
    return encode_check(VersionByte.PRE_AUTH_TX, hashlib.sha256(tx_hash).digest())


def mk_hash_x_address(preimage: bytes = b"preimage") -> str:
    """Create an ``X...`` hash-x signer address."""
    return encode_check(VersionByte.SHA256_HASH, hashlib.sha256(preimage).digest())


def mk_set_options(**kwargs) -> SetOptions:
    """Create a set options request from field values."""
    return SetOptions(**kwargs)


def mk_set_options_builder(**kwargs) -> SetOptionsBuilder:
    """
    Create a set options builder with optional initial fields.

    Args:
        **kwargs: Initial request field values

    Returns:
        Configured builder
    """
    builder = SetOptionsBuilder()
    for key, value in kwargs.items():
        builder.with_field(key, value)
    return builder
