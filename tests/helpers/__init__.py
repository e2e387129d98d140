"""Shared test helpers."""

from .factories import (
    mk_address,
    mk_hash_x_address,
    mk_keypair,
    mk_pre_auth_tx_address,
    mk_seed,
    mk_set_options,
    mk_set_options_builder,
)

__all__ = [
    "mk_address",
    "mk_hash_x_address",
    "mk_keypair",
    "mk_pre_auth_tx_address",
    "mk_seed",
    "mk_set_options",
    "mk_set_options_builder",
]
