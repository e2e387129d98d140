"""Key material for building operations."""

from .keypair import Keypair, KeypairError

__all__ = ["Keypair", "KeypairError"]
