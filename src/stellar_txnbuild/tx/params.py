"""
Builder parameters.

Tunable limits applied while turning requests into wire records.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..xdr_types import HOME_DOMAIN_MAX_LENGTH


@dataclass(frozen=True)
class BuilderParams:
    """Limits applied by the operation builders."""

    # Longest accepted home domain, in UTF-8 bytes
    home_domain_max_length: int = HOME_DOMAIN_MAX_LENGTH

    def __post_init__(self):
        # Bounded by the wire types
        if not 0 < self.home_domain_max_length <= HOME_DOMAIN_MAX_LENGTH:
            raise ValueError(f"home_domain_max_length must be in 1..{HOME_DOMAIN_MAX_LENGTH}")


_DEFAULT_PARAMS = BuilderParams()


def default_params() -> BuilderParams:
    """Get the shared default parameters."""
    return _DEFAULT_PARAMS
