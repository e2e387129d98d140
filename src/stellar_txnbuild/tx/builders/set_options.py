"""
Set options builder.

Fluent interface over the SetOptions request.
"""

from __future__ import annotations
from typing import Optional

from ...enums import OperationType
from ...runtime.strkey import AddressCodec
from ...xdr_types import Operation
from ..params import BuilderParams
from ..set_options import SetOptions, build_set_options
from .base import BaseOperationBuilder


class SetOptionsBuilder(BaseOperationBuilder[SetOptions]):
    """Builder for set options operations."""

    @property
    def op_type(self) -> OperationType:
        return OperationType.SET_OPTIONS

    @property
    def request_cls(self):
        return SetOptions

    def _build(self, request: SetOptions, codec: Optional[AddressCodec],
               params: Optional[BuilderParams]) -> Operation:
        return build_set_options(request, codec, params)

    def inflation_destination(self, address: str) -> SetOptionsBuilder:
        """Set the inflation destination account."""
        return self.with_field('inflation_destination', address)

    def set_flags(self, *flags: int) -> SetOptionsBuilder:
        """Add authorization flags to set. Repeated calls accumulate."""
        current = list(self.get_field('set_authorization', []))
        current.extend(flags)
        return self.with_field('set_authorization', current)

    def clear_flags(self, *flags: int) -> SetOptionsBuilder:
        """Add authorization flags to clear. Repeated calls accumulate."""
        current = list(self.get_field('clear_authorization', []))
        current.extend(flags)
        return self.with_field('clear_authorization', current)

    def master_weight(self, weight: int) -> SetOptionsBuilder:
        """Set the master key weight (0 disables the master key)."""
        return self.with_field('master_weight', weight)

    def low_threshold(self, threshold: int) -> SetOptionsBuilder:
        """Set the low threshold."""
        return self.with_field('low_threshold', threshold)

    def medium_threshold(self, threshold: int) -> SetOptionsBuilder:
        """Set the medium threshold."""
        return self.with_field('medium_threshold', threshold)

    def high_threshold(self, threshold: int) -> SetOptionsBuilder:
        """Set the high threshold."""
        return self.with_field('high_threshold', threshold)

    def thresholds(self, low: int, medium: int, high: int) -> SetOptionsBuilder:
        """Set all three thresholds."""
        return self.low_threshold(low).medium_threshold(medium).high_threshold(high)

    def home_domain(self, domain: str) -> SetOptionsBuilder:
        """Set the home domain (at most 32 bytes of UTF-8)."""
        return self.with_field('home_domain', domain)

    def signer(self, address: str, weight: Optional[int] = None) -> SetOptionsBuilder:
        """Add, update or (with weight 0) remove a signer."""
        return self.with_field('signer', {'address': address, 'weight': weight})

    def source_account(self, address: str) -> SetOptionsBuilder:
        """Set the operation source account."""
        return self.with_field('source_account', address)


__all__ = ["SetOptionsBuilder"]
