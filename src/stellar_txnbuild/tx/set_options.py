"""
Set options operation.

Turns a sparse SetOptions request into the canonical SetOptionsOp record
wrapped in an Operation. Each field handler reads its slice of the request
and writes into a fresh slot accumulator; the first failing handler aborts
the build and nothing is returned.

Reference: https://developers.stellar.org/docs/learn/fundamentals/list-of-operations#set-options
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Annotated

from pydantic import BaseModel, Field

from ..enums import OperationType
from ..runtime.errors import AddressError, FieldTooLongError, InvalidAddressError
from ..runtime.strkey import AddressCodec
from ..xdr_types import Operation, SetOptionsOp, Signer
from .envelope import OperationEnvelope
from .params import BuilderParams, default_params

logger = logging.getLogger(__name__)

Uint8 = Annotated[int, Field(ge=0, le=255)]
Uint32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]

_DEFAULT_CODEC = AddressCodec()


# =============================================================================
# Request
# =============================================================================

class SignerSpec(BaseModel):
    """Signer address and weight. Weight 0 asks the ledger to remove the signer."""
    address: str = ""
    weight: Optional[Uint8] = None

    model_config = {"populate_by_name": True, "validate_assignment": True}

    def is_default(self) -> bool:
        """True when both fields hold their zero value, meaning "no signer change"."""
        return self.address == "" and not self.weight


class SetOptions(BaseModel):
    """
    Set options request.

    Fields left as None (or empty) are omitted from the operation. Weights
    and thresholds of 0 are real values and are always encoded.
    """
    # Once set, the inflation destination can be changed but never unset
    inflation_destination: Optional[str] = Field(None, alias="inflationDestination")
    set_authorization: List[Uint32] = Field(default_factory=list, alias="setAuthorization")
    clear_authorization: List[Uint32] = Field(default_factory=list, alias="clearAuthorization")
    master_weight: Optional[Uint8] = Field(None, alias="masterWeight")
    low_threshold: Optional[Uint8] = Field(None, alias="lowThreshold")
    medium_threshold: Optional[Uint8] = Field(None, alias="mediumThreshold")
    high_threshold: Optional[Uint8] = Field(None, alias="highThreshold")
    home_domain: Optional[str] = Field(None, alias="homeDomain")
    signer: Optional[SignerSpec] = None
    source_account: Optional[str] = Field(None, alias="sourceAccount")

    model_config = {"populate_by_name": True, "validate_assignment": True}

    def build_xdr(self, codec: Optional[AddressCodec] = None,
                  params: Optional[BuilderParams] = None) -> Operation:
        """
        Build the wire operation for this request.

        Raises:
            EncodingError: On the first field that cannot be encoded
        """
        return build_set_options(self, codec, params)


# =============================================================================
# Field handlers
# =============================================================================

Slots = Dict[str, Any]


def merge_flags(flags: Iterable[int]) -> int:
    """
    Merge flag values into one bitmask.

    Each value is coerced to its uint32 bit pattern. Values outside the
    AccountFlag enumeration are kept as raw bits; repeated values collapse.
    """
    merged = 0
    for flag in flags:
        merged |= int(flag) & 0xFFFFFFFF
    return merged


def _resolve(resolve: Callable[[str], Any], address: str, field: str) -> Any:
    try:
        return resolve(address)
    except AddressError as e:
        raise InvalidAddressError(field, cause=e) from e


def _handle_inflation_destination(request: SetOptions, slots: Slots,
                                  codec: AddressCodec, params: BuilderParams) -> None:
    if request.inflation_destination:
        slots["inflation_dest"] = _resolve(codec.resolve, request.inflation_destination,
                                           "inflation destination")


def _handle_clear_flags(request: SetOptions, slots: Slots,
                        codec: AddressCodec, params: BuilderParams) -> None:
    if len(request.clear_authorization) > 0:
        slots["clear_flags"] = merge_flags(request.clear_authorization)


def _handle_set_flags(request: SetOptions, slots: Slots,
                      codec: AddressCodec, params: BuilderParams) -> None:
    if len(request.set_authorization) > 0:
        slots["set_flags"] = merge_flags(request.set_authorization)


def _forward(attr: str, slot: str) -> Callable[..., None]:
    def handler(request: SetOptions, slots: Slots,
                codec: AddressCodec, params: BuilderParams) -> None:
        value = getattr(request, attr)
        if value is not None:
            slots[slot] = value
    handler.__name__ = f"_handle_{attr}"
    return handler


def _handle_home_domain(request: SetOptions, slots: Slots,
                        codec: AddressCodec, params: BuilderParams) -> None:
    if request.home_domain:
        length = len(request.home_domain.encode("utf-8"))
        if length > params.home_domain_max_length:
            raise FieldTooLongError("home domain", length, params.home_domain_max_length)
        slots["home_domain"] = request.home_domain


def _handle_signer(request: SetOptions, slots: Slots,
                   codec: AddressCodec, params: BuilderParams) -> None:
    signer = request.signer
    if signer is None or signer.is_default():
        return
    key = _resolve(codec.resolve_signer_key, signer.address, "signer")
    slots["signer"] = Signer(key=key, weight=signer.weight or 0)


# Order decides which error is reported when several fields are bad
FIELD_HANDLERS = (
    _handle_inflation_destination,
    _handle_clear_flags,
    _handle_set_flags,
    _forward("master_weight", "master_weight"),
    _forward("low_threshold", "low_threshold"),
    _forward("medium_threshold", "med_threshold"),
    _forward("high_threshold", "high_threshold"),
    _handle_home_domain,
    _handle_signer,
)


# =============================================================================
# Build
# =============================================================================

def build_set_options_op(request: SetOptions, codec: Optional[AddressCodec] = None,
                         params: Optional[BuilderParams] = None) -> SetOptionsOp:
    """
    Build the canonical SetOptionsOp record without wrapping it.

    Raises:
        InvalidAddressError: If the inflation destination or signer address is malformed
        FieldTooLongError: If the home domain is too long
    """
    codec = codec or _DEFAULT_CODEC
    params = params or default_params()

    slots: Slots = {}
    for handler in FIELD_HANDLERS:
        handler(request, slots, codec, params)
    return SetOptionsOp(**slots)


def build_set_options(request: SetOptions, codec: Optional[AddressCodec] = None,
                      params: Optional[BuilderParams] = None) -> Operation:
    """
    Build a set options Operation from a request.

    The request is read, never modified; building an unchanged request
    again yields an identical operation.

    Args:
        request: The set options request
        codec: Address codec (defaults to the StrKey codec)
        params: Builder limits (defaults to default_params())

    Returns:
        Operation wrapping the SetOptionsOp record

    Raises:
        InvalidAddressError: If an address field is malformed
        FieldTooLongError: If the home domain is too long
        EnvelopeConstructionError: If the envelope rejects the record
    """
    codec = codec or _DEFAULT_CODEC
    record = build_set_options_op(request, codec, params)

    source_account = None
    if request.source_account:
        source_account = _resolve(codec.resolve, request.source_account, "source account")

    operation = OperationEnvelope.wrap(OperationType.SET_OPTIONS, record, source_account)
    logger.debug(f"Built SetOptions operation with fields: {record.present_fields()}")
    return operation


__all__ = [
    "SetOptions",
    "SignerSpec",
    "FIELD_HANDLERS",
    "merge_flags",
    "build_set_options",
    "build_set_options_op",
]
