# Wire record definitions for the set options operation
# Field layout follows Stellar-transaction.x (SetOptionsOp, Operation)

from __future__ import annotations
import base64
from typing import Optional, Any, Dict, List, Annotated
from pydantic import BaseModel, Field, field_validator, model_validator

from .enums import OperationType, PublicKeyType, SignerKeyType, VersionByte

Uint32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
Key256 = Annotated[bytes, Field(min_length=32, max_length=32)]

# string32 in the XDR schema
HOME_DOMAIN_MAX_LENGTH = 32


# =============================================================================
# Keys
# =============================================================================

class PublicKey(BaseModel):
    """Account key resolved from a ``G...`` address."""
    type: PublicKeyType = PublicKeyType.ED25519
    ed25519: Key256

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def address(self) -> str:
        """StrKey form of this key."""
        from .runtime.strkey import encode_check
        return encode_check(VersionByte.ACCOUNT_ID, self.ed25519)


_SIGNER_KEY_VERSIONS = {
    SignerKeyType.ED25519: VersionByte.ACCOUNT_ID,
    SignerKeyType.PRE_AUTH_TX: VersionByte.PRE_AUTH_TX,
    SignerKeyType.HASH_X: VersionByte.SHA256_HASH,
}


class SignerKey(BaseModel):
    """Signer key: ed25519 public key, pre-authorized tx hash or hash-x."""
    type: SignerKeyType = SignerKeyType.ED25519
    key: Key256

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def address(self) -> str:
        """StrKey form of this signer key."""
        from .runtime.strkey import encode_check
        return encode_check(_SIGNER_KEY_VERSIONS[self.type], self.key)


class Signer(BaseModel):
    """Signer key paired with its weight. Weight 0 removes the signer ledger-side."""
    key: SignerKey
    weight: Uint32 = 0

    model_config = {"populate_by_name": True, "frozen": True}


# =============================================================================
# Set Options
# =============================================================================

class SetOptionsOp(BaseModel):
    """
    Canonical set options record.

    Every slot is optional; None means the field is omitted from the wire
    payload and the ledger leaves the corresponding account setting alone.
    """
    inflation_dest: Optional[PublicKey] = Field(None, alias="inflationDest")
    clear_flags: Optional[Uint32] = Field(None, alias="clearFlags")
    set_flags: Optional[Uint32] = Field(None, alias="setFlags")
    master_weight: Optional[Uint32] = Field(None, alias="masterWeight")
    low_threshold: Optional[Uint32] = Field(None, alias="lowThreshold")
    med_threshold: Optional[Uint32] = Field(None, alias="medThreshold")
    high_threshold: Optional[Uint32] = Field(None, alias="highThreshold")
    home_domain: Optional[str] = Field(None, alias="homeDomain")
    signer: Optional[Signer] = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("home_domain")
    @classmethod
    def _check_home_domain(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value.encode("utf-8")) > HOME_DOMAIN_MAX_LENGTH:
            raise ValueError(f"home domain exceeds {HOME_DOMAIN_MAX_LENGTH} bytes")
        return value

    def present_fields(self) -> List[str]:
        """Names of the slots that carry a value."""
        return [name for name in type(self).model_fields if getattr(self, name) is not None]

    def to_xdr(self) -> bytes:
        """Encode as XDR bytes."""
        from .codec.operation_codec import encode_set_options_op
        return encode_set_options_op(self)


# =============================================================================
# Operation
# =============================================================================

class OperationBody(BaseModel):
    """Operation body union; only the set options arm is modelled."""
    type: OperationType
    set_options_op: Optional[SetOptionsOp] = Field(None, alias="setOptionsOp")

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def _check_arm(self) -> "OperationBody":
        if self.type == OperationType.SET_OPTIONS and self.set_options_op is None:
            raise ValueError("set options body requires setOptionsOp")
        if self.type != OperationType.SET_OPTIONS and self.set_options_op is not None:
            raise ValueError(f"setOptionsOp is not valid for {self.type.name}")
        return self


class Operation(BaseModel):
    """A single operation ready to be placed in a transaction."""
    source_account: Optional[PublicKey] = Field(None, alias="sourceAccount")
    body: OperationBody

    model_config = {"populate_by_name": True, "frozen": True}

    def to_xdr(self) -> bytes:
        """Encode as XDR bytes."""
        from .codec.operation_codec import encode_operation
        return encode_operation(self)

    def to_xdr_base64(self) -> str:
        """Encode as base64 XDR, the form used by Horizon and stellar-core."""
        return base64.b64encode(self.to_xdr()).decode("ascii")

    @classmethod
    def from_xdr(cls, data: bytes) -> "Operation":
        """Decode from XDR bytes."""
        from .codec.operation_codec import decode_operation
        return decode_operation(data)

    @classmethod
    def from_xdr_base64(cls, text: str) -> "Operation":
        """Decode from base64 XDR."""
        from .runtime.errors import UnmarshalError
        try:
            data = base64.b64decode(text, validate=True)
        except ValueError as e:
            raise UnmarshalError("Invalid base64 XDR", cause=e) from e
        return cls.from_xdr(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict with keys in wire naming and bytes as hex."""
        return _normalize_bytes_to_hex(self.model_dump(exclude_none=True, by_alias=True))

    def to_canonical_json(self) -> bytes:
        """Canonical JSON bytes of to_dict()."""
        from .canonjson import dumps_canonical
        return dumps_canonical(self.to_dict()).encode("utf-8")


def _normalize_bytes_to_hex(data: Any) -> Any:
    """Recursively convert bytes to hex strings for JSON serialization."""
    if isinstance(data, bytes):
        return data.hex()
    elif isinstance(data, dict):
        return {k: _normalize_bytes_to_hex(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_normalize_bytes_to_hex(item) for item in data]
    return data


__all__ = [
    "PublicKey",
    "SignerKey",
    "Signer",
    "SetOptionsOp",
    "OperationBody",
    "Operation",
    "HOME_DOMAIN_MAX_LENGTH",
]
