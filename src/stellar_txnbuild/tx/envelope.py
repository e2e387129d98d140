"""
Operation envelope.

Wraps a typed operation payload in the tagged Operation union.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from ..enums import OperationType
from ..runtime.errors import EnvelopeConstructionError
from ..xdr_types import Operation, OperationBody, PublicKey, SetOptionsOp

logger = logging.getLogger(__name__)

# Operation kind -> (payload class, body arm name)
_PAYLOADS: Dict[OperationType, tuple] = {
    OperationType.SET_OPTIONS: (SetOptionsOp, "set_options_op"),
}


class OperationEnvelope:
    """Builds Operation values from a kind tag and its payload."""

    @staticmethod
    def payload_type(kind: OperationType) -> Optional[Type[BaseModel]]:
        """Get the payload class registered for an operation kind."""
        entry = _PAYLOADS.get(kind)
        return entry[0] if entry else None

    @staticmethod
    def wrap(kind: Any, payload: BaseModel, source_account: Optional[PublicKey] = None) -> Operation:
        """
        Wrap a payload with its operation kind tag.

        Args:
            kind: Operation kind (OperationType or its integer value)
            payload: Payload model for that kind
            source_account: Optional operation-level source account

        Returns:
            The assembled Operation

        Raises:
            EnvelopeConstructionError: If the kind is unknown or the payload does not match it
        """
        try:
            kind = OperationType(kind)
        except ValueError as e:
            raise EnvelopeConstructionError(f"Unknown operation type: {kind!r}", cause=e) from e

        entry = _PAYLOADS.get(kind)
        if entry is None:
            raise EnvelopeConstructionError(
                f"No payload registered for operation type {kind.name}",
                details={"type": kind.name},
            )

        payload_cls, arm = entry
        if not isinstance(payload, payload_cls):
            raise EnvelopeConstructionError(
                f"{kind.name} expects {payload_cls.__name__}, got {type(payload).__name__}",
                details={"type": kind.name},
            )

        try:
            body = OperationBody(type=kind, **{arm: payload})
            operation = Operation(source_account=source_account, body=body)
        except ValidationError as e:
            raise EnvelopeConstructionError(cause=e) from e

        logger.debug(f"Wrapped {kind.name} payload in operation envelope")
        return operation


__all__ = ["OperationEnvelope"]
