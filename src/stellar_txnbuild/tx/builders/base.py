"""
Base operation builder.

Collects request fields through chainable setters and turns them into a
validated request model, then into a wire Operation.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Type, Dict, Any, Optional
from abc import ABC, abstractmethod

from pydantic import BaseModel, ValidationError

from ...enums import OperationType
from ...runtime.errors import BuilderError
from ...runtime.strkey import AddressCodec
from ...xdr_types import Operation
from ..params import BuilderParams

RequestT = TypeVar('RequestT', bound=BaseModel)


class BaseOperationBuilder(Generic[RequestT], ABC):
    """
    Base class for all operation builders.

    Generic over RequestT = the request model the builder fills in.
    """

    def __init__(self):
        """Initialize the builder."""
        self._fields: Dict[str, Any] = {}

    @property
    @abstractmethod
    def op_type(self) -> OperationType:
        """Get the operation type."""
        pass

    @property
    @abstractmethod
    def request_cls(self) -> Type[RequestT]:
        """Get the request model class."""
        pass

    @abstractmethod
    def _build(self, request: RequestT, codec: Optional[AddressCodec],
               params: Optional[BuilderParams]) -> Operation:
        """Build the operation for a validated request."""
        pass

    def with_field(self, name: str, value: Any) -> BaseOperationBuilder[RequestT]:
        """
        Set a field value (chainable).

        Args:
            name: Request field name
            value: Field value

        Returns:
            Self for chaining
        """
        self._fields[name] = value
        return self

    def get_field(self, name: str, default: Any = None) -> Any:
        """
        Get a field value.

        Args:
            name: Field name
            default: Default value if not set

        Returns:
            Field value
        """
        return self._fields.get(name, default)

    def to_request(self) -> RequestT:
        """
        Create the request model from the collected fields.

        Raises:
            BuilderError: If a field value is out of range or of the wrong type
        """
        try:
            return self.request_cls.model_validate(self._fields)
        except ValidationError as e:
            raise BuilderError(
                f"Invalid {self.op_type.name} request: {e.error_count()} field error(s)",
                details={"fields": sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})},
                cause=e,
            ) from e

    def build(self, codec: Optional[AddressCodec] = None,
              params: Optional[BuilderParams] = None) -> Operation:
        """
        Build the wire operation.

        Raises:
            BuilderError: If the collected fields do not form a valid request
            EncodingError: If the request cannot be encoded
        """
        return self._build(self.to_request(), codec, params)

    def to_xdr(self) -> bytes:
        """
        Convert to XDR bytes.

        Returns:
            XDR encoding of the built operation
        """
        return self.build().to_xdr()

    def to_xdr_base64(self) -> str:
        """
        Convert to base64 XDR.

        Returns:
            Base64 XDR of the built operation
        """
        return self.build().to_xdr_base64()

    def to_canonical_json(self) -> bytes:
        """
        Convert to canonical JSON bytes.

        Returns:
            Canonical JSON representation of the built operation
        """
        return self.build().to_canonical_json()

    @classmethod
    def from_model(cls, request: RequestT) -> BaseOperationBuilder[RequestT]:
        """
        Create a builder from an existing request model.

        Args:
            request: Existing request

        Returns:
            Builder instance
        """
        builder = cls()
        for name, value in request.model_dump(exclude_none=True).items():
            builder.with_field(name, value)
        return builder

    def clone(self) -> BaseOperationBuilder[RequestT]:
        """
        Create a copy of this builder.

        Returns:
            New builder instance with same state
        """
        cloned = self.__class__()
        cloned._fields = {
            name: list(value) if isinstance(value, list) else value
            for name, value in self._fields.items()
        }
        return cloned

    def reset(self) -> BaseOperationBuilder[RequestT]:
        """
        Reset builder to initial state.

        Returns:
            Self for chaining
        """
        self._fields.clear()
        return self

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.op_type.name}, {len(self._fields)} fields)"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type='{self.op_type.name}', fields={list(self._fields.keys())})"


__all__ = [
    "BaseOperationBuilder",
    "BuilderError",
]
