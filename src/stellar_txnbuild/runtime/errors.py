"""
Stellar txnbuild error model

This module provides the error handling framework for the operation builders.
Every failure of a build surfaces as an EncodingError subclass carrying the
field that caused it and, where there is one, the underlying cause.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Tuple
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for builder, codec and envelope failures."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Address errors (100-199)
    INVALID_ADDRESS = 100
    INVALID_CHECKSUM = 101
    INVALID_VERSION_BYTE = 102

    # Encoding errors (200-299)
    ENCODING_ERROR = 200
    FIELD_TOO_LONG = 201
    MARSHAL_ERROR = 202
    UNMARSHAL_ERROR = 203
    ENVELOPE_CONSTRUCTION_FAILED = 204

    # Builder errors (300-399)
    INVALID_REQUEST = 300


class TxnBuildError(Exception):
    """
    Base class for all txnbuild errors.

    Provides structured error information: a code, free-form details and
    the exception that caused this one.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a txnbuild error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    # Attributes restored from details by from_dict
    _detail_attrs: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TxnBuildError':
        """
        Create error from dictionary representation.

        Works for every subclass without calling its constructor. The
        cause is not restored; to_dict only keeps its text.
        """
        error = cls.__new__(cls)
        TxnBuildError.__init__(
            error,
            data.get("message", "Unknown error"),
            ErrorCode(data.get("code", ErrorCode.UNKNOWN)),
            data.get("details"),
        )
        for attr in cls._detail_attrs:
            setattr(error, attr, error.details.get(attr))
        return error


class AddressError(TxnBuildError):
    """Address text failed StrKey validation."""

    def __init__(self, message: str = "Invalid address", code: ErrorCode = ErrorCode.INVALID_ADDRESS,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class EncodingError(TxnBuildError):
    """Failure to encode a request into its wire record."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidAddressError(EncodingError):
    """An address field of the request could not be resolved to a key."""

    _detail_attrs = ("field",)

    def __init__(self, field: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to set {field} address",
            ErrorCode.INVALID_ADDRESS,
            {"field": field},
            cause,
        )
        self.field = field


class FieldTooLongError(EncodingError):
    """A bounded text field exceeds its limit."""

    _detail_attrs = ("field", "length", "limit")

    def __init__(self, field: str, length: int, limit: int):
        super().__init__(
            f"{field} must be {limit} bytes or fewer, got {length}",
            ErrorCode.FIELD_TOO_LONG,
            {"field": field, "length": length, "limit": limit},
        )
        self.field = field
        self.length = length
        self.limit = limit


class EnvelopeConstructionError(EncodingError):
    """The operation envelope rejected the assembled payload."""

    def __init__(self, message: str = "Failed to build XDR OperationBody",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENVELOPE_CONSTRUCTION_FAILED, details, cause)


class MarshalError(EncodingError):
    """XDR marshaling error."""

    def __init__(self, message: str = "Marshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MARSHAL_ERROR, details, cause)


class UnmarshalError(EncodingError):
    """XDR unmarshaling error."""

    def __init__(self, message: str = "Unmarshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause)


class BuilderError(TxnBuildError):
    """The fluent builder could not produce a valid request."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_REQUEST, details, cause)


__all__ = [
    "ErrorCode",
    "TxnBuildError",
    "AddressError",
    "EncodingError",
    "InvalidAddressError",
    "FieldTooLongError",
    "EnvelopeConstructionError",
    "MarshalError",
    "UnmarshalError",
    "BuilderError",
]
