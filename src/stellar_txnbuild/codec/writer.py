"""
XDR Writer

Implements RFC 4506 encoding for the primitives the operation records use:
big-endian 32-bit integers, booleans, fixed and variable opaque data,
strings and optional-data presence words. Every item is padded to a
multiple of four bytes.
"""

import struct
from typing import List

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF


def _padding(n: int) -> int:
    return (4 - n % 4) % 4


class XdrWriter:
    """
    Append-only XDR writer.

    Range errors raise ValueError; the operation codec turns them into
    MarshalError.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[bytes] = []

    def uint32(self, v: int) -> None:
        """
        Write unsigned 32-bit integer, big-endian.

        Args:
            v: Integer value to write (0 to 2**32-1)
        """
        if v < 0 or v > UINT32_MAX:
            raise ValueError(f"uint32 out of range: {v}")
        self._bb.append(struct.pack('>I', v))

    def int32(self, v: int) -> None:
        """
        Write signed 32-bit integer, big-endian two's complement.

        Used for enum and union discriminants.

        Args:
            v: Integer value to write
        """
        if v < INT32_MIN or v > INT32_MAX:
            raise ValueError(f"int32 out of range: {v}")
        self._bb.append(struct.pack('>i', v))

    def boolean(self, v: bool) -> None:
        """Write boolean as a 32-bit 0 or 1."""
        self.uint32(1 if v else 0)

    def optional(self, present: bool) -> None:
        """
        Write the presence word of an optional (``T*``) item.

        The caller writes the value itself when present is True.
        """
        self.boolean(present)

    def opaque_fixed(self, v: bytes, size: int) -> None:
        """
        Write fixed-length opaque data, zero padded.

        Args:
            v: Bytes to write
            size: Declared length; v must match it exactly
        """
        if len(v) != size:
            raise ValueError(f"opaque[{size}] got {len(v)} bytes")
        self._bb.append(bytes(v))
        self._bb.append(b'\x00' * _padding(size))

    def opaque_var(self, v: bytes, max_size: int = UINT32_MAX) -> None:
        """
        Write variable-length opaque data with a uint32 length prefix.

        Args:
            v: Bytes to write
            max_size: Declared maximum length
        """
        if len(v) > max_size:
            raise ValueError(f"opaque<{max_size}> got {len(v)} bytes")
        self.uint32(len(v))
        self._bb.append(bytes(v))
        self._bb.append(b'\x00' * _padding(len(v)))

    def string(self, s: str, max_size: int = UINT32_MAX) -> None:
        """
        Write a string as UTF-8 with a uint32 length prefix.

        Args:
            s: String to write
            max_size: Declared maximum length in bytes
        """
        self.opaque_var(s.encode('utf-8'), max_size)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return b''.join(self._bb)
