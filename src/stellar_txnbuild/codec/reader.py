"""
XDR Reader

Mirror of XdrWriter. Reads past the end of the buffer and malformed
padding or presence words raise ValueError.
"""

import builtins
import struct


class XdrReader:
    """
    Sequential XDR reader over a byte buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def _take(self, n: int) -> builtins.bytes:
        if self._off + n > len(self._buf):
            raise ValueError(f"Buffer overflow: attempting to read {n} bytes at offset {self._off}")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def _skip_padding(self, n: int) -> None:
        pad = (4 - n % 4) % 4
        if pad and self._take(pad) != b'\x00' * pad:
            raise ValueError("Non-zero XDR padding")

    def uint32(self) -> int:
        """Read unsigned 32-bit big-endian integer."""
        return struct.unpack('>I', self._take(4))[0]

    def int32(self) -> int:
        """Read signed 32-bit big-endian integer."""
        return struct.unpack('>i', self._take(4))[0]

    def boolean(self) -> bool:
        """Read a boolean; only 0 and 1 are valid."""
        value = self.uint32()
        if value not in (0, 1):
            raise ValueError(f"Invalid XDR boolean: {value}")
        return value == 1

    def optional(self) -> bool:
        """Read the presence word of an optional item."""
        return self.boolean()

    def opaque_fixed(self, size: int) -> builtins.bytes:
        """Read fixed-length opaque data and its padding."""
        out = self._take(size)
        self._skip_padding(size)
        return out

    def opaque_var(self, max_size: int = 0xFFFFFFFF) -> builtins.bytes:
        """Read variable-length opaque data bounded by max_size."""
        n = self.uint32()
        if n > max_size:
            raise ValueError(f"opaque<{max_size}> declared {n} bytes")
        out = self._take(n)
        self._skip_padding(n)
        return out

    def string(self, max_size: int = 0xFFFFFFFF) -> str:
        """Read a UTF-8 string bounded by max_size bytes."""
        return self.opaque_var(max_size).decode('utf-8')
