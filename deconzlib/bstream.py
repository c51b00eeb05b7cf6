"""Bounds-checked little/big endian byte stream over a byte buffer."""

from __future__ import annotations

import enum
import struct

__all__ = ["BStreamStatus", "BStreamError", "ByteStream"]


class BStreamStatus(enum.Enum):
    """State of a :class:`ByteStream`; any value but OK is sticky."""

    OK = 0
    READ_PAST_END = 1
    WRITE_PAST_END = 2
    NOT_INITIALISED = 3


class BStreamError(Exception):
    """Raised when a stream operation fails; carries the stream status."""

    def __init__(self, status: BStreamStatus) -> None:
        super().__init__(f"byte stream error: {status.name}")
        self.status = status


class ByteStream:
    """Reads and writes fixed-width integers at a moving position.

    *data* may be a bytearray (written in place), any other bytes-like
    object (copied), an int giving the size of a zeroed buffer, or None
    for an uninitialised stream. Once an operation fails the stream keeps
    its error status and every later operation raises
    :class:`BStreamError` as well.
    """

    def __init__(self, data: bytes | bytearray | memoryview | int | None = None) -> None:
        if data is None:
            self._buf: bytearray | None = None
        elif isinstance(data, bytearray):
            self._buf = data
        else:
            self._buf = bytearray(data)
        self.pos = 0
        self.status = BStreamStatus.OK

    @property
    def size(self) -> int:
        """Total size of the underlying buffer in bytes."""
        return 0 if self._buf is None else len(self._buf)

    @property
    def data(self) -> bytes:
        """A copy of the whole underlying buffer."""
        return b"" if self._buf is None else bytes(self._buf)

    def _reserve(self, count: int, past_end: BStreamStatus) -> int:
        if self.status is not BStreamStatus.OK:
            raise BStreamError(self.status)
        if self._buf is None:
            self.status = BStreamStatus.NOT_INITIALISED
            raise BStreamError(self.status)
        if self.pos + count > len(self._buf):
            self.status = past_end
            raise BStreamError(self.status)
        start = self.pos
        self.pos += count
        return start

    def _put(self, fmt: str, value: int) -> None:
        start = self._reserve(struct.calcsize(fmt), BStreamStatus.WRITE_PAST_END)
        assert self._buf is not None
        struct.pack_into(fmt, self._buf, start, value)

    def _get(self, fmt: str) -> int:
        start = self._reserve(struct.calcsize(fmt), BStreamStatus.READ_PAST_END)
        assert self._buf is not None
        return struct.unpack_from(fmt, self._buf, start)[0]

    def put_u8(self, value: int) -> None:
        """Write one byte; the value is truncated to 8 bits."""
        self._put("<B", value & 0xFF)

    def put_u16_le(self, value: int) -> None:
        """Write a 16-bit little endian value, truncated to 16 bits."""
        self._put("<H", value & 0xFFFF)

    def put_s16_le(self, value: int) -> None:
        """Write a signed 16-bit value in two's complement little endian."""
        self.put_u16_le(value)

    def put_u32_le(self, value: int) -> None:
        """Write a 32-bit little endian value, truncated to 32 bits."""
        self._put("<I", value & 0xFFFFFFFF)

    def put_s32_le(self, value: int) -> None:
        """Write a signed 32-bit value in two's complement little endian."""
        self.put_u32_le(value)

    def get_u8(self) -> int:
        """Read one unsigned byte."""
        return self._get("<B")

    def get_u16_le(self) -> int:
        """Read an unsigned 16-bit little endian value."""
        return self._get("<H")

    def get_s16_le(self) -> int:
        """Read a signed 16-bit little endian value."""
        return self._get("<h")

    def get_u16_be(self) -> int:
        """Read an unsigned 16-bit big endian value."""
        return self._get(">H")

    def get_u32_le(self) -> int:
        """Read an unsigned 32-bit little endian value."""
        return self._get("<I")

    def get_s32_le(self) -> int:
        """Read a signed 32-bit little endian value."""
        return self._get("<i")

    def get_u32_be(self) -> int:
        """Read an unsigned 32-bit big endian value."""
        return self._get(">I")