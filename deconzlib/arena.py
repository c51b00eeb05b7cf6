"""Bump allocator handing out aligned views of a single buffer."""

from __future__ import annotations

import struct

__all__ = ["ArenaExhausted", "Arena", "memalign", "ALIGN_1", "ALIGN_8", "ALIGN_16"]

ALIGN_1 = 1
ALIGN_8 = 8
ALIGN_16 = 16

_SIZE_MASK = 0x7FFFFFFF
_VALID_ALIGNMENTS = (1, 4, 8, 16, 32, 64)
_HEADER = struct.Struct("<Q")
_RESERVE = 32


class ArenaExhausted(MemoryError):
    """Raised when an arena has no room left for an allocation."""


def memalign(offset: int, align: int) -> int:
    """Round *offset* up to the next multiple of *align*."""
    if align not in _VALID_ALIGNMENTS:
        raise ValueError(f"unsupported alignment: {align}")
    return (offset + align - 1) & ~(align - 1)


class Arena:
    """Allocates consecutive regions from one buffer and frees them all at once.

    Every region is preceded by an 8 byte little endian header holding its
    size. With *buffer* the arena works on caller-owned memory, otherwise
    it owns a zero-filled buffer of *size* bytes.
    """

    def __init__(self, size: int, buffer: bytearray | memoryview | None = None) -> None:
        if size < 0 or (size & _SIZE_MASK) != size:
            raise ValueError(f"arena size out of range: {size}")
        if buffer is None:
            self._buf: bytearray | memoryview | None = bytearray(size)
            self.owns_buffer = True
        else:
            if len(buffer) < size:
                raise ValueError("buffer smaller than arena size")
            self._buf = buffer
            self.owns_buffer = False
        self.capacity = size
        self.used = 0

    def __enter__(self) -> Arena:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.free()

    def alloc(self, size: int, alignment: int = ALIGN_8) -> memoryview:
        """Return a writable view of *size* bytes aligned to *alignment*."""
        if size <= 0:
            raise ValueError("allocation size must be positive")
        if self._buf is None or self.capacity == 0:
            raise ArenaExhausted("arena has no memory")
        if self.capacity < self.used + _RESERVE + size:
            raise ArenaExhausted("arena memory exhausted")

        header = memalign(self.used, _HEADER.size)
        start = memalign(header + _HEADER.size, alignment)
        if self.capacity - start <= size:
            raise ArenaExhausted("arena memory exhausted")

        _HEADER.pack_into(self._buf, header, size)
        self.used = start + size
        return memoryview(self._buf)[start:start + size]

    def free(self) -> None:
        """Release all allocations; an owned buffer is dropped."""
        self._buf = None
        self.capacity = 0
        self.used = 0
        self.owns_buffer = False