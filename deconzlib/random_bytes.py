"""High entropy random bytes from the operating system."""

from __future__ import annotations

import os
from typing import Callable

__all__ = ["random_bytes"]

_ENTROPY_BATCH = 256

_RandBytes = Callable[[int], bytes]
_impl: _RandBytes | None = None


def _getentropy(size: int) -> bytes:
    # getrandom/getentropy deliver at most 256 bytes per call
    return b"".join(
        os.getrandom(min(_ENTROPY_BATCH, size - pos))
        for pos in range(0, size, _ENTROPY_BATCH)
    )


def _candidates() -> list[_RandBytes]:
    found: list[_RandBytes] = []
    if hasattr(os, "getrandom"):
        found.append(_getentropy)
    found.append(os.urandom)
    return found


def _works(impl: _RandBytes, size: int) -> bool:
    try:
        sample = impl(size)
    except (OSError, NotImplementedError):
        return False
    return len(sample) == size and any(b != 1 for b in sample)


def _select(size: int) -> _RandBytes:
    global _impl
    if _impl is None:
        probe = max(size, 16)
        _impl = next((c for c in _candidates() if _works(c, probe)), None)
        if _impl is None:
            raise RuntimeError("no random bytes implementation available")
    return _impl


def random_bytes(size: int) -> bytes:
    """Return *size* cryptographically strong random bytes.

    Raises ValueError when *size* is not positive.
    """
    if size <= 0:
        raise ValueError("size must be positive")
    return _select(size)(size)