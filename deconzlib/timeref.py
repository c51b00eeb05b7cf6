"""Millisecond time references from the system and the monotonic clock."""

from __future__ import annotations

import time

__all__ = ["msec_since_epoch", "steady_time_ref", "system_time_ref"]

_NS_PER_MS = 1_000_000


def msec_since_epoch() -> int:
    """Milliseconds since the Unix epoch from the system clock."""
    return time.time_ns() // _NS_PER_MS


def steady_time_ref() -> int:
    """Milliseconds from the monotonic clock; only differences are meaningful."""
    return time.monotonic_ns() // _NS_PER_MS


def system_time_ref() -> int:
    """Milliseconds since the Unix epoch from the system clock."""
    return time.time_ns() // _NS_PER_MS