"""HMAC-SHA256 message authentication codes."""

from __future__ import annotations

from deconzlib.sha256 import BLOCK_SIZE, sha256

__all__ = ["hmac_sha256"]

_IPAD = 0x36
_OPAD = 0x5C


def hmac_sha256(
    key: bytes | bytearray | memoryview,
    msg: bytes | bytearray | memoryview,
) -> bytes:
    """Return the 32 byte HMAC-SHA256 of *msg* under *key*.

    Keys longer than the SHA-256 block size are hashed first.
    Raises ValueError when *key* or *msg* is empty.
    """
    key_bytes = bytes(key)
    message = bytes(msg)
    if not key_bytes:
        raise ValueError("key must not be empty")
    if not message:
        raise ValueError("message must not be empty")

    if len(key_bytes) > BLOCK_SIZE:
        key_bytes = sha256(key_bytes)
    block = key_bytes.ljust(BLOCK_SIZE, b"\x00")

    inner_key = bytes(b ^ _IPAD for b in block)
    outer_key = bytes(b ^ _OPAD for b in block)

    inner = sha256(inner_key + message)
    return sha256(outer_key + inner)