"""Non-cryptographic 31-bit linear congruential generator."""

from __future__ import annotations

__all__ = ["Rand32", "rand32_seed", "rand32", "generate_transaction_id"]

_A = 1103515245
_C = 12345
_M = 2147483648


class Rand32:
    """BSD style LCG; must not be used for security related data."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Set the generator state."""
        self._state = seed & 0xFFFFFFFF

    def next(self) -> int:
        """Advance the generator and return the new value."""
        self._state = (_A * self._state + _C) % _M
        return self._state

    def __iter__(self) -> Rand32:
        return self

    def __next__(self) -> int:
        return self.next()


_default = Rand32()


def rand32_seed(seed: int) -> None:
    """Seed the shared module-level generator."""
    _default.seed(seed)


def rand32() -> int:
    """Return the next value of the shared module-level generator."""
    return _default.next()


def generate_transaction_id(rng: Rand32 | None = None) -> int:
    """Return a non-zero touchlink transaction id drawn from *rng*.

    The shared generator is used when *rng* is None.
    """
    source = _default if rng is None else rng
    while True:
        value = source.next()
        if value != 0:
            return value