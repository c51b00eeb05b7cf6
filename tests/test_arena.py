import struct

import pytest

from deconzlib.arena import Arena, ArenaExhausted, memalign


@pytest.mark.parametrize("align", [1, 4, 8, 16, 32, 64])
def test_memalign_invariants(align):
    for offset in range(200):
        result = memalign(offset, align)
        assert result % align == 0
        assert offset <= result < offset + align


def test_memalign_keeps_aligned_offset():
    assert memalign(64, 16) == 64


@pytest.mark.parametrize("align", [0, 3, 12, 128])
def test_memalign_rejects_bad_alignment(align):
    with pytest.raises(ValueError):
        memalign(10, align)


def test_alloc_returns_requested_size_and_header():
    buf = bytearray(128)
    arena = Arena(128, buf)
    view = arena.alloc(5, 1)
    assert len(view) == 5
    assert struct.unpack_from("<Q", buf, 0)[0] == 5
    view[:] = b"hello"
    assert b"hello" in bytes(buf)


def test_allocations_do_not_overlap():
    arena = Arena(512)
    first = arena.alloc(10, 16)
    second = arena.alloc(20, 16)
    first[:] = b"\xaa" * 10
    second[:] = b"\xbb" * 20
    assert bytes(first) == b"\xaa" * 10
    assert bytes(second) == b"\xbb" * 20
    assert arena.used >= 30


def test_used_grows_monotonically():
    arena = Arena(1024)
    previous = arena.used
    for size in (1, 3, 7, 16):
        arena.alloc(size, 8)
        assert arena.used >= previous + size
        previous = arena.used


def test_owned_memory_is_zeroed():
    arena = Arena(64)
    assert bytes(arena.alloc(16)) == bytes(16)


def test_exhaustion_raises():
    arena = Arena(64)
    with pytest.raises(ArenaExhausted):
        arena.alloc(64)


def test_exhaustion_after_filling():
    arena = Arena(100)
    arena.alloc(40)
    with pytest.raises(ArenaExhausted):
        arena.alloc(40)


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        Arena(32).alloc(0)


def test_size_out_of_range():
    with pytest.raises(ValueError):
        Arena(0x80000000)


def test_buffer_smaller_than_size():
    with pytest.raises(ValueError):
        Arena(64, bytearray(10))


def test_free_resets_arena():
    with Arena(128) as arena:
        arena.alloc(8)
    assert arena.used == 0
    with pytest.raises(ArenaExhausted):
        arena.alloc(1)