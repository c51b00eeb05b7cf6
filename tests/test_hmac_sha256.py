import hmac
import hashlib

import pytest

from deconzlib.hmac_sha256 import hmac_sha256


def test_rfc4231_case1():
    key = bytes([0x0B] * 20)
    expected = bytes([
        0xB0, 0x34, 0x4C, 0x61, 0xD8, 0xDB, 0x38, 0x53,
        0x5C, 0xA8, 0xAF, 0xCE, 0xAF, 0x0B, 0xF1, 0x2B,
        0x88, 0x1D, 0xC2, 0x00, 0xC9, 0x83, 0x3D, 0xA7,
        0x26, 0xE9, 0x37, 0x6C, 0x2E, 0x32, 0xCF, 0xF7,
    ])
    assert hmac_sha256(key, b"Hi There") == expected


def test_rfc4231_case2():
    key = bytes([0x4A, 0x65, 0x66, 0x65])
    expected = bytes([
        0x5B, 0xDC, 0xC1, 0x46, 0xBF, 0x60, 0x75, 0x4E,
        0x6A, 0x04, 0x24, 0x26, 0x08, 0x95, 0x75, 0xC7,
        0x5A, 0x00, 0x3F, 0x08, 0x9D, 0x27, 0x39, 0x83,
        0x9D, 0xEC, 0x58, 0xB9, 0x64, 0xEC, 0x38, 0x43,
    ])
    assert hmac_sha256(key, b"what do ya want for nothing?") == expected


def test_rfc4231_case3():
    key = bytes([0xAA] * 20)
    msg = bytes([0xDD] * 50)
    expected = bytes([
        0x77, 0x3E, 0xA9, 0x1E, 0x36, 0x80, 0x0E, 0x46,
        0x85, 0x4D, 0xB8, 0xEB, 0xD0, 0x91, 0x81, 0xA7,
        0x29, 0x59, 0x09, 0x8B, 0x3E, 0xF8, 0xC1, 0x22,
        0xD9, 0x63, 0x55, 0x14, 0xCE, 0xD5, 0x65, 0xFE,
    ])
    assert hmac_sha256(key, msg) == expected


def test_rfc4231_case4():
    key = bytes(range(1, 26))
    msg = bytes([0xCD] * 50)
    expected = bytes([
        0x82, 0x55, 0x8A, 0x38, 0x9A, 0x44, 0x3C, 0x0E,
        0xA4, 0xCC, 0x81, 0x98, 0x99, 0xF2, 0x08, 0x3A,
        0x85, 0xF0, 0xFA, 0xA3, 0xE5, 0x78, 0xF8, 0x07,
        0x7A, 0x2E, 0x3F, 0xF4, 0x67, 0x29, 0x66, 0x5B,
    ])
    assert hmac_sha256(key, msg) == expected


def test_rfc4231_case6_long_key():
    key = bytes([0xAA] * 131)
    msg = b"Test Using Larger Than Block-Size Key - Hash Key First"
    expected = bytes([
        0x60, 0xE4, 0x31, 0x59, 0x1E, 0xE0, 0xB6, 0x7F,
        0x0D, 0x8A, 0x26, 0xAA, 0xCB, 0xF5, 0xB7, 0x7F,
        0x8E, 0x0B, 0xC6, 0x21, 0x37, 0x28, 0xC5, 0x14,
        0x05, 0x46, 0x04, 0x0F, 0x0E, 0xE3, 0x7F, 0x54,
    ])
    assert hmac_sha256(key, msg) == expected


@pytest.mark.parametrize("key_len", [1, 32, 63, 64, 65, 200])
@pytest.mark.parametrize("msg_len", [1, 55, 64, 300])
def test_matches_stdlib_hmac(key_len, msg_len):
    key = bytes((i * 7 + 3) & 0xFF for i in range(key_len))
    msg = bytes((i * 13 + 1) & 0xFF for i in range(msg_len))
    assert hmac_sha256(key, msg) == hmac.new(key, msg, hashlib.sha256).digest()


def test_empty_key_raises():
    with pytest.raises(ValueError):
        hmac_sha256(b"", b"message")


def test_empty_message_raises():
    with pytest.raises(ValueError):
        hmac_sha256(b"secret", b"")


def test_different_keys_give_different_macs():
    msg = b"payload"
    assert hmac_sha256(b"secret", msg) != hmac_sha256(b"token", msg)
    assert len(hmac_sha256(b"secret", msg)) == 32