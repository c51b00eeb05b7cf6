import pytest

from deconzlib.bstream import BStreamError, BStreamStatus, ByteStream


def test_put_u16_le_wire_bytes():
    bs = ByteStream(2)
    bs.put_u16_le(0x1234)
    assert bs.data == b"\x34\x12"
    assert bs.pos == 2


def test_put_u32_le_wire_bytes():
    bs = ByteStream(4)
    bs.put_u32_le(0x12345678)
    assert bs.data == b"\x78\x56\x34\x12"


def test_get_u16_be():
    bs = ByteStream(b"\x12\x34")
    assert bs.get_u16_be() == 0x1234


def test_u32_be_matches_reversed_le():
    raw = b"\x01\x02\x03\x04"
    le = ByteStream(raw).get_u32_le()
    be = ByteStream(raw[::-1]).get_u32_be()
    assert le == be


@pytest.mark.parametrize(
    "put, get, value",
    [
        ("put_u8", "get_u8", 0),
        ("put_u8", "get_u8", 255),
        ("put_u16_le", "get_u16_le", 65535),
        ("put_s16_le", "get_s16_le", -2),
        ("put_s16_le", "get_s16_le", -32768),
        ("put_u32_le", "get_u32_le", 0xDEADBEEF),
        ("put_s32_le", "get_s32_le", -1),
        ("put_s32_le", "get_s32_le", -2147483648),
    ],
)
def test_round_trip(put, get, value):
    writer = ByteStream(8)
    getattr(writer, put)(value)
    reader = ByteStream(writer.data)
    assert getattr(reader, get)() == value
    assert reader.pos == writer.pos


def test_values_are_truncated():
    bs = ByteStream(3)
    bs.put_u8(0x1FF)
    bs.put_u16_le(0x10002)
    reader = ByteStream(bs.data)
    assert reader.get_u8() == 0xFF
    assert reader.get_u16_le() == 0x0002


def test_writes_in_place_into_bytearray():
    buf = bytearray(4)
    ByteStream(buf).put_u32_le(0x01020304)
    assert bytes(buf) == bytes(reversed(range(1, 5)))


def test_read_past_end_raises_and_sticks():
    bs = ByteStream(b"\x01")
    with pytest.raises(BStreamError) as err:
        bs.get_u16_le()
    assert err.value.status is BStreamStatus.READ_PAST_END
    assert bs.status is BStreamStatus.READ_PAST_END
    assert bs.pos == 0
    with pytest.raises(BStreamError):
        bs.get_u8()


def test_write_past_end_raises():
    bs = ByteStream(3)
    bs.put_u16_le(1)
    with pytest.raises(BStreamError) as err:
        bs.put_u16_le(2)
    assert err.value.status is BStreamStatus.WRITE_PAST_END
    assert bs.pos == 2


def test_uninitialised_stream():
    bs = ByteStream()
    assert bs.size == 0
    with pytest.raises(BStreamError) as err:
        bs.put_u8(1)
    assert err.value.status is BStreamStatus.NOT_INITIALISED


def test_sequential_reads_advance_position():
    writer = ByteStream(7)
    writer.put_u8(7)
    writer.put_u16_le(513)
    writer.put_u32_le(70000)
    reader = ByteStream(writer.data)
    assert [reader.get_u8(), reader.get_u16_le(), reader.get_u32_le()] == [7, 513, 70000]
    assert reader.pos == reader.size