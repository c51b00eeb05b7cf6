"""Number to string conversions with fixed, locale independent output."""

from __future__ import annotations

from deconzlib.sstream import SStreamStatus, StringStream

__all__ = ["number_signed", "number_unsigned", "number_double"]

_NUMBER_BUFFER = 32
_DOUBLE_BUFFER = 256
_MAX_PRINTF_LENGTH = 63
_FORMATS = ("f", "g", "e", "E")


def _integer_to_str(num: int, base: int, signed: bool) -> str:
    stream = StringStream(b"", _NUMBER_BUFFER)
    if base == 10:
        if signed:
            stream.put_longlong(num)
        else:
            stream.put_ulonglong(num)
    elif base == 16:
        # the eight bytes of the value in little endian memory order
        stream.put_hex(num.to_bytes(8, "little", signed=signed))
    else:
        raise ValueError(f"unsupported base: {base}")
    return stream.value()


def number_signed(num: int, base: int = 10) -> str:
    """Return the signed 64-bit *num* as text in base 10 or 16.

    Base 16 gives the upper case hex digits of the eight value bytes in
    little endian order. Raises ValueError for other bases and
    OverflowError when *num* does not fit 64 bits.
    """
    return _integer_to_str(num, base, signed=True)


def number_unsigned(num: int, base: int = 10) -> str:
    """Return the unsigned 64-bit *num* as text in base 10 or 16.

    Base 16 gives the upper case hex digits of the eight value bytes in
    little endian order. Raises ValueError for other bases and
    OverflowError when *num* does not fit 64 bits.
    """
    if num < 0:
        raise OverflowError("number outside unsigned 64-bit range")
    return _integer_to_str(num, base, signed=False)


def number_double(num: float, fmt: str = "g", prec: int = 0) -> str:
    """Return *num* as text in printf style format *fmt* ('f', 'g', 'e', 'E').

    Unknown formats fall back to 'f'. With 'f' and a positive precision
    the digits are truncated and trailing zeros dropped; a precision above
    9 then becomes 6. Precisions above 9 are otherwise capped at 9. With a
    precision of 0 trailing zeros and dots are removed from the result.
    """
    if fmt not in _FORMATS:
        fmt = "f"

    if fmt == "f" and prec > 0:
        if prec > 9:
            prec = 6
        stream = StringStream(b"", _DOUBLE_BUFFER)
        stream.put_double(num, prec)
        if stream.status is SStreamStatus.OK:
            return stream.value()

    if prec > 0:
        prec = min(prec, 9)
        text = f"%.{prec}{fmt}" % num
    else:
        text = f"%{fmt}" % num

    if len(text) > _MAX_PRINTF_LENGTH:
        text = ""

    if prec == 0:
        text = text.rstrip("0.")
        if not text:
            text = "0"

    return text