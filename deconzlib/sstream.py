"""Bounded string stream for parsing and formatting numbers and text."""

from __future__ import annotations

import enum
import math

__all__ = ["SStreamStatus", "StringStream", "strtol", "strtod"]

_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)
_ULONGLONG_MAX = (1 << 64) - 1
_MAX_SAFE_INTEGER = 9007199254740991.0
_WHITESPACE = b" \t\n\r"

_ERR_INVALID = 0x1
_ERR_OVERFLOW = 0x2
_ERR_UNDERFLOW = 0x4


class SStreamStatus(enum.Enum):
    """State of a :class:`StringStream`; any value but OK stops writing."""

    OK = 0
    ERR_INVALID = 1
    ERR_RANGE = 2
    ERR_NO_SPACE = 3


def _as_bytes(text: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _skip_blanks(data: bytes, pos: int) -> int:
    while pos < len(data) and data[pos] in b" \t":
        pos += 1
    return pos


def _scan_long(data: bytes) -> tuple[int, int, int]:
    """Return (value, end offset, error bits) for a base 10 signed long."""
    if not data:
        return 0, 0, _ERR_INVALID

    start = _skip_blanks(data, 0)
    negative = start < len(data) and data[start] == ord("-")
    pos = start + 1 if negative else start

    result = 0
    while pos < len(data) and _is_digit(data[pos]):
        result = result * 10 + (data[pos] - 0x30)
        pos += 1

    err = 0
    if pos == start + (1 if negative else 0):
        err |= _ERR_INVALID
    if result > _LONG_MAX:
        if not negative:
            err |= _ERR_OVERFLOW
        elif result > _LONG_MAX + 1:
            err |= _ERR_UNDERFLOW

    return (-result if negative else result), pos, err


def _pow10(exponent: int) -> float:
    base = 10.0 if exponent >= 0 else 1.0 / 10.0
    result = 1.0
    for _ in range(abs(exponent)):
        result *= base
        if result == 0.0 or math.isinf(result):
            break
    return result


def _scan_double(data: bytes) -> tuple[float, int, bool]:
    """Return (value, end offset, invalid) for a decimal floating point number."""
    size = len(data)
    pos = _skip_blanks(data, 0)
    sign = 1.0
    if pos < size and data[pos] in b"+-":
        if data[pos] == ord("-"):
            sign = -1.0
        pos += 1

    num = 0.0
    has_digits = False
    while pos < size and _is_digit(data[pos]):
        has_digits = True
        num = num * 10 + (data[pos] - 0x30)
        pos += 1

    decimal_places = 0
    if pos < size and data[pos] == ord("."):
        pos += 1
        while pos < size and _is_digit(data[pos]):
            has_digits = True
            num = num * 10 + (data[pos] - 0x30)
            decimal_places += 1
            pos += 1

    exponent = 0
    if pos < size and data[pos] in b"eE":
        pos += 1
        exp_sign = 1
        if pos < size and data[pos] in b"+-":
            if data[pos] == ord("-"):
                exp_sign = -1
            pos += 1
        exp_num = 0
        while pos < size and _is_digit(data[pos]):
            exp_num = exp_num * 10 + (data[pos] - 0x30)
            pos += 1
        exponent = exp_sign * exp_num

    num *= _pow10(exponent)
    num /= _pow10(decimal_places)
    return sign * num, pos, not has_digits


def strtol(text: str | bytes | bytearray | memoryview) -> tuple[int, int]:
    """Parse a base 10 signed 64-bit integer at the start of *text*.

    Leading spaces and tabs are skipped. Returns (value, end) where *end*
    is the byte offset of the first character not consumed. Raises
    ValueError when there are no digits and OverflowError when the number
    is out of range.
    """
    value, end, err = _scan_long(_as_bytes(text))
    if err & _ERR_INVALID:
        raise ValueError("no digits to convert")
    if err:
        raise OverflowError("number out of range")
    return value, end


def strtod(text: str | bytes | bytearray | memoryview) -> tuple[float, int]:
    """Parse a decimal floating point number at the start of *text*.

    Returns (value, end) where *end* is the byte offset of the first
    character not consumed. Raises ValueError when there are no digits.
    """
    value, end, invalid = _scan_double(_as_bytes(text))
    if invalid:
        raise ValueError("no digits to convert")
    return value, end


class StringStream:
    """Reads from and writes into a fixed size byte buffer at a position.

    The buffer holds *capacity* bytes, by default the length of *text*,
    and starts with the bytes of *text*. Written text is always followed
    by a NUL byte, so writing needs one byte more than the text itself.
    Failed writes set :attr:`status`; once it is not OK, text and numbers
    are no longer written.
    """

    def __init__(
        self,
        text: str | bytes | bytearray | memoryview = b"",
        capacity: int | None = None,
    ) -> None:
        data = _as_bytes(text)
        size = len(data) if capacity is None else capacity
        if size < 0:
            raise ValueError("capacity must not be negative")
        self._buf = bytearray(size)
        count = min(size, len(data))
        self._buf[:count] = data[:count]
        self.pos = 0
        self.status = SStreamStatus.OK if size else SStreamStatus.ERR_INVALID

    @property
    def size(self) -> int:
        """Capacity of the buffer in bytes."""
        return len(self._buf)

    def value(self) -> str:
        """Return the buffer contents up to the first NUL byte."""
        end = self._buf.find(0)
        if end < 0:
            end = len(self._buf)
        return self._buf[:end].decode("utf-8", errors="replace")

    def remaining(self) -> int:
        """Number of bytes between the position and the end of the buffer."""
        return max(self.size - self.pos, 0)

    def at_end(self) -> bool:
        """True when the position is at the end of the buffer."""
        return self.remaining() == 0

    def seek(self, pos: int) -> None:
        """Move to *pos*; positions beyond the end are ignored."""
        if 0 <= pos <= self.size:
            self.pos = pos

    def peek_char(self) -> str:
        """Return the character at the position, or "" at the end."""
        if self.pos < self.size:
            return chr(self._buf[self.pos])
        return ""

    def skip_whitespace(self) -> None:
        """Advance past spaces, tabs, carriage returns and newlines."""
        while self.pos < self.size and self._buf[self.pos] in _WHITESPACE:
            self.pos += 1

    def starts_with(self, prefix: str | bytes) -> bool:
        """True when the text at the position begins with *prefix*."""
        needle = _as_bytes(prefix)
        if self.size - self.pos < len(needle):
            return False
        return self._buf[self.pos:self.pos + len(needle)] == needle

    def find(self, needle: str | bytes) -> bool:
        """Move to the next occurrence of *needle*; False leaves the position."""
        target = _as_bytes(needle)
        if self.pos >= self.size:
            return False
        index = self._buf.find(target, self.pos, self.size)
        if index < 0:
            return False
        self.pos = index
        return True

    def get_long(self) -> int:
        """Parse a signed integer at the position.

        On failure 0 is returned and the status becomes ERR_INVALID or
        ERR_RANGE; the position still moves past what was scanned.
        """
        if self.pos >= self.size:
            return 0
        value, end, err = _scan_long(bytes(self._buf[self.pos:]))
        if err:
            if err & _ERR_INVALID:
                self.status = SStreamStatus.ERR_INVALID
            else:
                self.status = SStreamStatus.ERR_RANGE
            value = 0
        self.pos += end
        return value

    def get_double(self) -> float:
        """Parse a floating point number at the position.

        On failure 0.0 is returned and the status becomes ERR_INVALID.
        """
        if self.pos >= self.size:
            return 0.0
        value, end, invalid = _scan_double(bytes(self._buf[self.pos:]))
        if invalid:
            self.status = SStreamStatus.ERR_INVALID
            value = 0.0
        self.pos += end
        return value

    def get_hex_byte(self) -> int:
        """Parse up to two hex digits (no 0x prefix) and return their value."""
        result = 0
        if self.status is not SStreamStatus.OK:
            return result
        for _ in range(2):
            if self.pos >= self.size:
                break
            nibble = chr(self._buf[self.pos])
            if nibble not in "0123456789abcdefABCDEF":
                break
            result = (result << 4) | int(nibble, 16)
            self.pos += 1
        return result

    def _write(self, data: bytes) -> None:
        end = self.pos + len(data)
        self._buf[self.pos:end] = data
        self.pos = end
        self._buf[self.pos] = 0

    def put_str(self, text: str | bytes) -> None:
        """Write *text* followed by a NUL byte."""
        if self.status is not SStreamStatus.OK:
            return
        data = _as_bytes(text)
        if self.pos + len(data) + 1 < self.size:
            self._write(data)
        else:
            self.status = SStreamStatus.ERR_NO_SPACE

    def _put_integer(self, num: int) -> None:
        if self.status is not SStreamStatus.OK:
            return
        if num < 0:
            if self.pos >= self.size:
                self.status = SStreamStatus.ERR_NO_SPACE
                return
            self._buf[self.pos] = ord("-")
            self.pos += 1
        digits = str(abs(num)).encode("ascii")
        if self.size - self.pos < len(digits) + 1:
            self.status = SStreamStatus.ERR_NO_SPACE
            return
        self._write(digits)

    def put_long(self, num: int) -> None:
        """Write a signed 64-bit integer in decimal."""
        if not _LONG_MIN <= num <= _LONG_MAX:
            raise OverflowError("number outside signed 64-bit range")
        self._put_integer(num)

    def put_longlong(self, num: int) -> None:
        """Write a signed 64-bit integer in decimal."""
        self.put_long(num)

    def put_ulonglong(self, num: int) -> None:
        """Write an unsigned 64-bit integer in decimal."""
        if not 0 <= num <= _ULONGLONG_MAX:
            raise OverflowError("number outside unsigned 64-bit range")
        self._put_integer(num)

    def put_double(self, num: float, precision: int) -> None:
        """Write *num* with up to *precision* (1..18) truncated decimals.

        Trailing zeros and a bare dot are dropped. NaN is written as
        "null" and infinities as "1e99999" or "-1e99999". Integral parts
        beyond 2^53-1 set ERR_RANGE.
        """
        if math.isnan(num):
            self.put_str("null")
            return
        if math.isinf(num):
            if num < 0:
                self.put_str("-")
            self.put_str("1e99999")
            return

        precision = min(max(precision, 1), 18)
        frac, ipart = math.modf(num)

        if ipart > _MAX_SAFE_INTEGER or ipart < -_MAX_SAFE_INTEGER:
            self.status = SStreamStatus.ERR_RANGE
            return

        if ipart < 0:
            ipart = -ipart
            frac = -frac
            self.put_str("-")

        self.put_longlong(int(ipart))

        digits = []
        scale = 10.0
        for _ in range(precision):
            scaled = int(frac * scale)
            digit = abs(scaled) % 10
            if scaled < 0:
                digit = -digit
            digits.append(chr(0x30 + digit))
            scale *= 10
        fraction = ("." + "".join(digits)).rstrip("0.")
        if fraction:
            self.put_str(fraction)

    def put_hex(self, data: bytes | bytearray | memoryview) -> None:
        """Write *data* as upper case hex digits."""
        payload = bytes(data)
        if self.size - self.pos < len(payload) * 2 + 1:
            self.status = SStreamStatus.ERR_NO_SPACE
            return
        self._write(payload.hex().upper().encode("ascii"))

    def put_mac_address(self, mac: int) -> None:
        """Write a 64-bit MAC address as eight colon separated hex bytes."""
        if self.size - self.pos < 23 + 1:
            self.status = SStreamStatus.ERR_NO_SPACE
            return
        octets = (mac & _ULONGLONG_MAX).to_bytes(8, "big")
        text = ":".join(f"{octet:02x}" for octet in octets)
        self._write(text.encode("ascii"))