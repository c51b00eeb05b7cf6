"""UTF-8 decoding and command line argument helpers."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence

__all__ = ["utf8_codepoint", "app_argument_numeric", "app_argument_string"]

_log = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _byte_at(data: bytes, pos: int) -> int:
    """Byte at *pos*, or 0 past the end (the end acts as a terminator)."""
    return data[pos] if pos < len(data) else 0


def utf8_codepoint(data: bytes | bytearray | str, pos: int = 0) -> tuple[int | None, int]:
    """Decode one UTF-8 sequence starting at byte offset *pos*.

    Returns (codepoint, next_pos). For an invalid lead byte or a sequence
    cut short by a NUL byte or the end of *data* the codepoint is None and
    next_pos is one past the lead byte. Continuation bytes are not checked.
    Raises IndexError when *pos* is outside *data*.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if not 0 <= pos < len(raw):
        raise IndexError("position outside data")

    lead = raw[pos]
    pos += 1

    if lead & 0x80 == 0:
        return lead, pos

    if lead & 0xE0 == 0xC0:
        count, cp = 1, lead & 0x1F
    elif lead & 0xF0 == 0xE0:
        count, cp = 2, lead & 0x0F
    elif lead & 0xF8 == 0xF0:
        count, cp = 3, lead & 0x07
    else:
        return None, pos

    if any(_byte_at(raw, pos + i) == 0 for i in range(count)):
        return None, pos

    for i in range(count):
        cp = (cp << 6) | (raw[pos + i] & 0x3F)
    return cp, pos + count


def _parse_int32(text: str) -> int | None:
    text = text.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def _find_argument(arg: str, argv: Sequence[str]) -> tuple[str, str | None] | None:
    """Locate the first argument of the form ``arg=value``.

    Returns None when no argument starts with *arg*, otherwise the whole
    argument and its value (None when the value is missing or empty).
    """
    for item in argv:
        if not item.startswith(arg):
            continue
        parts = item.split("=")
        if parts[0] != arg:
            continue
        if len(parts) == 2 and parts[1]:
            return item, parts[1]
        return item, None
    return None


def app_argument_numeric(arg: str, default: int, argv: Sequence[str] | None = None) -> int:
    """Return the integer value of ``arg=value`` in *argv*, else *default*.

    *argv* defaults to ``sys.argv``. Only the first matching argument is
    considered; a missing or non-numeric value yields *default*.
    """
    args = sys.argv if argv is None else argv
    found = _find_argument(arg, args)
    if found is None:
        return default
    item, value = found
    if value is None:
        _log.info("Invalid app argument %s", item)
        return default
    number = _parse_int32(value)
    if number is None:
        _log.info("Invalid numeric app argument %s", value)
        return default
    return number


def app_argument_string(arg: str, default: str, argv: Sequence[str] | None = None) -> str:
    """Return the value of ``arg=value`` in *argv*, else *default*.

    *argv* defaults to ``sys.argv``. Only the first matching argument is
    considered; a missing or empty value yields *default*.
    """
    args = sys.argv if argv is None else argv
    found = _find_argument(arg, args)
    if found is None:
        return default
    item, value = found
    if value is None:
        _log.info("Invalid app argument %s", item)
        return default
    return value