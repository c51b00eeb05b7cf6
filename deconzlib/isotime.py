"""ISO 8601 date and time parsing into milliseconds since the epoch."""

from __future__ import annotations

import calendar
import time

from deconzlib.sstream import StringStream

__all__ = ["time_from_iso8601"]


def _field(stream: StringStream, end: int, low: int, high: int, name: str) -> int:
    value = stream.get_long()
    if stream.pos != end or not low <= value <= high:
        raise ValueError(f"invalid {name} in ISO 8601 time")
    return value


def _skip(stream: StringStream) -> None:
    stream.seek(stream.pos + 1)


def time_from_iso8601(text: str | bytes) -> int:
    """Return milliseconds since the epoch for an ISO 8601 date or time.

    Accepted forms are YYYY-MM-DD optionally followed by THH, THH:MM,
    THH:MM:SS and a fraction after '.' or ','. A trailing 'Z' means UTC,
    otherwise local time is used. The fraction is added as a number of
    milliseconds. Raises ValueError for malformed input and for explicit
    time zone offsets, which are not supported.
    """
    stream = StringStream(text)

    year = stream.get_long()
    if stream.pos != 4 or stream.peek_char() != "-" or year < 1900:
        raise ValueError("invalid year in ISO 8601 time")
    _skip(stream)

    month = stream.get_long()
    if stream.pos != 7 or stream.peek_char() != "-" or not 1 <= month <= 12:
        raise ValueError("invalid month in ISO 8601 time")
    _skip(stream)

    day = _field(stream, 10, 1, 31, "day")
    hour = minute = second = millisec = 0

    if stream.peek_char() == "T":
        _skip(stream)
        hour = _field(stream, 13, 0, 23, "hour")
        if stream.peek_char() == ":":
            _skip(stream)
            minute = _field(stream, 16, 0, 59, "minute")
            if stream.peek_char() == ":":
                _skip(stream)
                second = _field(stream, 19, 0, 60, "second")
                if second == 60:
                    second = 59  # leap second
                if stream.peek_char() in (".", ","):
                    _skip(stream)
                    millisec = stream.get_long()

    marker = stream.peek_char()
    fields = (year, month, day, hour, minute, second)
    try:
        if marker == "Z":
            seconds = calendar.timegm(fields + (0, 0, 0))
        elif marker in ("+", "-"):
            raise ValueError("time zone offsets are not supported")
        else:
            seconds = int(time.mktime(fields + (0, 0, -1)))
    except (OverflowError, OSError) as exc:
        raise ValueError("ISO 8601 time out of range") from exc

    return seconds * 1000 + millisec