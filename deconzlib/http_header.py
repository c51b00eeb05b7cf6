"""Parsing of HTTP request headers: request line, URL path and header fields."""

from __future__ import annotations

import enum
import re

__all__ = ["HttpMethod", "HttpStatus", "UrlDescriptor", "HttpRequestHeader"]

MAX_HEADER_SIZE = 2048
MAX_METHOD_LENGTH = 10
MAX_URL_LENGTH = 160
MAX_VERSION_LENGTH = 16

_MAX_URL_DESCRIPTOR_LENGTH = 255
_MAX_COMPONENTS = 10
_TOKEN_DELIMITERS = b" \r\n"
_WHITESPACE = b" \t\n\r\x0b\x0c"
_UINT_PATTERN = re.compile(rb"\+?[0-9]+")


class HttpMethod(enum.IntEnum):
    """Request methods understood by the parser."""

    UNKNOWN = 0
    GET = 1
    PUT = 2
    POST = 3
    DELETE = 4
    PATCH = 5
    OPTIONS = 6
    HEAD = 7


class HttpStatus(enum.IntEnum):
    """Outcome of parsing a request header, as an HTTP status code."""

    OK = 200
    BAD_REQUEST = 400
    METHOD_NOT_ALLOWED = 405
    URI_TOO_LONG = 414
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431


_METHODS = {
    b"GET": HttpMethod.GET,
    b"PUT": HttpMethod.PUT,
    b"POST": HttpMethod.POST,
    b"DELETE": HttpMethod.DELETE,
    b"PATCH": HttpMethod.PATCH,
    b"OPTIONS": HttpMethod.OPTIONS,
    b"HEAD": HttpMethod.HEAD,
}


def _to_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class UrlDescriptor:
    """Splits a URL into its path components and query start."""

    def __init__(self) -> None:
        self._url = ""
        self._query: int | None = None
        self._components: list[tuple[int, int]] = []

    def parse(self, url: str | bytes) -> HttpStatus:
        """Parse *url*; at most 255 characters and 10 path components."""
        text = url.decode("latin-1") if isinstance(url, (bytes, bytearray)) else url
        self._url = ""
        self._query = None
        self._components = []

        if len(text) > _MAX_URL_DESCRIPTOR_LENGTH:
            return HttpStatus.URI_TOO_LONG

        self._url = text
        comps = [[0, 0]]
        for i, ch in enumerate(text):
            if ch == "\0":
                break
            current = comps[-1]
            if ch == "/":
                if current[1] > 0:
                    if len(comps) == _MAX_COMPONENTS:
                        return HttpStatus.REQUEST_HEADER_FIELDS_TOO_LARGE
                    comps.append([i + 1, 0])
                else:
                    current[0] = i + 1
            elif ch == "?":
                self._query = i
                break
            else:
                current[1] += 1

        self._components = [(off, length) for off, length in comps if length]
        return HttpStatus.OK

    def path(self) -> str:
        """The URL without its query string."""
        if self._query is not None and self._query < len(self._url):
            return self._url[:self._query]
        return self._url

    def component(self, index: int) -> str:
        """Path component *index*, or "" when there is none."""
        if 0 <= index < len(self._components):
            offset, length = self._components[index]
            return self._url[offset:offset + length]
        return ""

    def component_count(self) -> int:
        """Number of non-empty path components."""
        return len(self._components)


def _byte_at(buf: bytearray, pos: int) -> int:
    return buf[pos] if pos < len(buf) else 0


def _next_token(buf: bytearray, pos: int, max_length: int) -> bytes:
    """Token at *pos* ending in a space, CR or LF within *max_length* bytes.

    The delimiter is overwritten with NUL. Returns b"" when none is found.
    """
    for i in range(pos, pos + max_length):
        if _byte_at(buf, i) in _TOKEN_DELIMITERS:
            token = bytes(buf[pos:i])
            buf[i] = 0
            return token
    return b""


def _insert_missing_api_slash(buf: bytearray, pos: int) -> None:
    """Turn "/apiXYZ" into "/api/XYZ" by shifting up to the request line CR."""
    if bytes(buf[pos:pos + 4]) != b"/api" or _byte_at(buf, pos + 4) == ord("/"):
        return
    nul = buf.find(0, pos)
    limit = len(buf) if nul < 0 else nul
    end = buf.find(b"\r", pos, limit)
    if end < 0 or end > pos + MAX_URL_LENGTH or _byte_at(buf, end + 1) != ord("\n"):
        return
    insert = pos + 4
    buf[insert + 1:end + 1] = buf[insert:end]
    buf[insert] = ord("/")


def _find_value(section: bytes, key: bytes) -> bytes:
    pos = 0
    while pos < len(section):
        line_end = section.find(b"\r", pos)
        if line_end < 0 or line_end == pos:
            break
        mid = section.find(b":", pos)
        if mid < 0:
            pos = line_end + 1
            continue
        name = section[pos:mid].strip(_WHITESPACE)
        if name and len(name) == len(key) and name.lower() == key.lower():
            return section[mid + 1:line_end].strip(_WHITESPACE)
        pos = line_end + 1
    return b""


class HttpRequestHeader:
    """A parsed HTTP request line followed by key: value header fields."""

    def __init__(self, data: str | bytes | bytearray | memoryview | None = None) -> None:
        self._reset()
        if data is not None:
            self.update(data)

    @classmethod
    def from_method_path(cls, method: str, path: str) -> HttpRequestHeader:
        """Build a header for an HTTP/1.1 request of *method* on *path*."""
        return cls(f"{method} {path} HTTP/1.1\r\n\r\n")

    def _reset(self) -> None:
        self._valid = False
        self._method = HttpMethod.UNKNOWN
        self._status = HttpStatus.BAD_REQUEST
        self._method_token = b""
        self._url_token = b""
        self._url = UrlDescriptor()
        self._fields = b""

    def update(self, data: str | bytes | bytearray | memoryview) -> bool:
        """Parse *data* replacing the previous content; True when valid."""
        self._reset()
        raw = _to_bytes(data)
        if not raw:
            return False
        if len(raw) >= MAX_HEADER_SIZE:
            self._status = HttpStatus.REQUEST_HEADER_FIELDS_TOO_LARGE
            return False

        buf = bytearray(raw)
        buf.append(0)

        method = _next_token(buf, 0, MAX_METHOD_LENGTH)
        if not method:
            return False
        self._method_token = method
        if method not in _METHODS:
            self._status = HttpStatus.METHOD_NOT_ALLOWED
            return False
        self._method = _METHODS[method]

        pos = len(method) + 1
        _insert_missing_api_slash(buf, pos)

        url = _next_token(buf, pos, MAX_URL_LENGTH)
        if not url:
            if MAX_HEADER_SIZE - pos > MAX_URL_LENGTH:
                self._status = HttpStatus.URI_TOO_LONG
            return False
        self._url_token = url

        self._status = self._url.parse(url)
        if self._status is not HttpStatus.OK:
            return False
        self._status = HttpStatus.BAD_REQUEST

        pos += len(url) + 1
        version = _next_token(buf, pos, MAX_VERSION_LENGTH)
        if not version:
            return False
        pos += len(version) + 1

        while pos < MAX_HEADER_SIZE and _byte_at(buf, pos) in _WHITESPACE:
            pos += 1

        section = bytes(buf[pos:])
        nul = section.find(0)
        self._fields = section if nul < 0 else section[:nul]
        self._status = HttpStatus.OK
        self._valid = True
        return True

    def _lookup(self, key: str) -> bytes:
        if not self._valid or not key:
            return b""
        return _find_value(self._fields, key.encode("latin-1"))

    def has_key(self, key: str) -> bool:
        """True when header field *key* is present with a non-empty value."""
        return bool(self._lookup(key))

    def value(self, key: str) -> str:
        """Value of header field *key* (case insensitive), or ""."""
        return self._lookup(key).decode("latin-1")

    def content_length(self) -> int:
        """The Content-Length field as a number, 0 when absent or invalid."""
        raw = self._lookup("Content-Length")
        if _UINT_PATTERN.fullmatch(raw):
            number = int(raw)
            if number <= 0xFFFFFFFF:
                return number
        return 0

    def path(self) -> str:
        """The request URL without its query string."""
        return self._url.path()

    def path_at(self, index: int) -> str:
        """Path component *index*, or ""."""
        return self._url.component(index)

    def path_components_count(self) -> int:
        """Number of non-empty path components."""
        return self._url.component_count()

    def method(self) -> str:
        """The method token of the request line."""
        return self._method_token.decode("latin-1")

    def http_method(self) -> HttpMethod:
        """The recognised request method."""
        return self._method

    def url(self) -> str:
        """The URL token of the request line."""
        return self._url_token.decode("latin-1")

    def parse_status(self) -> HttpStatus:
        """Status of the last parse."""
        return self._status

    def is_valid(self) -> bool:
        """True when the last parse succeeded."""
        return self._valid