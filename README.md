# deconzlib

A small, dependency-free collection of utilities for hashing, binary and
text streams, time parsing, touchlink frames and HTTP request headers.

## Modules

- `deconzlib.sha256`: `sha256(data)` returns the 32 byte SHA-256 digest and
  raises `ValueError` for empty input; `lonesha256(data)` computes the same
  digest in pure Python and also accepts empty input.
- `deconzlib.hmac_sha256`: `hmac_sha256(key, msg)` returns the 32 byte
  HMAC-SHA256. Keys longer than 64 bytes are hashed first; an empty key or
  message raises `ValueError`.
- `deconzlib.bstream`: `ByteStream` reads and writes 8, 16 and 32 bit
  integers (`put_u8`, `put_u16_le`, `put_s16_le`, `put_u32_le`, `put_s32_le`,
  `get_u8`, `get_u16_le`, `get_s16_le`, `get_u16_be`, `get_u32_le`,
  `get_s32_le`, `get_u32_be`). Reading or writing past the end raises
  `BStreamError`, whose `status` is a `BStreamStatus`; the error status
  stays and every later operation raises as well.
- `deconzlib.sstream`: `StringStream` parses numbers (`get_long`,
  `get_double`, `get_hex_byte`) and writes text, integers, decimals, hex and
  MAC addresses (`put_str`, `put_long`, `put_longlong`, `put_ulonglong`,
  `put_double`, `put_hex`, `put_mac_address`) into a fixed size buffer,
  reporting failures in its `status` (`SStreamStatus`). `strtol(text)` and
  `strtod(text)` return `(value, end)` and raise on invalid input.
- `deconzlib.rand32`: `Rand32`, a 31-bit linear congruential generator (not
  for security use), the shared `rand32_seed` / `rand32`, and
  `generate_transaction_id`, which returns a non-zero value.
- `deconzlib.arena`: `Arena`, a bump allocator handing out aligned
  `memoryview`s of one buffer, usable as a context manager; `memalign` rounds
  an offset up. Running out of room raises `ArenaExhausted`.
- `deconzlib.random_bytes`: `random_bytes(size)` returns bytes from the
  operating system's entropy source.
- `deconzlib.ustring`: `number_signed`, `number_unsigned` (base 10 or 16) and
  `number_double` (printf style `f`, `g`, `e`, `E`).
- `deconzlib.isotime`: `time_from_iso8601(text)` returns milliseconds since
  the epoch for `YYYY-MM-DD[THH[:MM[:SS[.fff]]]][Z]`. Without `Z` local time
  is used; explicit offsets such as `+02:00` raise `ValueError`.
- `deconzlib.timeref`: `msec_since_epoch`, `system_time_ref` (system clock)
  and `steady_time_ref` (monotonic clock), all in milliseconds.
- `deconzlib.util`: `utf8_codepoint(data, pos)` decodes one UTF-8 sequence;
  `app_argument_numeric` and `app_argument_string` look up `--name=value`
  arguments in a list (by default `sys.argv`).
- `deconzlib.touchlink`: `TouchlinkRequest`, a dataclass serialised with
  `to_bytes()`, and `AddressMode`.
- `deconzlib.http_header`: `HttpRequestHeader` parses a request line and
  header fields (`method`, `http_method`, `url`, `path`, `path_at`,
  `path_components_count`, `value`, `has_key`, `content_length`,
  `parse_status`, `is_valid`); `UrlDescriptor` splits a URL into path
  components. `HttpMethod` and `HttpStatus` are the result enums.

## Install

```
pip install .
```

## Examples

```python
from deconzlib.sha256 import sha256
from deconzlib.hmac_sha256 import hmac_sha256

digest = sha256(b"abc")
key = b"secret"
mac = hmac_sha256(key, b"what do ya want for nothing?")
```

```python
from deconzlib.bstream import ByteStream

bs = ByteStream(bytearray(4))
bs.put_u16_le(0x1234)
bs.data                 # b"\x34\x12\x00\x00"
```

```python
from deconzlib.http_header import HttpRequestHeader

hdr = HttpRequestHeader(b"GET /api/lights HTTP/1.1\r\nContent-Length: 5\r\n\r\n")
hdr.path_at(1)          # "lights"
hdr.content_length()    # 5
```

```python
from deconzlib.isotime import time_from_iso8601

time_from_iso8601("2022-07-16T12:39:33.164Z")
```

## What it does not do

The package only parses HTTP request headers; it does not open sockets, serve
requests or talk to any device. Touchlink requests are serialised to bytes
but not sent anywhere. There is no command-line program.

## Tests

```
pip install .[test]
pytest
```