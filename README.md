# tinybin

`tinybin` is a small binary serialization format. Values are written with no
metadata: integers use a compact variable-length encoding (or fixed widths, if
configured), and strings and collections carry a length prefix followed by
their items.

## Installation

```
pip install tinybin
```

## Integer encoding

With the variable-length scheme, an unsigned integer up to 250 takes one
byte. Larger values get a marker byte followed by the value in the smallest
of these widths that holds it:

| Marker | Following bytes |
|--------|-----------------|
| 251    | 2 (16-bit)      |
| 252    | 4 (32-bit)      |
| 253    | 8 (64-bit)      |
| 254    | 16 (128-bit)    |

Signed integers are zigzag-mapped first (0, -1, 1, -2, ... become
0, 1, 2, 3, ...), so small negative numbers stay short too. The byte order
of the wider forms is set by `Endian` (`Endian.LITTLE` or `Endian.BIG`).

The per-width functions are available directly: `encode_u16` ... `encode_u128`
and `encode_usize` in `tinybin.varint_encode`, `encode_i16` ... `encode_i128`
and `encode_isize` in `tinybin.varint_encode_signed`, and the matching
`decode_*` functions in `tinybin.varint_decode_small`,
`tinybin.varint_decode_large` and `tinybin.varint_decode_signed`. Size values
(`usize`/`isize`) are stored as 64-bit integers.

## Configuration

`tinybin.codec.Config` is a frozen dataclass with two fields:

- `endian`: `Endian.LITTLE` (default) or `Endian.BIG`.
- `int_encoding`: `IntEncoding.VARIABLE` (default) or `IntEncoding.FIXED`,
  which writes every integer in its full width.

`Config.standard()` gives the defaults; `Config.legacy()` gives little endian
with fixed-width integers. Every entry point accepts `config=None`, meaning
the defaults.

## Encoding and decoding

Encoding takes an *encode* callable that receives an `Encoder` and the value.
Decoding takes a *decode* callable that receives a `Decoder` and returns the
value.

`Encoder` has `write_u8`, `write_uint(value, bits)`, `write_int(value, bits)`
(for 8, 16, 32, 64 or 128 bits), `write_len`, `write_bytes`, `write_str`,
`write_seq(items, encode_item)` and `write_map(mapping, encode_key,
encode_value)`. `Decoder` has the matching `read_*` methods; `read_seq`
returns a list and `read_map` a dict.

```python
from tinybin.codec import Config, encode_to_bytes, decode_from_slice

def encode_pair(encoder, pair):
    name, scores = pair
    encoder.write_str(name)
    encoder.write_seq(scores, lambda enc, n: enc.write_int(n, 32))

def decode_pair(decoder):
    name = decoder.read_str()
    scores = decoder.read_seq(lambda dec: dec.read_int(32))
    return name, scores

config = Config()
data = encode_to_bytes(("alice", [3, -7, 1000]), encode_pair, config)
value, consumed = decode_from_slice(data, decode_pair, config)
assert value == ("alice", [3, -7, 1000])
assert consumed == len(data)
```

Other destinations: `encode_into_slice` fills a pre-allocated writable
buffer such as a `bytearray` and returns how many bytes it wrote, and
`encode_into_writer` sends output to any object with a `write(bytes)` method,
for example the writers in `tinybin.streams` (`SliceWriter`, `BufferWriter`,
`StreamWriter`). `decode_from_reader` reads from any object with a
`read(n)` method, such as `SliceReader` or `StreamReader`.

## Files and streams

`tinybin.stdtypes` reads and writes binary file objects with
`encode_into_stream` (which returns the number of bytes written) and
`decode_from_stream`. It also has encoders for common standard-library values:

```python
import io
import ipaddress
from tinybin.codec import Config
from tinybin.stdtypes import encode_into_stream, decode_from_stream, encode_ip, decode_ip

stream = io.BytesIO()
encode_into_stream(ipaddress.ip_address("192.0.2.1"), encode_ip, stream, Config())
stream.seek(0)
assert decode_from_stream(stream, decode_ip, Config()) == ipaddress.ip_address("192.0.2.1")
```

- `encode_ip` / `decode_ip`: a 32-bit variant (0 for IPv4, 1 for IPv6) then the octets.
- `encode_ipv4` / `decode_ipv4`, `encode_ipv6` / `decode_ipv6`: the raw octets.
- `encode_socket_addr` / `decode_socket_addr`: `(host, port)` pairs; IPv6
  flow information and scope id are not written.
- `encode_path` / `decode_path`: a path as a UTF-8 string, decoded to a `pathlib.Path`.
- `encode_cstring` / `decode_cstring`: byte contents written with a trailing
  NUL; decoding returns the contents without it.

## Errors

Encoding failures raise `EncodeError` and decoding failures raise
`DecodeError`, both from `tinybin.errors`, or one of their subclasses:

- `BufferFullError`: the output buffer given to `SliceWriter` is too small.
- `InvalidPathCharactersError`: a path cannot be written as UTF-8 text.
- `UnexpectedEndError`: the input ran out before the value was complete.
- `InvalidIntegerTypeError`: a varint marker is too wide for the integer
  type being read, or is the reserved value 255.
- `UnexpectedVariantError`: an address variant is neither 0 nor 1.
- `Utf8DecodeError`: a string is not valid UTF-8.
- `CStrNulError`: a C string is missing its terminator or has a NUL inside it.

`StreamWriter` reports I/O failures as a plain `EncodeError`. Integers outside
the range of the requested width, unsupported widths and C-string contents
that contain a NUL raise `ValueError`.

## What tinybin does not do

There is no automatic serialization of classes or dataclasses: each type
needs its own encode and decode callables built from the `Encoder` and
`Decoder` methods. There is no command-line tool.