"""Encoder, decoder and the entry points that run them over bytes, buffers and streams."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, TypeVar

from .errors import Utf8DecodeError
from .streams import BufferWriter, Endian, SliceReader, SliceWriter
from .varint_decode_large import decode_u64, decode_u128, decode_usize
from .varint_decode_signed import decode_i16, decode_i32, decode_i64, decode_i128
from .varint_decode_small import decode_u16, decode_u32
from .varint_encode import encode_u16, encode_u32, encode_u64, encode_u128, encode_usize
from .varint_encode_signed import encode_i16, encode_i32, encode_i64, encode_i128

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class _Writer(Protocol):
    def write(self, data: bytes) -> None: ...


class _Reader(Protocol):
    def read(self, n: int) -> bytes: ...


class IntEncoding(Enum):
    """How integers wider than one byte are written."""

    VARIABLE = "variable"
    FIXED = "fixed"


@dataclass(frozen=True)
class Config:
    """Byte order and integer encoding used by an encoder or decoder."""

    endian: Endian = Endian.LITTLE
    int_encoding: IntEncoding = IntEncoding.VARIABLE

    @classmethod
    def standard(cls) -> Config:
        """Little endian with variable-length integers."""
        return cls()

    @classmethod
    def legacy(cls) -> Config:
        """Little endian with fixed-width integers."""
        return cls(int_encoding=IntEncoding.FIXED)


_WIDTHS = (8, 16, 32, 64, 128)

_UNSIGNED_ENCODERS = {16: encode_u16, 32: encode_u32, 64: encode_u64, 128: encode_u128}
_SIGNED_ENCODERS = {16: encode_i16, 32: encode_i32, 64: encode_i64, 128: encode_i128}
_UNSIGNED_DECODERS = {16: decode_u16, 32: decode_u32, 64: decode_u64, 128: decode_u128}
_SIGNED_DECODERS = {16: decode_i16, 32: decode_i32, 64: decode_i64, 128: decode_i128}


def _check_bits(bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits} bits")


class Encoder:
    """Writes values in the binary format to a writer."""

    def __init__(self, writer: _Writer, config: Config | None = None) -> None:
        self.writer = writer
        self.config = config or Config()

    def write_u8(self, value: int) -> None:
        """Write one raw byte."""
        self.write_uint(value, 8)

    def write_uint(self, value: int, bits: int) -> None:
        """Write an unsigned integer of the given width."""
        _check_bits(bits)
        value = operator.index(value)
        if not 0 <= value < 1 << bits:
            raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
        if bits == 8 or self.config.int_encoding is IntEncoding.FIXED:
            self.writer.write(value.to_bytes(bits // 8, self.config.endian.value))
        else:
            _UNSIGNED_ENCODERS[bits](self.writer, self.config.endian, value)

    def write_int(self, value: int, bits: int) -> None:
        """Write a signed integer of the given width."""
        _check_bits(bits)
        value = operator.index(value)
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
        if bits == 8 or self.config.int_encoding is IntEncoding.FIXED:
            self.writer.write(
                value.to_bytes(bits // 8, self.config.endian.value, signed=True)
            )
        else:
            _SIGNED_ENCODERS[bits](self.writer, self.config.endian, value)

    def write_len(self, length: int) -> None:
        """Write a collection length; it is stored as a 64-bit unsigned size."""
        if self.config.int_encoding is IntEncoding.FIXED:
            self.write_uint(length, 64)
        else:
            encode_usize(self.writer, self.config.endian, length)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Write a length followed by the raw bytes."""
        raw = bytes(data)
        self.write_len(len(raw))
        self.writer.write(raw)

    def write_str(self, text: str) -> None:
        """Write a string as length-prefixed UTF-8."""
        self.write_bytes(text.encode("utf-8"))

    def write_seq(self, items: Iterable[T], encode_item: Callable[[Encoder, T], None]) -> None:
        """Write a length followed by each item in order."""
        items = list(items)
        self.write_len(len(items))
        for item in items:
            encode_item(self, item)

    def write_map(
        self,
        mapping: Mapping[K, V],
        encode_key: Callable[[Encoder, K], None],
        encode_value: Callable[[Encoder, V], None],
    ) -> None:
        """Write a length followed by each key and its value."""
        self.write_len(len(mapping))
        for key, value in mapping.items():
            encode_key(self, key)
            encode_value(self, value)


class Decoder:
    """Reads values in the binary format from a reader."""

    def __init__(self, reader: _Reader, config: Config | None = None) -> None:
        self.reader = reader
        self.config = config or Config()

    def read_u8(self) -> int:
        """Read one raw byte."""
        return self.reader.read(1)[0]

    def read_uint(self, bits: int) -> int:
        """Read an unsigned integer of the given width."""
        _check_bits(bits)
        if bits == 8 or self.config.int_encoding is IntEncoding.FIXED:
            return int.from_bytes(self.reader.read(bits // 8), self.config.endian.value)
        return _UNSIGNED_DECODERS[bits](self.reader, self.config.endian)

    def read_int(self, bits: int) -> int:
        """Read a signed integer of the given width."""
        _check_bits(bits)
        if bits == 8 or self.config.int_encoding is IntEncoding.FIXED:
            return int.from_bytes(
                self.reader.read(bits // 8), self.config.endian.value, signed=True
            )
        return _SIGNED_DECODERS[bits](self.reader, self.config.endian)

    def read_len(self) -> int:
        """Read a collection length."""
        if self.config.int_encoding is IntEncoding.FIXED:
            return self.read_uint(64)
        return decode_usize(self.reader, self.config.endian)

    def read_bytes(self) -> bytes:
        """Read length-prefixed raw bytes."""
        return self.reader.read(self.read_len())

    def read_str(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        raw = self.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise Utf8DecodeError(exc.reason) from exc

    def read_seq(self, decode_item: Callable[[Decoder], T]) -> list[T]:
        """Read a length followed by that many items."""
        return [decode_item(self) for _ in range(self.read_len())]

    def read_map(
        self,
        decode_key: Callable[[Decoder], K],
        decode_value: Callable[[Decoder], V],
    ) -> dict[K, V]:
        """Read a length followed by that many key/value pairs."""
        result: dict[K, V] = {}
        for _ in range(self.read_len()):
            key = decode_key(self)
            result[key] = decode_value(self)
        return result


def encode_to_bytes(
    value: T, encode: Callable[[Encoder, T], None], config: Config | None = None
) -> bytes:
    """Encode ``value`` with ``encode`` and return the bytes."""
    writer = BufferWriter()
    encode(Encoder(writer, config), value)
    return writer.getvalue()


def encode_into_slice(
    value: T,
    encode: Callable[[Encoder, T], None],
    buffer: bytearray | memoryview,
    config: Config | None = None,
) -> int:
    """Encode ``value`` into ``buffer`` and return the number of bytes written."""
    writer = SliceWriter(buffer)
    encode(Encoder(writer, config), value)
    return writer.bytes_written()


def encode_into_writer(
    value: T,
    encode: Callable[[Encoder, T], None],
    writer: _Writer,
    config: Config | None = None,
) -> None:
    """Encode ``value`` into any object with a ``write(bytes)`` method."""
    encode(Encoder(writer, config), value)


def decode_from_slice(
    data: bytes | bytearray | memoryview,
    decode: Callable[[Decoder], T],
    config: Config | None = None,
) -> tuple[T, int]:
    """Decode a value from ``data``; return it with the number of bytes read."""
    reader = SliceReader(data)
    value = decode(Decoder(reader, config))
    return value, reader.position


def decode_from_reader(
    reader: _Reader, decode: Callable[[Decoder], T], config: Config | None = None
) -> Any:
    """Decode a value from any object with a ``read(n)`` method."""
    return decode(Decoder(reader, config))