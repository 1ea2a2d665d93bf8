"""Decoding of 16- and 32-bit unsigned variable-length integers."""

from __future__ import annotations

from typing import Protocol

from .errors import IntegerType, InvalidIntegerTypeError
from .streams import Endian
from .varint_encode import SINGLE_BYTE_MAX, U16_BYTE, U32_BYTE, U64_BYTE, U128_BYTE


class _Reader(Protocol):
    def read(self, n: int) -> bytes: ...


_MARKERS = {
    U16_BYTE: (16, IntegerType.U16),
    U32_BYTE: (32, IntegerType.U32),
    U64_BYTE: (64, IntegerType.U64),
    U128_BYTE: (128, IntegerType.U128),
}


def _decode(reader: _Reader, endian: Endian, max_bits: int, expected: IntegerType) -> int:
    marker = reader.read(1)[0]
    if marker <= SINGLE_BYTE_MAX:
        return marker
    width, kind = _MARKERS.get(marker, (0, IntegerType.RESERVED))
    if not width or width > max_bits:
        raise InvalidIntegerTypeError(expected, kind)
    return int.from_bytes(reader.read(width // 8), endian.value)


def decode_u16(reader: _Reader, endian: Endian) -> int:
    """Read a varint that must fit in 16 unsigned bits."""
    return _decode(reader, endian, 16, IntegerType.U16)


def decode_u32(reader: _Reader, endian: Endian) -> int:
    """Read a varint that must fit in 32 unsigned bits."""
    return _decode(reader, endian, 32, IntegerType.U32)