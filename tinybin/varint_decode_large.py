"""Decoding of 64-bit, 128-bit and size-typed unsigned variable-length integers."""

from __future__ import annotations

from .errors import IntegerType
from .streams import Endian
from .varint_decode_small import _decode, _Reader


def decode_u64(reader: _Reader, endian: Endian) -> int:
    """Read a varint that must fit in 64 unsigned bits."""
    return _decode(reader, endian, 64, IntegerType.U64)


def decode_u128(reader: _Reader, endian: Endian) -> int:
    """Read a varint that must fit in 128 unsigned bits."""
    return _decode(reader, endian, 128, IntegerType.U128)


def decode_usize(reader: _Reader, endian: Endian) -> int:
    """Read a size value; it is stored as a 64-bit unsigned varint."""
    return _decode(reader, endian, 64, IntegerType.USIZE)