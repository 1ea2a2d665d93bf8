"""Variable-length encoding of signed integers.

Signed values are zigzag-mapped onto unsigned ones (0, -1, 1, -2, ... become
0, 1, 2, 3, ...) and then written with the unsigned varint encoding of the
same width.
"""

from __future__ import annotations

import operator

from .streams import Endian
from .varint_encode import _Writer, encode_u16, encode_u32, encode_u64, encode_u128


def _zigzag(value: int, bits: int) -> int:
    value = operator.index(value)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
    return -2 * value - 1 if value < 0 else 2 * value


def encode_i16(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 16-bit signed integer as a zigzag varint."""
    encode_u16(writer, endian, _zigzag(value, 16))


def encode_i32(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 32-bit signed integer as a zigzag varint."""
    encode_u32(writer, endian, _zigzag(value, 32))


def encode_i64(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 64-bit signed integer as a zigzag varint."""
    encode_u64(writer, endian, _zigzag(value, 64))


def encode_i128(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 128-bit signed integer as a zigzag varint."""
    encode_u128(writer, endian, _zigzag(value, 128))


def encode_isize(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a signed size value; it is encoded as a 64-bit signed integer."""
    encode_i64(writer, endian, value)