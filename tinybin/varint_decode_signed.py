"""Decoding of signed variable-length integers stored in zigzag form."""

from __future__ import annotations

from collections.abc import Callable

from .errors import IntegerType, InvalidIntegerTypeError
from .streams import Endian
from .varint_decode_large import decode_u64, decode_u128
from .varint_decode_small import _Reader, decode_u16, decode_u32


def _unzigzag(n: int) -> int:
    return ~(n >> 1) if n & 1 else n >> 1


def _decode_signed(
    decode_unsigned: Callable[[_Reader, Endian], int], reader: _Reader, endian: Endian
) -> int:
    try:
        n = decode_unsigned(reader, endian)
    except InvalidIntegerTypeError as exc:
        raise exc.to_signed() from None
    return _unzigzag(n)


def decode_i16(reader: _Reader, endian: Endian) -> int:
    """Read a zigzag varint that must fit in 16 signed bits."""
    return _decode_signed(decode_u16, reader, endian)


def decode_i32(reader: _Reader, endian: Endian) -> int:
    """Read a zigzag varint that must fit in 32 signed bits."""
    return _decode_signed(decode_u32, reader, endian)


def decode_i64(reader: _Reader, endian: Endian) -> int:
    """Read a zigzag varint that must fit in 64 signed bits."""
    return _decode_signed(decode_u64, reader, endian)


def decode_i128(reader: _Reader, endian: Endian) -> int:
    """Read a zigzag varint that must fit in 128 signed bits."""
    return _decode_signed(decode_u128, reader, endian)


def decode_isize(reader: _Reader, endian: Endian) -> int:
    """Read a signed size value; it is stored as a 64-bit zigzag varint."""
    try:
        return decode_i64(reader, endian)
    except InvalidIntegerTypeError as exc:
        raise InvalidIntegerTypeError(
            IntegerType.ISIZE, exc.found.into_signed()
        ) from None