"""Variable-length encoding of unsigned integers.

Values up to 250 take one byte. Larger values are written as a marker byte
(251, 252, 253 or 254 for 16, 32, 64 or 128 bits) followed by the value in
the smallest of those widths that holds it, in the chosen byte order.
"""

from __future__ import annotations

import operator
from typing import Protocol

from .streams import Endian

SINGLE_BYTE_MAX = 250
U16_BYTE = 251
U32_BYTE = 252
U64_BYTE = 253
U128_BYTE = 254

_MARKERS = ((16, U16_BYTE), (32, U32_BYTE), (64, U64_BYTE), (128, U128_BYTE))


class _Writer(Protocol):
    def write(self, data: bytes) -> None: ...


def _encode(writer: _Writer, endian: Endian, value: int, bits: int) -> None:
    value = operator.index(value)
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
    if value <= SINGLE_BYTE_MAX:
        writer.write(bytes((value,)))
        return
    for width, marker in _MARKERS:
        if value < 1 << width:
            writer.write(bytes((marker,)))
            writer.write(value.to_bytes(width // 8, endian.value))
            return


def encode_u16(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 16-bit unsigned integer as a varint."""
    _encode(writer, endian, value, 16)


def encode_u32(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 32-bit unsigned integer as a varint."""
    _encode(writer, endian, value, 32)


def encode_u64(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 64-bit unsigned integer as a varint."""
    _encode(writer, endian, value, 64)


def encode_u128(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a 128-bit unsigned integer as a varint."""
    _encode(writer, endian, value, 128)


def encode_usize(writer: _Writer, endian: Endian, value: int) -> None:
    """Write a size value; it is encoded as a 64-bit unsigned integer."""
    _encode(writer, endian, value, 64)