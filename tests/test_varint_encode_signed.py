import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinybin.streams import BufferWriter, Endian, SliceWriter
from tinybin.varint_encode import U16_BYTE, U32_BYTE, U64_BYTE, U128_BYTE, encode_u64
from tinybin.varint_encode_signed import (
    encode_i16,
    encode_i32,
    encode_i64,
    encode_i128,
    encode_isize,
)


def _encode(func, endian, value):
    writer = BufferWriter()
    func(writer, endian, value)
    return writer.getvalue()


I16_MAX = 2**15 - 1
I32_MAX = 2**31 - 1
I64_MAX = 2**63 - 1
I128_MAX = 2**127 - 1

COMMON_CASES = [
    (0, [0], [0]),
    (2, [4], [4]),
    (256, [U16_BYTE, 0, 2], [U16_BYTE, 2, 0]),
    (16_000, [U16_BYTE, 0, 125], [U16_BYTE, 125, 0]),
]

I16_CASES = COMMON_CASES + [
    (I16_MAX - 1, [U16_BYTE, 252, 255], [U16_BYTE, 255, 252]),
    (I16_MAX, [U16_BYTE, 254, 255], [U16_BYTE, 255, 254]),
]

I32_BASE = COMMON_CASES + [
    (40_000, [U32_BYTE, 128, 56, 1, 0], [U32_BYTE, 0, 1, 56, 128]),
]

I32_CASES = I32_BASE + [
    (I32_MAX - 1, [U32_BYTE, 252, 255, 255, 255], [U32_BYTE, 255, 255, 255, 252]),
    (I32_MAX, [U32_BYTE, 254, 255, 255, 255], [U32_BYTE, 255, 255, 255, 254]),
]

I64_BASE = I32_BASE + [
    (
        3_000_000_000,
        [U64_BYTE, 0, 188, 160, 101, 1, 0, 0, 0],
        [U64_BYTE, 0, 0, 0, 1, 101, 160, 188, 0],
    ),
]

I64_CASES = I64_BASE + [
    (
        I64_MAX - 1,
        [U64_BYTE, 252] + [255] * 7,
        [U64_BYTE] + [255] * 7 + [252],
    ),
    (
        I64_MAX,
        [U64_BYTE, 254] + [255] * 7,
        [U64_BYTE] + [255] * 7 + [254],
    ),
]

I128_CASES = I64_BASE + [
    (
        11_000_000_000_000_000_000,
        [U128_BYTE, 0, 0, 152, 98, 112, 179, 79, 49, 1, 0, 0, 0, 0, 0, 0, 0],
        [U128_BYTE, 0, 0, 0, 0, 0, 0, 0, 1, 49, 79, 179, 112, 98, 152, 0, 0],
    ),
    (
        I128_MAX - 1,
        [U128_BYTE, 252] + [255] * 15,
        [U128_BYTE] + [255] * 15 + [252],
    ),
    (
        I128_MAX,
        [U128_BYTE, 254] + [255] * 15,
        [U128_BYTE] + [255] * 15 + [254],
    ),
]


@pytest.mark.parametrize("value, little, big", I16_CASES)
def test_encode_i16(value, little, big):
    assert _encode(encode_i16, Endian.LITTLE, value) == bytes(little)
    assert _encode(encode_i16, Endian.BIG, value) == bytes(big)


@pytest.mark.parametrize("value, little, big", I32_CASES)
def test_encode_i32(value, little, big):
    assert _encode(encode_i32, Endian.LITTLE, value) == bytes(little)
    assert _encode(encode_i32, Endian.BIG, value) == bytes(big)


@pytest.mark.parametrize("value, little, big", I64_CASES)
def test_encode_i64(value, little, big):
    assert _encode(encode_i64, Endian.LITTLE, value) == bytes(little)
    assert _encode(encode_i64, Endian.BIG, value) == bytes(big)


@pytest.mark.parametrize("value, little, big", I128_CASES)
def test_encode_i128(value, little, big):
    assert _encode(encode_i128, Endian.LITTLE, value) == bytes(little)
    assert _encode(encode_i128, Endian.BIG, value) == bytes(big)


@pytest.mark.parametrize(
    "value, expected",
    [(-1, b"\x01"), (-2, b"\x03"), (1, b"\x02")],
)
def test_small_values_zigzag(value, expected):
    assert _encode(encode_i32, Endian.LITTLE, value) == expected


def test_i16_min_uses_full_range():
    assert _encode(encode_i16, Endian.LITTLE, -(2**15)) == bytes([U16_BYTE, 255, 255])


def test_i64_min_uses_full_range():
    assert _encode(encode_i64, Endian.BIG, -(2**63)) == bytes([U64_BYTE] + [255] * 8)


@pytest.mark.parametrize(
    "func, value",
    [
        (encode_i16, 2**15),
        (encode_i16, -(2**15) - 1),
        (encode_i32, 2**31),
        (encode_i64, -(2**63) - 1),
        (encode_i128, 2**127),
        (encode_isize, 2**63),
    ],
)
def test_out_of_range_raises(func, value):
    with pytest.raises(ValueError):
        _encode(func, Endian.LITTLE, value)


def test_slice_writer_counts_bytes():
    buffer = bytearray(20)
    writer = SliceWriter(buffer)
    encode_i32(writer, Endian.LITTLE, 40_000)
    assert writer.bytes_written() == 5
    assert bytes(buffer[:5]) == bytes([U32_BYTE, 128, 56, 1, 0])


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_isize_matches_i64(value):
    for endian in Endian:
        assert _encode(encode_isize, endian, value) == _encode(encode_i64, endian, value)


@given(st.integers(min_value=0, max_value=2**62))
def test_nonnegative_is_doubled_unsigned(value):
    assert _encode(encode_i64, Endian.LITTLE, value) == _encode(
        encode_u64, Endian.LITTLE, value * 2
    )