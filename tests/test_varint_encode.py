import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinybin.errors import BufferFullError
from tinybin.streams import BufferWriter, Endian, SliceWriter
from tinybin.varint_encode import (
    SINGLE_BYTE_MAX,
    U16_BYTE,
    U32_BYTE,
    U64_BYTE,
    U128_BYTE,
    encode_u16,
    encode_u32,
    encode_u64,
    encode_u128,
    encode_usize,
)

U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

ALL = [encode_u16, encode_u32, encode_u64, encode_u128]
FROM_U32 = [encode_u32, encode_u64, encode_u128]
FROM_U64 = [encode_u64, encode_u128]

THREE_BYTE = [SINGLE_BYTE_MAX + 1, 300, 500, 700, 888, 1234, U16_MAX]
FIVE_BYTE = [U16_MAX + 1, 100_000, 1_000_000, U32_MAX]
NINE_BYTE = [U32_MAX + 1, 5_000_000_000, U64_MAX]
SEVENTEEN_BYTE = [U64_MAX + 1, U128_MAX]


def _encode(func, endian, value):
    buffer = bytearray(20)
    writer = SliceWriter(buffer)
    func(writer, endian, value)
    return writer.bytes_written(), bytes(buffer)


@pytest.mark.parametrize("func", ALL)
def test_single_byte_values(func):
    for value in range(SINGLE_BYTE_MAX + 1):
        for endian in Endian:
            written, buffer = _encode(func, endian, value)
            assert written == 1
            assert buffer[0] == value


@pytest.mark.parametrize("func", ALL)
@pytest.mark.parametrize("value", THREE_BYTE)
def test_three_byte_values(func, value):
    for endian in Endian:
        written, buffer = _encode(func, endian, value)
        assert written == 3
        assert buffer[0] == U16_BYTE
        assert buffer[1:3] == value.to_bytes(2, endian.value)


@pytest.mark.parametrize("func", FROM_U32)
@pytest.mark.parametrize("value", FIVE_BYTE)
def test_five_byte_values(func, value):
    for endian in Endian:
        written, buffer = _encode(func, endian, value)
        assert written == 5
        assert buffer[0] == U32_BYTE
        assert buffer[1:5] == value.to_bytes(4, endian.value)


@pytest.mark.parametrize("func", FROM_U64)
@pytest.mark.parametrize("value", NINE_BYTE)
def test_nine_byte_values(func, value):
    for endian in Endian:
        written, buffer = _encode(func, endian, value)
        assert written == 9
        assert buffer[0] == U64_BYTE
        assert buffer[1:9] == value.to_bytes(8, endian.value)


@pytest.mark.parametrize("value", SEVENTEEN_BYTE)
def test_seventeen_byte_values(value):
    for endian in Endian:
        written, buffer = _encode(encode_u128, endian, value)
        assert written == 17
        assert buffer[0] == U128_BYTE
        assert buffer[1:17] == value.to_bytes(16, endian.value)


@pytest.mark.parametrize(
    "value, marker",
    [
        (250, 250),
        (251, 251),
        (2**16, 252),
        (2**32, 253),
        (2**64, 254),
    ],
)
def test_marker_bytes_are_fixed(value, marker):
    writer = BufferWriter()
    encode_u128(writer, Endian.LITTLE, value)
    assert writer.getvalue()[0] == marker


def test_pinned_little_endian_encodings():
    writer = BufferWriter()
    encode_u16(writer, Endian.LITTLE, 251)
    assert writer.getvalue() == bytes([251, 251, 0])
    writer = BufferWriter()
    encode_u32(writer, Endian.BIG, 65536)
    assert writer.getvalue() == bytes([252, 0, 1, 0, 0])


@pytest.mark.parametrize(
    "func, limit",
    [
        (encode_u16, U16_MAX),
        (encode_u32, U32_MAX),
        (encode_u64, U64_MAX),
        (encode_u128, U128_MAX),
        (encode_usize, U64_MAX),
    ],
)
def test_out_of_range_values_rejected(func, limit):
    with pytest.raises(ValueError):
        func(BufferWriter(), Endian.LITTLE, limit + 1)
    with pytest.raises(ValueError):
        func(BufferWriter(), Endian.LITTLE, -1)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        encode_u32(BufferWriter(), Endian.LITTLE, 1.5)


@given(st.integers(min_value=0, max_value=U64_MAX), st.sampled_from(list(Endian)))
def test_usize_matches_u64(value, endian):
    a, b = BufferWriter(), BufferWriter()
    encode_usize(a, endian, value)
    encode_u64(b, endian, value)
    assert a.getvalue() == b.getvalue()


@given(st.integers(min_value=0, max_value=U128_MAX), st.sampled_from(list(Endian)))
def test_u128_payload_holds_value(value, endian):
    writer = BufferWriter()
    encode_u128(writer, endian, value)
    out = writer.getvalue()
    if len(out) == 1:
        assert out[0] == value
    else:
        widths = {U16_BYTE: 2, U32_BYTE: 4, U64_BYTE: 8, U128_BYTE: 16}
        assert len(out) == 1 + widths[out[0]]
        assert int.from_bytes(out[1:], endian.value) == value


def test_buffer_too_small_raises():
    writer = SliceWriter(bytearray(2))
    with pytest.raises(BufferFullError):
        encode_u32(writer, Endian.LITTLE, U16_MAX)
    assert writer.bytes_written() == 1