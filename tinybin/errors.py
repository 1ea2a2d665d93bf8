"""Exceptions raised while encoding and decoding, and the integer kinds they name."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class IntegerType(Enum):
    """The integer kinds the wire format distinguishes."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    RESERVED = "reserved"

    def into_signed(self) -> IntegerType:
        """Return the signed kind of the same width; signed kinds map to themselves."""
        return _SIGNED.get(self, self)


_SIGNED = {
    IntegerType.U8: IntegerType.I8,
    IntegerType.U16: IntegerType.I16,
    IntegerType.U32: IntegerType.I32,
    IntegerType.U64: IntegerType.I64,
    IntegerType.U128: IntegerType.I128,
    IntegerType.USIZE: IntegerType.ISIZE,
}


class EncodeError(Exception):
    """A value could not be encoded."""


class BufferFullError(EncodeError):
    """The destination buffer has no room left for the bytes being written."""

    def __init__(self, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(
            f"buffer full: {needed} bytes needed, {available} available"
        )


class InvalidPathCharactersError(EncodeError):
    """A path holds characters that cannot be written as UTF-8 text."""

    def __init__(self, path: object = None) -> None:
        self.path = path
        super().__init__("path contains characters that are not valid UTF-8")


class DecodeError(Exception):
    """Bytes could not be decoded into a value."""


class UnexpectedEndError(DecodeError):
    """The input ended before the value was complete."""

    def __init__(self, message: str = "unexpected end of input") -> None:
        super().__init__(message)


class InvalidIntegerTypeError(DecodeError):
    """A variable-length integer carried a width marker for a different kind."""

    def __init__(self, expected: IntegerType, found: IntegerType) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"invalid integer type: expected {expected.value}, found {found.value}"
        )

    def to_signed(self) -> InvalidIntegerTypeError:
        """Return the same error with both kinds turned into their signed forms."""
        return InvalidIntegerTypeError(
            self.expected.into_signed(), self.found.into_signed()
        )


class UnexpectedVariantError(DecodeError):
    """An enum discriminant was outside the allowed variants."""

    def __init__(self, found: int, allowed: Sequence[int], type_name: str) -> None:
        self.found = found
        self.allowed = allowed
        self.type_name = type_name
        super().__init__(
            f"unexpected variant {found} for {type_name}, allowed: {list(allowed)}"
        )


class Utf8DecodeError(DecodeError):
    """A string field did not hold valid UTF-8."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid UTF-8: {reason}")


class CStrNulError(DecodeError):
    """A C string was not terminated by exactly one trailing NUL byte."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid C string: {reason}")