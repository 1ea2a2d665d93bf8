"""Compact binary serialization with variable-length integers."""

__version__ = "0.1.0"
__all__ = [
    "codec",
    "errors",
    "stdtypes",
    "streams",
    "varint_decode_large",
    "varint_decode_signed",
    "varint_decode_small",
    "varint_encode",
    "varint_encode_signed",
]