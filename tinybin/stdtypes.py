"""Encoding of addresses, paths and C strings, and stream entry points."""

from __future__ import annotations

import ipaddress
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, BinaryIO, TypeVar, Union

from .codec import Config, Decoder, Encoder
from .errors import CStrNulError, InvalidPathCharactersError, UnexpectedVariantError
from .streams import StreamReader, StreamWriter

T = TypeVar("T")

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_V4 = 0
_V6 = 1
_ALLOWED_VARIANTS = (_V4, _V6)


def _read_variant(decoder: Decoder, type_name: str) -> int:
    variant = decoder.read_uint(32)
    if variant not in _ALLOWED_VARIANTS:
        raise UnexpectedVariantError(variant, _ALLOWED_VARIANTS, type_name)
    return variant


def encode_ipv4(encoder: Encoder, address: Any) -> None:
    """Write the four octets of an IPv4 address."""
    encoder.writer.write(ipaddress.IPv4Address(address).packed)


def decode_ipv4(decoder: Decoder) -> ipaddress.IPv4Address:
    """Read the four octets of an IPv4 address."""
    return ipaddress.IPv4Address(decoder.reader.read(4))


def encode_ipv6(encoder: Encoder, address: Any) -> None:
    """Write the sixteen octets of an IPv6 address."""
    encoder.writer.write(ipaddress.IPv6Address(address).packed)


def decode_ipv6(decoder: Decoder) -> ipaddress.IPv6Address:
    """Read the sixteen octets of an IPv6 address."""
    return ipaddress.IPv6Address(decoder.reader.read(16))


def encode_ip(encoder: Encoder, address: Any) -> None:
    """Write an IP address as a 32-bit variant (0 for v4, 1 for v6) and its octets."""
    ip = ipaddress.ip_address(address)
    if isinstance(ip, ipaddress.IPv4Address):
        encoder.write_uint(_V4, 32)
        encode_ipv4(encoder, ip)
    else:
        encoder.write_uint(_V6, 32)
        encode_ipv6(encoder, ip)


def decode_ip(decoder: Decoder) -> IPAddress:
    """Read an IP address written by encode_ip."""
    if _read_variant(decoder, "IpAddr") == _V4:
        return decode_ipv4(decoder)
    return decode_ipv6(decoder)


def encode_socket_addr(encoder: Encoder, address: tuple[Any, ...]) -> None:
    """Write a socket address ``(host, port, ...)``: variant, address octets, 16-bit port.

    Any IPv6 flow information or scope id is not written.
    """
    ip = ipaddress.ip_address(address[0])
    port = address[1]
    if isinstance(ip, ipaddress.IPv4Address):
        encoder.write_uint(_V4, 32)
        encode_ipv4(encoder, ip)
    else:
        encoder.write_uint(_V6, 32)
        encode_ipv6(encoder, ip)
    encoder.write_uint(port, 16)


def decode_socket_addr(decoder: Decoder) -> tuple[IPAddress, int]:
    """Read a socket address written by encode_socket_addr as ``(ip, port)``."""
    ip: IPAddress
    if _read_variant(decoder, "SocketAddr") == _V4:
        ip = decode_ipv4(decoder)
    else:
        ip = decode_ipv6(decoder)
    return ip, decoder.read_uint(16)


def encode_path(encoder: Encoder, path: str | bytes | os.PathLike[Any]) -> None:
    """Write a path as a UTF-8 string; raise if it cannot be represented as UTF-8."""
    raw = os.fspath(path)
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        data = text.encode("utf-8")
    except UnicodeError as exc:
        raise InvalidPathCharactersError(path) from exc
    encoder.write_bytes(data)


def decode_path(decoder: Decoder) -> Path:
    """Read a path written by encode_path."""
    return Path(decoder.read_str())


def encode_cstring(encoder: Encoder, data: bytes | bytearray | memoryview) -> None:
    """Write C-string contents followed by their terminating NUL, length-prefixed."""
    raw = bytes(data)
    if b"\x00" in raw:
        raise ValueError("C string contents must not contain a NUL byte")
    encoder.write_bytes(raw + b"\x00")


def decode_cstring(decoder: Decoder) -> bytes:
    """Read a C string and return its contents without the terminating NUL."""
    raw = decoder.read_bytes()
    if not raw.endswith(b"\x00"):
        raise CStrNulError("data is not nul terminated")
    position = raw.find(b"\x00")
    if position != len(raw) - 1:
        raise CStrNulError(f"interior nul byte found at position {position}")
    return raw[:-1]


def encode_into_stream(
    value: T,
    encode: Callable[[Encoder, T], None],
    stream: BinaryIO,
    config: Config | None = None,
) -> int:
    """Encode ``value`` into a binary stream and return the number of bytes written."""
    writer = StreamWriter(stream)
    encode(Encoder(writer, config), value)
    return writer.bytes_written()


def decode_from_stream(
    stream: BinaryIO,
    decode: Callable[[Decoder], T],
    config: Config | None = None,
) -> T:
    """Decode a value from a binary stream."""
    return decode(Decoder(StreamReader(stream), config))