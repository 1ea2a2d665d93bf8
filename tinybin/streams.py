"""Byte sources and sinks used by the encoder and decoder."""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO

from .errors import BufferFullError, EncodeError, UnexpectedEndError


class Endian(Enum):
    """Byte order of fixed-width integers; the value suits int.to_bytes."""

    LITTLE = "little"
    BIG = "big"


class SliceReader:
    """Reads from an in-memory bytes object."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of bytes read so far."""
        return self._pos

    def read(self, n: int) -> bytes:
        """Read exactly ``n`` bytes or raise UnexpectedEndError."""
        end = self._pos + n
        if end > len(self._data):
            raise UnexpectedEndError()
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def peek(self, n: int) -> bytes | None:
        """Return the next ``n`` bytes without consuming them, or None if fewer remain."""
        end = self._pos + n
        if end > len(self._data):
            return None
        return self._data[self._pos:end]

    def consume(self, n: int) -> None:
        """Skip ``n`` bytes."""
        if self._pos + n > len(self._data):
            raise UnexpectedEndError()
        self._pos += n

    def remaining(self) -> bytes:
        """The bytes not yet read."""
        return self._data[self._pos:]


class StreamReader:
    """Reads from a binary file-like object."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self, n: int) -> bytes:
        """Read exactly ``n`` bytes or raise UnexpectedEndError."""
        parts: list[bytes] = []
        left = n
        while left > 0:
            chunk = self._stream.read(left)
            if not chunk:
                raise UnexpectedEndError()
            parts.append(chunk)
            left -= len(chunk)
        return b"".join(parts)

    def peek(self, n: int) -> bytes | None:
        """Return up to ``n`` buffered bytes if the stream can peek that far, else None."""
        peek = getattr(self._stream, "peek", None)
        if peek is None:
            return None
        buffered = peek(n)
        if len(buffered) < n:
            return None
        return bytes(buffered[:n])

    def consume(self, n: int) -> None:
        """Skip ``n`` bytes."""
        self.read(n)


class SliceWriter:
    """Writes into a fixed-size writable buffer such as a bytearray."""

    def __init__(self, buffer: bytearray | memoryview) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("SliceWriter needs a writable buffer")
        self._buffer = view.cast("B") if view.format != "B" else view
        self._pos = 0

    def write(self, data: bytes) -> None:
        """Append ``data``; raise BufferFullError if it does not fit."""
        end = self._pos + len(data)
        if end > len(self._buffer):
            raise BufferFullError(len(data), len(self._buffer) - self._pos)
        self._buffer[self._pos:end] = data
        self._pos = end

    def bytes_written(self) -> int:
        """Number of bytes written so far."""
        return self._pos


class BufferWriter:
    """Collects written bytes in a growing in-memory buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        """Append ``data``."""
        self._buffer += data

    def bytes_written(self) -> int:
        """Number of bytes written so far."""
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """All bytes written so far."""
        return bytes(self._buffer)


class StreamWriter:
    """Writes to a binary file-like object, counting the bytes written."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._written = 0

    def write(self, data: bytes) -> None:
        """Write all of ``data``; I/O failures are raised as EncodeError."""
        view = memoryview(bytes(data))
        while view:
            try:
                count = self._stream.write(view)
            except OSError as exc:
                raise EncodeError(
                    f"I/O error after {self._written} bytes: {exc}"
                ) from exc
            if count is None:
                count = len(view)
            if count == 0:
                raise EncodeError(f"stream accepted no data after {self._written} bytes")
            self._written += count
            view = view[count:]

    def bytes_written(self) -> int:
        """Number of bytes written so far."""
        return self._written