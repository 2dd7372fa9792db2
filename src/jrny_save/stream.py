"""Little-endian byte cursor used by all savefile codecs.

The savefile has sections without a length prefix, so readers need to peek
ahead and rewind. ``ByteReader`` keeps the whole input in memory and tracks a
single position that is threaded through every sub-codec.
"""
from __future__ import annotations

import struct
from typing import Dict

from .errors import DecodeError, EncodeError

_FORMATS: Dict[str, struct.Struct] = {
    "u8": struct.Struct("<B"),
    "u16": struct.Struct("<H"),
    "u32": struct.Struct("<I"),
    "u64": struct.Struct("<Q"),
    "i64": struct.Struct("<q"),
}


class ByteReader:
    """Seekable reader over an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def seek(self, offset: int) -> None:
        """Move the cursor relative to the current position."""
        target = self._pos + offset
        if target < 0 or target > len(self._data):
            raise DecodeError("cursor", target, self._pos, "seek outside of input")
        self._pos = target

    def peek(self, size: int, ahead: int = 0) -> bytes:
        """Return ``size`` bytes starting ``ahead`` bytes past the cursor without moving it.

        Returns fewer bytes when the input ends first.
        """
        start = self._pos + ahead
        return self._data[start:start + size]

    def read(self, size: int, field: str) -> bytes:
        if size > self.remaining():
            raise DecodeError(field, None, self._pos, f"expected {size} bytes, {self.remaining()} left")
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def read_rest(self) -> bytes:
        chunk = self._data[self._pos:]
        self._pos = len(self._data)
        return chunk

    def read_int(self, kind: str, field: str) -> int:
        fmt = _FORMATS[kind]
        (value,) = fmt.unpack(self.read(fmt.size, field))
        return value


class ByteWriter:
    """Append-only sink that mirrors ``ByteReader``."""

    def __init__(self) -> None:
        self._buf = bytearray()

    @property
    def position(self) -> int:
        return len(self._buf)

    def write(self, data: bytes) -> None:
        self._buf += data

    def write_fixed(self, data: bytes, size: int, field: str) -> None:
        """Write a run that must be exactly ``size`` bytes long."""
        if len(data) != size:
            raise EncodeError(f"{field} must be {size} bytes, got {len(data)}")
        self._buf += data

    def write_int(self, kind: str, value: int, field: str) -> None:
        try:
            self._buf += _FORMATS[kind].pack(value)
        except struct.error as e:
            raise EncodeError(f"{field} value {value!r} does not fit in {kind}") from e

    def zero_fill(self, size: int) -> None:
        self._buf += bytes(size)

    def getvalue(self) -> bytes:
        return bytes(self._buf)
