"""Companion records and the two list layouts they are stored in.

Neither list has a count in front of it:

* Companions by id are 28 byte records each followed by the marker
  ``01 00 10 01``. The list ends at the first record that is not followed by
  the marker.
* Companions with symbol live in a fixed 960 byte section of 60 byte records.
  The list ends at the first record with an empty name, the rest of the
  section is zero padding.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List
from urllib.parse import quote

from .errors import (
    CompanionSymbolOutOfRange,
    DecodeError,
    EncodeError,
    InvalidName,
    InvalidSteamId,
    NameTooLong,
)
from .stream import ByteReader, ByteWriter

logger = logging.getLogger(__name__)

MARKER = b"\x01\x00\x10\x01"

ID_NAME_SIZE = 24
ID_ENTRY_SIZE = ID_NAME_SIZE + 4

SYMBOL_NAME_SIZE = 52
SYMBOL_RESERVED_SIZE = 4
SYMBOL_ENTRY_SIZE = SYMBOL_NAME_SIZE + SYMBOL_RESERVED_SIZE + 4
SYMBOL_SECTION_SIZE = 960
SYMBOL_CAPACITY = SYMBOL_SECTION_SIZE // SYMBOL_ENTRY_SIZE
MAX_COMPANION_SYMBOL = 21

STEAM_PROFILE_URL = "https://steamcommunity.com/profiles/"


def decode_name(raw: bytes) -> str:
    """Decode a null padded name; everything after the first null is ignored."""
    return raw.split(b"\x00", 1)[0].decode("utf-8", errors="replace")


def encode_name(name: str, size: int, raw: bytes = b"") -> bytes:
    """Encode a name into a null padded field of ``size`` bytes.

    If ``raw`` holds the bytes the name was decoded from and still decodes to
    the same name, it is returned unchanged.
    """
    if len(raw) == size and decode_name(raw) == name:
        return raw
    if "\x00" in name:
        raise EncodeError(f"Name {name!r} contains a null character")
    encoded = name.encode("utf-8")
    if len(encoded) > size:
        raise EncodeError(f"Name {name!r} is {len(encoded)} bytes, field holds {size}")
    return encoded.ljust(size, b"\x00")


def _check_name(name: str, size: int, raw: bytes, allow_empty: bool = True) -> None:
    if raw and decode_name(raw) == name:
        return
    if "\x00" in name:
        raise InvalidName(f"Name {name!r} contains a null character")
    if not name and not allow_empty:
        raise InvalidName("Name can not be empty")
    if len(name.encode("utf-8")) > size:
        raise NameTooLong(f"Name {name!r} is longer than {size} bytes")


@dataclass
class CompanionWithId:
    name: str
    steam_id: int
    _raw_name: bytes = field(default=b"", repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_name(self.name, ID_NAME_SIZE, self._raw_name)
        if self.steam_id == 0:
            raise InvalidSteamId(f"Companion {self.name!r} has steam id 0")

    def steam_id_v3(self) -> str:
        return f"[U:1:{self.steam_id}]"

    def steam_url(self) -> str:
        return STEAM_PROFILE_URL + quote(self.steam_id_v3(), safe="")

    @classmethod
    def read(cls, reader: ByteReader) -> "CompanionWithId":
        raw_name = reader.read(ID_NAME_SIZE, "companion name")
        offset = reader.position
        steam_id = reader.read_int("u32", "companion steam_id")
        if steam_id == 0:
            raise DecodeError("companion steam_id", steam_id, offset, "must be nonzero")
        return cls(decode_name(raw_name), steam_id, raw_name)

    def write(self, writer: ByteWriter) -> None:
        if self.steam_id == 0:
            raise EncodeError(f"Companion {self.name!r} has steam id 0")
        writer.write(encode_name(self.name, ID_NAME_SIZE, self._raw_name))
        writer.write_int("u32", self.steam_id, "companion steam_id")


@dataclass
class CompanionWithSymbol:
    name: str
    symbol: int
    _reserved: bytes = field(default=bytes(SYMBOL_RESERVED_SIZE), repr=False)
    _raw_name: bytes = field(default=b"", repr=False, compare=False)

    def __post_init__(self) -> None:
        # an empty name marks the end of the list
        _check_name(self.name, SYMBOL_NAME_SIZE, self._raw_name, allow_empty=False)
        if not 0 <= self.symbol <= MAX_COMPANION_SYMBOL:
            raise CompanionSymbolOutOfRange(
                f"Companion symbol {self.symbol} is out of range 0..{MAX_COMPANION_SYMBOL}"
            )

    @classmethod
    def read(cls, reader: ByteReader) -> "CompanionWithSymbol":
        raw_name = reader.read(SYMBOL_NAME_SIZE, "companion_symbols name")
        reserved = reader.read(SYMBOL_RESERVED_SIZE, "companion_symbols reserved")
        offset = reader.position
        symbol = reader.read_int("u32", "companion_symbols symbol")
        if symbol > MAX_COMPANION_SYMBOL:
            raise DecodeError("companion_symbols symbol", symbol, offset, f"must be at most {MAX_COMPANION_SYMBOL}")
        return cls(decode_name(raw_name), symbol, reserved, raw_name)

    def write(self, writer: ByteWriter) -> None:
        if not self.name:
            raise EncodeError("Companion with symbol needs a name, an empty one ends the list")
        if not 0 <= self.symbol <= MAX_COMPANION_SYMBOL:
            raise EncodeError(f"Companion symbol {self.symbol} is out of range 0..{MAX_COMPANION_SYMBOL}")
        writer.write(encode_name(self.name, SYMBOL_NAME_SIZE, self._raw_name))
        writer.write_fixed(self._reserved, SYMBOL_RESERVED_SIZE, "companion_symbols reserved")
        writer.write_int("u32", self.symbol, "companion_symbols symbol")


CompanionIdList = List[CompanionWithId]
CompanionSymbolList = List[CompanionWithSymbol]


def read_companions(reader: ByteReader) -> CompanionIdList:
    companions: CompanionIdList = []
    while reader.peek(len(MARKER), ahead=ID_ENTRY_SIZE) == MARKER:
        companions.append(CompanionWithId.read(reader))
        reader.seek(len(MARKER))
    logger.debug("Read %d companions ending at offset %#x", len(companions), reader.position)
    return companions


def write_companions(writer: ByteWriter, companions: CompanionIdList) -> None:
    for companion in companions:
        companion.write(writer)
        writer.write(MARKER)


def read_companion_symbols(reader: ByteReader) -> CompanionSymbolList:
    start = reader.position
    companions: CompanionSymbolList = []
    while len(companions) < SYMBOL_CAPACITY:
        # an empty name ends the list; the sentinel record is left unread
        if not decode_name(reader.peek(SYMBOL_NAME_SIZE)):
            break
        companions.append(CompanionWithSymbol.read(reader))
    padding = SYMBOL_SECTION_SIZE - len(companions) * SYMBOL_ENTRY_SIZE
    if padding > reader.remaining():
        raise DecodeError("companion_symbols", None, start, "section is truncated")
    reader.seek(padding)
    return companions


def write_companion_symbols(writer: ByteWriter, companions: CompanionSymbolList) -> None:
    if len(companions) > SYMBOL_CAPACITY:
        raise EncodeError(f"At most {SYMBOL_CAPACITY} companion symbols fit, got {len(companions)}")
    for companion in companions:
        companion.write(writer)
    writer.zero_fill(SYMBOL_SECTION_SIZE - len(companions) * SYMBOL_ENTRY_SIZE)
