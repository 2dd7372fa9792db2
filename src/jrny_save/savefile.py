from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Union

from .companion import (
    CompanionIdList,
    CompanionSymbolList,
    CompanionWithId,
    read_companion_symbols,
    read_companions,
    write_companion_symbols,
    write_companions,
)
from .errors import CollectedSymbolsOutOfRange, DecodeError, EncodeError
from .glyphs import Glyphs
from .level import Level
from .murals import Murals
from .robe import Robe
from .scarf import Scarf
from .stream import ByteReader, ByteWriter
from .symbol import Symbol
from .timestamp import datetime_to_filetime, filetime_to_datetime

if TYPE_CHECKING:
    from .settings import Settings

MAX_COLLECTED_SYMBOLS = 21

# sizes of the byte runs whose meaning is unknown, kept as read
RESERVED_SIZES: Dict[str, int] = {
    "_reserved0": 8,
    "_reserved1": 4,
    "_reserved2": 22,
    "_reserved3": 4,
    "_reserved4": 2404,
    "_reserved5": 1024,
    "_reserved6": 24,
}


@dataclass
class Savefile:
    """A decoded savefile.

    Fields are declared in file order. Only build instances by decoding, see
    ``jrny_save.codec.decode_save``. The ``_reserved*`` runs and ``_remainder``
    are written back exactly as they were read.
    """

    _reserved0: bytes = field(repr=False)
    robe: Robe
    symbol: Symbol
    scarf_length: Scarf
    _reserved1: bytes = field(repr=False)
    current_level: Level
    total_collected_symbols: int
    collected_symbols: int
    murals: Murals
    _reserved2: bytes = field(repr=False)
    last_played: datetime
    _reserved3: bytes = field(repr=False)
    journey_count: int
    glyphs: Glyphs
    _reserved4: bytes = field(repr=False)
    companion_symbols: CompanionSymbolList
    companions_met: int
    _reserved5: bytes = field(repr=False)
    total_companions_met: int
    _reserved6: bytes = field(repr=False)
    companions: CompanionIdList
    _remainder: bytes = field(repr=False)
    _last_played_ticks: Optional[int] = field(default=None, repr=False, compare=False)
    path: Optional[Path] = field(default=None, compare=False)

    def set_collected_symbols(self, value: int) -> None:
        if not 0 <= value <= MAX_COLLECTED_SYMBOLS:
            raise CollectedSymbolsOutOfRange(
                f"Collected symbols must be between 0 and {MAX_COLLECTED_SYMBOLS}, got {value}"
            )
        self.collected_symbols = value

    def current_level_name(self) -> str:
        return self.current_level.name

    def current_companions(self) -> Iterator[CompanionWithId]:
        """Companions the player is still traveling with."""
        return iter(self.companions[:self.companions_met])

    def past_companions(self) -> Iterator[CompanionWithId]:
        """Companions that have departed."""
        return iter(self.companions[self.companions_met:])

    # Binary layout

    @classmethod
    def read(cls, reader: ByteReader) -> "Savefile":
        """Decode fields in file order, failing on the first invalid one."""
        fields = {}
        fields["_reserved0"] = reader.read(RESERVED_SIZES["_reserved0"], "_reserved0")
        fields["robe"] = Robe.read(reader)
        fields["symbol"] = Symbol.read(reader)
        fields["scarf_length"] = Scarf.read(reader)
        fields["_reserved1"] = reader.read(RESERVED_SIZES["_reserved1"], "_reserved1")
        fields["current_level"] = Level.read(reader)
        fields["total_collected_symbols"] = reader.read_int("u32", "total_collected_symbols")

        offset = reader.position
        collected = reader.read_int("u32", "collected_symbols")
        if collected > MAX_COLLECTED_SYMBOLS:
            raise DecodeError("collected_symbols", collected, offset, f"must be at most {MAX_COLLECTED_SYMBOLS}")
        fields["collected_symbols"] = collected

        fields["murals"] = Murals.read(reader)
        fields["_reserved2"] = reader.read(RESERVED_SIZES["_reserved2"], "_reserved2")

        offset = reader.position
        ticks = reader.read_int("i64", "last_played")
        try:
            fields["last_played"] = filetime_to_datetime(ticks)
        except DecodeError as e:
            raise DecodeError("last_played", ticks, offset, e.reason) from e
        fields["_last_played_ticks"] = ticks

        fields["_reserved3"] = reader.read(RESERVED_SIZES["_reserved3"], "_reserved3")
        fields["journey_count"] = reader.read_int("u64", "journey_count")
        fields["glyphs"] = Glyphs.read(reader)
        fields["_reserved4"] = reader.read(RESERVED_SIZES["_reserved4"], "_reserved4")
        fields["companion_symbols"] = read_companion_symbols(reader)
        fields["companions_met"] = reader.read_int("u32", "companions_met")
        fields["_reserved5"] = reader.read(RESERVED_SIZES["_reserved5"], "_reserved5")
        fields["total_companions_met"] = reader.read_int("u32", "total_companions_met")
        fields["_reserved6"] = reader.read(RESERVED_SIZES["_reserved6"], "_reserved6")
        fields["companions"] = read_companions(reader)
        fields["_remainder"] = reader.read_rest()
        return cls(**fields)

    def write(self, writer: ByteWriter) -> None:
        """Encode fields in the same order ``read`` decodes them."""
        self._write_reserved(writer, "_reserved0")
        self.robe.write(writer)
        self.symbol.write(writer)
        self.scarf_length.write(writer)
        self._write_reserved(writer, "_reserved1")
        self.current_level.write(writer)
        writer.write_int("u32", self.total_collected_symbols, "total_collected_symbols")
        if not 0 <= self.collected_symbols <= MAX_COLLECTED_SYMBOLS:
            raise EncodeError(f"collected_symbols {self.collected_symbols} is above {MAX_COLLECTED_SYMBOLS}")
        writer.write_int("u32", self.collected_symbols, "collected_symbols")
        self.murals.write(writer)
        self._write_reserved(writer, "_reserved2")
        writer.write_int("i64", self._encode_last_played(), "last_played")
        self._write_reserved(writer, "_reserved3")
        writer.write_int("u64", self.journey_count, "journey_count")
        self.glyphs.write(writer)
        self._write_reserved(writer, "_reserved4")
        write_companion_symbols(writer, self.companion_symbols)
        writer.write_int("u32", self.companions_met, "companions_met")
        self._write_reserved(writer, "_reserved5")
        writer.write_int("u32", self.total_companions_met, "total_companions_met")
        self._write_reserved(writer, "_reserved6")
        write_companions(writer, self.companions)
        writer.write(self._remainder)

    def _write_reserved(self, writer: ByteWriter, name: str) -> None:
        writer.write_fixed(getattr(self, name), RESERVED_SIZES[name], name)

    def _encode_last_played(self) -> int:
        # keep the sub-millisecond ticks of an unchanged timestamp
        ticks = self._last_played_ticks
        if ticks is not None and filetime_to_datetime(ticks) == self.last_played:
            return ticks
        return datetime_to_filetime(self.last_played)

    # Files

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Savefile":
        from .storage import load_savefile

        return load_savefile(path)

    def write_path(self, path: Union[str, Path, None] = None, settings: Optional["Settings"] = None) -> Path:
        from .storage import write_savefile

        return write_savefile(self, path, settings=settings)
