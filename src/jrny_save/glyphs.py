from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .errors import EncodeError
from .stream import ByteReader, ByteWriter

LEVEL_COUNT = 6
# glyphs per level, in level order
COUNT: Tuple[int, ...] = (3, 3, 4, 3, 4, 4)
MAX_INDEX = 8
RESERVED_SIZE = 343
SLOT_SIZE = 1 + RESERVED_SIZE


@dataclass
class LevelGlyphs:
    """One level slot: a status byte followed by reserved bytes."""

    status_flags: int = 0
    _reserved: bytes = field(default=bytes(RESERVED_SIZE), repr=False)

    def has_collected(self, index: int) -> Optional[bool]:
        if index < 0 or index > MAX_INDEX:
            return None
        return (self.status_flags >> index) & 0x01 == 0x01


@dataclass
class Glyphs:
    """Collected glyphs of the six levels that have them."""

    levels: List[LevelGlyphs] = field(default_factory=lambda: [LevelGlyphs() for _ in range(LEVEL_COUNT)])

    def count(self) -> int:
        return len(self.levels)

    def has_collected(self, level: int, index: int) -> Optional[bool]:
        if level < 0 or level >= len(self.levels):
            return None
        return self.levels[level].has_collected(index)

    def all(self) -> Iterator[Tuple[int, List[bool]]]:
        """Yield ``(level, flags)`` for the six glyph levels, one flag per glyph."""
        for level, (glyphs, count) in enumerate(zip(self.levels, COUNT)):
            yield level, [bool(glyphs.has_collected(i)) for i in range(count)]

    @classmethod
    def read(cls, reader: ByteReader) -> "Glyphs":
        levels = []
        for level in range(LEVEL_COUNT):
            slot = reader.read(SLOT_SIZE, f"glyphs[{level}]")
            levels.append(LevelGlyphs(status_flags=slot[0], _reserved=slot[1:]))
        return cls(levels)

    def write(self, writer: ByteWriter) -> None:
        if len(self.levels) != LEVEL_COUNT:
            raise EncodeError(f"glyphs must have {LEVEL_COUNT} levels, got {len(self.levels)}")
        for level, glyphs in enumerate(self.levels):
            writer.write_int("u8", glyphs.status_flags, f"glyphs[{level}]")
            writer.write_fixed(glyphs._reserved, RESERVED_SIZE, f"glyphs[{level}] reserved")
