from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .stream import ByteReader, ByteWriter

# murals per level; each level's bits follow the previous level's bits
COUNT: Tuple[int, ...] = (1, 1, 2, 2, 1, 1, 2)
MAX_LEVEL = len(COUNT) - 1


@dataclass
class Murals:
    """Found murals, one bit each in a single u16."""

    status_flags: int = 0

    def has_found(self, level: int, index: int) -> Optional[bool]:
        if level < 0 or level > MAX_LEVEL:
            return None
        if index < 0 or index >= COUNT[level]:
            return None
        mask = 0x01 << (sum(COUNT[:level]) + index)
        return self.status_flags & mask == mask

    def all(self) -> Iterator[Tuple[int, List[bool]]]:
        for level, count in enumerate(COUNT):
            yield level, [bool(self.has_found(level, i)) for i in range(count)]

    @classmethod
    def read(cls, reader: ByteReader) -> "Murals":
        return cls(reader.read_int("u16", "murals"))

    def write(self, writer: ByteWriter) -> None:
        writer.write_int("u16", self.status_flags, "murals")
