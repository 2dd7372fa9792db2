from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import DecodeError, EncodeError, LevelIdOutOfRange, LevelNameNotFound
from .stream import ByteReader, ByteWriter

MAX_LEVEL_ID = 11

NAMES: Tuple[str, ...] = (
    "Chapter Select",
    "Broken Bridge",
    "Pink Desert",
    "Sunken City",
    "Underground",
    "Tower",
    "Snow",
    "Paradise",
    "Credits",
    "Level Bryan",
    "Level Matt",
    "Level Chris",
)


@dataclass
class Level:
    """The chapter the current journey is in. Stored as a u64."""

    id: int = 0

    NAMES = NAMES

    def __post_init__(self) -> None:
        if not 0 <= self.id <= MAX_LEVEL_ID:
            raise LevelIdOutOfRange(f"Level id {self.id} is out of range 0..{MAX_LEVEL_ID}")

    @property
    def name(self) -> str:
        return NAMES[self.id]

    def set_by_id(self, id: int) -> None:
        if not 0 <= id <= MAX_LEVEL_ID:
            raise LevelIdOutOfRange(f"Level id {id} is out of range 0..{MAX_LEVEL_ID}")
        self.id = id

    def set_by_name(self, name: str) -> None:
        try:
            self.id = NAMES.index(name)
        except ValueError as e:
            raise LevelNameNotFound(f"Level name {name!r} was not found") from e

    def wrapping_next(self) -> "Level":
        return Level(0 if self.id >= MAX_LEVEL_ID else self.id + 1)

    def wrapping_previous(self) -> "Level":
        return Level(MAX_LEVEL_ID if self.id == 0 else self.id - 1)

    def __int__(self) -> int:
        return self.id

    def __str__(self) -> str:
        return self.name

    @classmethod
    def read(cls, reader: ByteReader) -> "Level":
        offset = reader.position
        value = reader.read_int("u64", "current_level")
        if value > MAX_LEVEL_ID:
            raise DecodeError("current_level", value, offset, f"must be at most {MAX_LEVEL_ID}")
        return cls(value)

    def write(self, writer: ByteWriter) -> None:
        if not 0 <= self.id <= MAX_LEVEL_ID:
            raise EncodeError(f"current_level {self.id} is out of range 0..{MAX_LEVEL_ID}")
        writer.write_int("u64", self.id, "current_level")
