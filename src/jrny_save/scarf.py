from __future__ import annotations

from dataclasses import dataclass

from .errors import DecodeError, EncodeError, ScarfMaxLength, ScarfMinLength, ScarfTooLong
from .stream import ByteReader, ByteWriter

MAX_LENGTH = 30


@dataclass
class Scarf:
    length: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.length <= MAX_LENGTH:
            raise ScarfTooLong(f"Scarf can be at most {MAX_LENGTH} long, got {self.length}")

    def set_length(self, length: int) -> None:
        if length < 0 or length > MAX_LENGTH:
            raise ScarfTooLong(f"Scarf can be at most {MAX_LENGTH} long, got {length}")
        self.length = length

    def increase_length(self) -> None:
        if self.length >= MAX_LENGTH:
            raise ScarfMaxLength("Scarf already at maximum length")
        self.length += 1

    def decrease_length(self) -> None:
        if self.length <= 0:
            raise ScarfMinLength("Scarf already at minimum length")
        self.length -= 1

    def __int__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return str(self.length)

    @classmethod
    def read(cls, reader: ByteReader) -> "Scarf":
        offset = reader.position
        value = reader.read_int("u32", "scarf_length")
        if value > MAX_LENGTH:
            raise DecodeError("scarf_length", value, offset, f"must be at most {MAX_LENGTH}")
        return cls(value)

    def write(self, writer: ByteWriter) -> None:
        if not 0 <= self.length <= MAX_LENGTH:
            raise EncodeError(f"scarf_length {self.length} is out of range 0..{MAX_LENGTH}")
        writer.write_int("u32", self.length, "scarf_length")
