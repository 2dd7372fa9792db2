"""Robe color and tier, packed into one integer.

Raw values 0-3 are the red robe at tiers 1-4. Values from 4 upwards are the
white robe, which starts at tier 2, so value 4 is white tier 2 and value 6 is
white tier 4. Value 7 is accepted when reading and reports tier 5; it can not
be produced through the setters.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .errors import DecodeError, EncodeError, FieldError, InvalidColor, RobeValueOutOfRange, TierOutOfRange, WhiteTierMinimum
from .stream import ByteReader, ByteWriter

logger = logging.getLogger(__name__)

MIN_TIER = 1
MAX_TIER = 4
MAX_RED_TIER_ID = 3
MAX_VALUE = 7


class RobeColor(enum.Enum):
    RED = "Red"
    WHITE = "White"

    @classmethod
    def parse(cls, text: str) -> "RobeColor":
        if text in ("Red", "red"):
            return cls.RED
        if text in ("White", "white"):
            return cls.WHITE
        raise InvalidColor(f"Invalid color {text!r}, expected red or white")

    def __str__(self) -> str:
        return self.value


@dataclass
class Robe:
    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_VALUE:
            raise RobeValueOutOfRange(f"Robe value {self.value} is out of range 0..{MAX_VALUE}")

    def color(self) -> RobeColor:
        return RobeColor.WHITE if self.value > MAX_RED_TIER_ID else RobeColor.RED

    def set_color(self, color: RobeColor) -> None:
        current = self.color()
        if current is color:
            return
        if color is RobeColor.WHITE:
            # red tier 1 has no white counterpart, the lowest white tier is 2
            self.value = MAX_RED_TIER_ID + 1 if self.value == 0 else self.value + MAX_RED_TIER_ID
        else:
            self.value = min(self.value - MAX_RED_TIER_ID, MAX_RED_TIER_ID)

    def swap_colors(self) -> None:
        self.set_color(RobeColor.RED if self.color() is RobeColor.WHITE else RobeColor.WHITE)

    def tier(self) -> int:
        if self.color() is RobeColor.RED:
            return self.value + 1
        return self.value - MAX_RED_TIER_ID + 1

    def set_tier(self, tier: int) -> None:
        if tier < MIN_TIER or tier > MAX_TIER:
            raise TierOutOfRange(f"Tier must be in range from {MIN_TIER} to {MAX_TIER}, got {tier}")
        if self.color() is RobeColor.RED:
            self.value = tier - 1
        elif tier == MIN_TIER:
            raise WhiteTierMinimum("White tier can not be lower than 2")
        else:
            self.value = MAX_RED_TIER_ID + tier - 1

    def increase_tier_checked(self) -> None:
        self.set_tier(self.tier() + 1)

    def decrease_tier_checked(self) -> None:
        self.set_tier(self.tier() - 1)

    def increase_tier(self) -> None:
        """Raise the tier by one; does nothing at the top tier."""
        try:
            self.increase_tier_checked()
        except FieldError as e:
            logger.debug("Robe tier unchanged: %s", e)

    def decrease_tier(self) -> None:
        """Lower the tier by one; does nothing at the lowest tier of the current color."""
        try:
            self.decrease_tier_checked()
        except FieldError as e:
            logger.debug("Robe tier unchanged: %s", e)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def read(cls, reader: ByteReader) -> "Robe":
        offset = reader.position
        value = reader.read_int("u32", "robe")
        if value > MAX_VALUE:
            raise DecodeError("robe", value, offset, f"must be at most {MAX_VALUE}")
        return cls(value)

    def write(self, writer: ByteWriter) -> None:
        if not 0 <= self.value <= MAX_VALUE:
            raise EncodeError(f"robe value {self.value} is out of range 0..{MAX_VALUE}")
        writer.write_int("u32", self.value, "robe")
