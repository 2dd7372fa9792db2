from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .errors import DecodeError, EncodeError, SymbolIdOutOfRange
from .stream import ByteReader, ByteWriter

MAX_SYMBOL_ID = 20

PART_WIDTH = 6
PART_HEIGHT = 3

# Quadrant building blocks, PART_HEIGHT lines of PART_WIDTH characters each.
SYMBOL_PARTS: Tuple[Tuple[str, str, str], ...] = (
    ("  __  ", " /  \\ ", "|    |"),
    ("  __  ", " /  \\ ", " \\__/ "),
    ("|    |", " \\  / ", "  \\/  "),
    ("  /\\  ", " /  \\ ", "|    |"),
    ("######", "#    #", "######"),
    ("  /\\  ", " /__\\ ", "      "),
    ("\\    /", " \\  / ", "  \\/  "),
    ("|    |", "|    |", "|    |"),
    ("------", "      ", "------"),
    ("      ", "  ()  ", "      "),
    ("\\     ", " \\    ", "  \\   "),
    ("     /", "    / ", "   /  "),
    ("  ||  ", "  ||  ", "  ||  "),
    ("======", "      ", "      "),
    (" (  ) ", "(    )", " (  ) "),
    ("/\\/\\/\\", "      ", "\\/\\/\\/"),
    ("  <>  ", " <  > ", "  <>  "),
)

# symbol id -> (top left, top right, bottom left, bottom right)
SYMBOL_LAYOUT: Dict[int, Tuple[int, int, int, int]] = {
    0: (0, 1, 3, 2),
    1: (4, 4, 7, 7),
    2: (9, 9, 13, 2),
    3: (15, 16, 9, 9),
    4: (4, 9, 4, 9),
    5: (15, 12, 3, 9),
    6: (5, 5, 9, 12),
    7: (12, 9, 15, 15),
    8: (7, 9, 12, 8),
    9: (12, 12, 9, 9),
    10: (14, 7, 14, 7),
    11: (8, 8, 13, 13),
    12: (2, 3, 2, 3),
    13: (10, 7, 7, 12),
    14: (7, 7, 10, 12),
    15: (15, 15, 15, 15),
    16: (4, 4, 4, 4),
    17: (11, 10, 11, 10),
    18: (12, 8, 12, 8),
    19: (6, 6, 11, 10),
    20: (12, 9, 11, 10),
}

_GAP = "  "
_EMPTY_LINE = " " * (PART_WIDTH * 2 + len(_GAP))


def render_symbol(id: int) -> Optional[str]:
    """Return the ASCII art for a symbol id, or None for unknown ids."""
    layout = SYMBOL_LAYOUT.get(id)
    if layout is None:
        return None
    top_left, top_right, btm_left, btm_right = (SYMBOL_PARTS[i] for i in layout)
    top = [f"{left}{_GAP}{right}" for left, right in zip(top_left, top_right)]
    bottom = [f"{left}{_GAP}{right}" for left, right in zip(btm_left, btm_right)]
    return "\n".join(top + [_EMPTY_LINE] + bottom)


@dataclass
class Symbol:
    """The symbol worn by the player, 0 to 20."""

    id: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.id <= MAX_SYMBOL_ID:
            raise SymbolIdOutOfRange(f"Symbol id {self.id} is out of range 0..{MAX_SYMBOL_ID}")

    def set_by_id(self, id: int) -> None:
        if not 0 <= id <= MAX_SYMBOL_ID:
            raise SymbolIdOutOfRange(f"Symbol id {id} is out of range 0..{MAX_SYMBOL_ID}")
        self.id = id

    def wrapping_next(self) -> "Symbol":
        return Symbol(0 if self.id >= MAX_SYMBOL_ID else self.id + 1)

    def wrapping_previous(self) -> "Symbol":
        return Symbol(MAX_SYMBOL_ID if self.id == 0 else self.id - 1)

    def render(self) -> str:
        return render_symbol(self.id) or ""

    def __int__(self) -> int:
        return self.id

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def read(cls, reader: ByteReader) -> "Symbol":
        offset = reader.position
        value = reader.read_int("u32", "symbol")
        if value > MAX_SYMBOL_ID:
            raise DecodeError("symbol", value, offset, f"must be at most {MAX_SYMBOL_ID}")
        return cls(value)

    def write(self, writer: ByteWriter) -> None:
        if not 0 <= self.id <= MAX_SYMBOL_ID:
            raise EncodeError(f"symbol {self.id} is out of range 0..{MAX_SYMBOL_ID}")
        writer.write_int("u32", self.id, "symbol")
