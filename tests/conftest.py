import struct
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


MARKER = b"\x01\x00\x10\x01"

LAST_PLAYED = datetime(2023, 7, 28, 14, 17, 45, 893000, tzinfo=timezone.utc)
# sub-millisecond ticks the game wrote on top of LAST_PLAYED
LAST_PLAYED_EXTRA_TICKS = 4321

# (name, steam id, companion symbol); the first six are still traveling along
COMPANIONS = [
    ("Wanderer", 11873201, 6),
    ("Rythulian", 20458812, 19),
    ("Sable", 3309914, 3),
    ("Tamsin", 88123007, 11),
    ("Orrin", 512, 0),
    ("Kestrel", 70001234, 21),
    ("Machine", 45566778, 20),
    ("Ashgrove", 9988776, 9),
]

GLYPH_FLAGS = [0b101, 0b001, 0b1001, 0b111, 0b1101, 0b1010]
# bits 2, 3, 5, 7 and 8
MURAL_FLAGS = 0b1_1010_1100

RESERVED = {
    "_reserved0": bytes(range(1, 9)),
    "_reserved1": b"\xaa\xbb\xcc\xdd",
    "_reserved2": bytes(range(100, 122)),
    "_reserved3": b"\x10\x20\x30\x40",
    "_reserved4": b"\x5a" * 2404,
    "_reserved5": bytes(i % 251 for i in range(1024)),
    "_reserved6": b"\x07" * 24,
}
SYMBOL_RESERVED = b"\x00\x00\x80\x3f"
REMAINDER = bytes(40) + b"trailing data"


def filetime(value: datetime) -> int:
    unix_ms = (value - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(milliseconds=1)
    return (unix_ms + 11_644_473_600_000) * 10_000


def build_savefile(
    robe=3,
    symbol=7,
    scarf_length=27,
    current_level=1,
    total_collected_symbols=107,
    collected_symbols=21,
    murals=MURAL_FLAGS,
    last_played_ticks=None,
    journey_count=21,
    glyph_flags=GLYPH_FLAGS,
    companions=COMPANIONS,
    companions_met=6,
    total_companions_met=21,
    remainder=REMAINDER,
) -> bytes:
    """Assemble savefile bytes field by field in file order."""
    if last_played_ticks is None:
        last_played_ticks = filetime(LAST_PLAYED) + LAST_PLAYED_EXTRA_TICKS
    out = bytearray()
    out += RESERVED["_reserved0"]
    out += struct.pack("<III", robe, symbol, scarf_length)
    out += RESERVED["_reserved1"]
    out += struct.pack("<QII", current_level, total_collected_symbols, collected_symbols)
    out += struct.pack("<H", murals)
    out += RESERVED["_reserved2"]
    out += struct.pack("<q", last_played_ticks)
    out += RESERVED["_reserved3"]
    out += struct.pack("<Q", journey_count)
    for level, flags in enumerate(glyph_flags):
        out += bytes([flags]) + bytes([level + 1]) * 343
    out += RESERVED["_reserved4"]
    section = bytearray()
    for name, _, companion_symbol in companions:
        section += name.encode("utf-8").ljust(52, b"\x00") + SYMBOL_RESERVED + struct.pack("<I", companion_symbol)
    out += section.ljust(960, b"\x00")
    out += struct.pack("<I", companions_met)
    out += RESERVED["_reserved5"]
    out += struct.pack("<I", total_companions_met)
    out += RESERVED["_reserved6"]
    for name, steam_id, _ in companions:
        out += name.encode("utf-8").ljust(24, b"\x00") + struct.pack("<I", steam_id) + MARKER
    out += remainder
    return bytes(out)


# offsets of fields in a file built by build_savefile
OFFSET_ROBE = 8
OFFSET_SYMBOL = 12
OFFSET_LEVEL = 24
OFFSET_COLLECTED = 36
OFFSET_LAST_PLAYED = 64
OFFSET_GLYPHS = 84
OFFSET_COMPANION_SYMBOLS = OFFSET_GLYPHS + 6 * 344 + 2404
OFFSET_COMPANIONS = OFFSET_COMPANION_SYMBOLS + 960 + 4 + 1024 + 4 + 24


@pytest.fixture()
def save_bytes() -> bytes:
    return build_savefile()


@pytest.fixture()
def make_save_bytes():
    return build_savefile


@pytest.fixture()
def savefile(save_bytes):
    from jrny_save import decode_save

    return decode_save(save_bytes)
