"""Reader and writer for Journey savefiles.

This package provides:
- A codec for the fixed binary layout (``decode_save`` / ``encode_save``)
- Validated field types for robe, symbol, scarf and level
- Glyph and mural trackers and the two companion lists
- Path based loading and atomic writing with backups

Unknown regions of the file are kept as raw bytes, so a decoded file is
written back byte for byte unless fields were changed.
"""

from .codec import decode_save, encode_save, read_save, write_save
from .companion import CompanionWithId, CompanionWithSymbol
from .errors import (
    CollectedSymbolsOutOfRange,
    CompanionSymbolOutOfRange,
    DecodeError,
    EncodeError,
    FieldError,
    InvalidColor,
    InvalidName,
    InvalidSteamId,
    LevelIdOutOfRange,
    LevelNameNotFound,
    NameTooLong,
    RobeValueOutOfRange,
    SaveError,
    SettingsError,
    ScarfMaxLength,
    ScarfMinLength,
    ScarfTooLong,
    SymbolIdOutOfRange,
    TierOutOfRange,
    WhiteTierMinimum,
)
from .glyphs import Glyphs
from .level import NAMES as LEVEL_NAMES, Level
from .logging_config import configure_logging
from .murals import Murals
from .report import render_report
from .robe import Robe, RobeColor
from .savefile import Savefile
from .scarf import Scarf
from .settings import Settings
from .storage import load_savefile, write_savefile
from .symbol import Symbol

__all__ = [
    "decode_save",
    "encode_save",
    "read_save",
    "write_save",
    "load_savefile",
    "write_savefile",
    "render_report",
    "configure_logging",
    "Settings",
    "Savefile",
    "Robe",
    "RobeColor",
    "Symbol",
    "Scarf",
    "Level",
    "LEVEL_NAMES",
    "Glyphs",
    "Murals",
    "CompanionWithId",
    "CompanionWithSymbol",
    "SaveError",
    "SettingsError",
    "DecodeError",
    "EncodeError",
    "FieldError",
    "LevelIdOutOfRange",
    "LevelNameNotFound",
    "SymbolIdOutOfRange",
    "ScarfMaxLength",
    "ScarfMinLength",
    "ScarfTooLong",
    "RobeValueOutOfRange",
    "TierOutOfRange",
    "WhiteTierMinimum",
    "InvalidColor",
    "InvalidName",
    "CollectedSymbolsOutOfRange",
    "InvalidSteamId",
    "CompanionSymbolOutOfRange",
    "NameTooLong",
]
