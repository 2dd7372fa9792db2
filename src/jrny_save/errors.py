from __future__ import annotations

from typing import Any, Optional


class SaveError(Exception):
    """Base exception for savefile errors."""


class DecodeError(SaveError):
    """Raised when the input bytes do not form a valid savefile.

    ``field`` names what was being read, ``value`` is the offending value (or
    ``None`` when the input ran out) and ``offset`` is where the field starts.
    """

    def __init__(self, field: str, value: Any = None, offset: Optional[int] = None, reason: str = "") -> None:
        self.field = field
        self.value = value
        self.offset = offset
        self.reason = reason
        message = f"Invalid {field}"
        if value is not None:
            message += f" value {value!r}"
        if offset is not None:
            message += f" at offset {offset:#x}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EncodeError(SaveError):
    """Raised when a field cannot be written in its on-disk width."""


class FieldError(SaveError, ValueError):
    """Raised by field setters when the new value is not allowed."""


class LevelIdOutOfRange(FieldError):
    """Level id must be between 0 and 11."""


class LevelNameNotFound(FieldError):
    """No level with the given name exists."""


class SymbolIdOutOfRange(FieldError):
    """Symbol id must be between 0 and 20."""


class ScarfMaxLength(FieldError):
    """Scarf is already at its maximum length."""


class ScarfMinLength(FieldError):
    """Scarf is already at its minimum length."""


class ScarfTooLong(FieldError):
    """Scarf can be at most 30 long."""


class RobeValueOutOfRange(FieldError):
    """Raw robe value must be between 0 and 7."""


class TierOutOfRange(FieldError):
    """Tier must be in range from 1 to 4."""


class WhiteTierMinimum(FieldError):
    """White tier can not be lower than 2."""


class InvalidColor(FieldError):
    """Invalid color, expected red or white."""


class CollectedSymbolsOutOfRange(FieldError):
    """At most 21 symbols can be collected in a journey."""


class InvalidSteamId(FieldError):
    """Steam id of a companion must be nonzero."""


class CompanionSymbolOutOfRange(FieldError):
    """Companion symbol must be between 0 and 21."""


class NameTooLong(FieldError):
    """Name does not fit into its padded field."""


class InvalidName(FieldError):
    """Name can not be stored as a null padded string."""


class SettingsError(SaveError):
    """Raised when a settings file can not be parsed."""
