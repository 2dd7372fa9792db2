"""Windows FILETIME conversion for the last played field.

Ticks are 100 ns intervals since 1601-01-01. Sub-millisecond ticks are
dropped when converting to a ``datetime``, so ``filetime_to_datetime`` is
lossy; ``datetime_to_filetime`` is its exact inverse for millisecond values.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .errors import DecodeError

TICKS_PER_MS = 10_000
EPOCH_OFFSET_MS = 11_644_473_600_000

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def filetime_to_datetime(ticks: int) -> datetime:
    """Convert FILETIME ticks to an aware UTC datetime with millisecond precision."""
    # integer division truncates toward zero, like the game's own reader
    ms_since_1601 = abs(ticks) // TICKS_PER_MS
    if ticks < 0:
        ms_since_1601 = -ms_since_1601
    unix_ms = ms_since_1601 - EPOCH_OFFSET_MS
    try:
        return _UNIX_EPOCH + timedelta(milliseconds=unix_ms)
    except OverflowError as e:
        raise DecodeError("last_played", ticks, reason="timestamp out of range") from e


def datetime_to_filetime(value: datetime) -> int:
    """Convert a datetime to FILETIME ticks. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    unix_ms = (value - _UNIX_EPOCH) // _ONE_MS
    return (unix_ms + EPOCH_OFFSET_MS) * TICKS_PER_MS
