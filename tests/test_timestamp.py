from datetime import datetime, timezone

import pytest

from jrny_save.errors import DecodeError
from jrny_save.timestamp import datetime_to_filetime, filetime_to_datetime

from conftest import LAST_PLAYED, filetime


def test_filetime_epoch_is_1601():
    assert filetime_to_datetime(0) == datetime(1601, 1, 1, tzinfo=timezone.utc)
    assert datetime_to_filetime(datetime(1601, 1, 1, tzinfo=timezone.utc)) == 0


def test_unix_epoch_offset():
    assert datetime_to_filetime(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 116_444_736_000_000_000


def test_round_trip_millisecond_instant():
    ticks = datetime_to_filetime(LAST_PLAYED)
    assert ticks == filetime(LAST_PLAYED)
    assert filetime_to_datetime(ticks) == LAST_PLAYED


def test_sub_millisecond_ticks_are_dropped():
    ticks = filetime(LAST_PLAYED) + 9_999
    decoded = filetime_to_datetime(ticks)
    assert decoded == LAST_PLAYED
    assert datetime_to_filetime(decoded) == ticks - 9_999


def test_negative_ticks_truncate_toward_zero():
    # -1.5 ms before 1601 truncates to -1 ms
    decoded = filetime_to_datetime(-15_000)
    assert decoded == datetime(1600, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)


def test_naive_datetime_is_utc():
    naive = LAST_PLAYED.replace(tzinfo=None)
    assert datetime_to_filetime(naive) == datetime_to_filetime(LAST_PLAYED)


def test_out_of_range_ticks_raise_decode_error():
    with pytest.raises(DecodeError) as exc:
        filetime_to_datetime((1 << 63) - 1)
    assert exc.value.field == "last_played"
