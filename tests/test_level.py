import pytest

from jrny_save.errors import LevelIdOutOfRange, LevelNameNotFound
from jrny_save.level import MAX_LEVEL_ID, NAMES, Level


def test_names_and_display():
    assert len(NAMES) == 12
    level = Level(1)
    assert level.name == "Broken Bridge"
    assert str(level) == "Broken Bridge"
    assert int(level) == 1


def test_set_by_id():
    level = Level(0)
    level.set_by_id(11)
    assert level.id == 11
    with pytest.raises(LevelIdOutOfRange):
        level.set_by_id(12)
    assert level.id == 11


def test_set_by_name():
    level = Level(0)
    level.set_by_name("Paradise")
    assert level.id == 7
    with pytest.raises(LevelNameNotFound):
        level.set_by_name("Atlantis")
    assert level.id == 7


def test_wrapping_navigation():
    assert Level(MAX_LEVEL_ID).wrapping_next() == Level(0)
    assert Level(0).wrapping_previous() == Level(MAX_LEVEL_ID)
    assert Level(4).wrapping_next() == Level(5)
    assert Level(4).wrapping_previous() == Level(3)

    level = Level(3)
    for _ in range(12):
        level = level.wrapping_next()
    assert level == Level(3)


def test_construct_out_of_range():
    with pytest.raises(LevelIdOutOfRange):
        Level(12)
