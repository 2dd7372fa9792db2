import pytest

from jrny_save.errors import SymbolIdOutOfRange
from jrny_save.symbol import MAX_SYMBOL_ID, SYMBOL_LAYOUT, SYMBOL_PARTS, Symbol, render_symbol


def test_parts_table_shape():
    assert len(SYMBOL_PARTS) == 17
    for part in SYMBOL_PARTS:
        assert len(part) == 3
        assert all(len(line) == 6 for line in part)
    assert sorted(SYMBOL_LAYOUT) == list(range(MAX_SYMBOL_ID + 1))


def test_set_by_id_and_wrapping():
    symbol = Symbol(0)
    symbol.set_by_id(20)
    assert symbol.id == 20
    with pytest.raises(SymbolIdOutOfRange):
        symbol.set_by_id(21)
    assert symbol.id == 20
    assert symbol.wrapping_next() == Symbol(0)
    assert Symbol(0).wrapping_previous() == Symbol(20)


@pytest.mark.parametrize("symbol_id", range(MAX_SYMBOL_ID + 1))
def test_every_symbol_renders(symbol_id):
    lines = Symbol(symbol_id).render().split("\n")
    assert len(lines) == 7
    assert all(len(line) == 14 for line in lines)
    assert lines[3] == " " * 14


def test_render_joins_quadrants():
    # symbol 16 is four copies of part 4
    part = SYMBOL_PARTS[4]
    art = str(Symbol(16)).split("\n")
    assert art[0] == f"{part[0]}  {part[0]}"
    assert art[6] == f"{part[2]}  {part[2]}"


def test_unknown_symbol_has_no_art():
    assert render_symbol(21) is None
