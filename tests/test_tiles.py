import pytest

from hint_engine.tiles import (
    Tile,
    TileState,
    empty_grid,
    key_states,
    make_row,
    row_from_feedback,
    row_is_blank,
)


def test_empty_grid_shape():
    grid = empty_grid()
    assert len(grid) == 6
    assert all(len(row) == 5 for row in grid)
    assert all(tile == Tile() for row in grid for tile in row)
    assert len(empty_grid(2)) == 2


def test_tile_normalises_letter_and_state():
    t = Tile("A", "green")
    assert t.letter == "a"
    assert t.state is TileState.GREEN


@pytest.mark.parametrize("letter", ["ab", "1", " "])
def test_tile_rejects_bad_letters(letter):
    with pytest.raises(ValueError):
        Tile(letter, "grey")


def test_tile_rejects_bad_state():
    with pytest.raises(ValueError):
        Tile("a", "purple")


def test_row_from_feedback_accepts_codes_and_states():
    by_code = row_from_feedback("crane", [0, 1, 2, 0, 2])
    by_state = row_from_feedback("crane", ["grey", "yellow", "green", "grey", "green"])
    assert by_code == by_state
    assert by_code[1] == Tile("r", TileState.YELLOW)
    with pytest.raises(ValueError):
        row_from_feedback("crane", [0, 1, 2])
    with pytest.raises(ValueError):
        row_from_feedback("crane", [0, 1, 2, 0, 7])


def test_row_is_blank():
    assert row_is_blank(empty_grid(1)[0])
    assert row_is_blank(make_row(zip("tests", ["unknown"] * 5)))
    assert not row_is_blank(make_row([("t", "grey")] + [("", "empty")] * 4))


def test_key_states_prefers_strongest_evidence():
    grid = [
        make_row(zip("stare", ["grey", "yellow", "grey", "unknown", "grey"])),
        make_row(zip("tonic", ["green", "grey", "grey", "grey", "grey"])),
        make_row(zip("eeeee", ["unknown"] * 5)),
    ]
    states = key_states(grid)
    assert states["t"] is TileState.GREEN
    assert states["s"] is TileState.GREY
    assert states["e"] is TileState.GREY
    assert "r" not in states
